from __future__ import annotations

import logging
from typing import Iterable, Union

from keeplist.shared.domain.collection import EntityStore

from .catalog import ALL_FILMS
from .models import Film

logger = logging.getLogger(__name__)


class FilmsStore(EntityStore[Film]):
    """The movies list. Films are never added or removed after seeding in
    the app; only their favourite flag moves."""

    name = "films"

    def __init__(self, seed: Iterable[Film] = ALL_FILMS) -> None:
        super().__init__(seed)

    def update(self, film: Union[Film, str], is_favorite: bool) -> bool:
        """Set the favourite flag of the film with ``film``'s id."""
        return self.update_by_identity(film, is_favorite=is_favorite)

    def toggle(self, film: Union[Film, str]) -> bool:
        """Flip the favourite flag. Unknown ids are ignored."""
        current = self.get(self._identity_of(film))
        if current is None:
            logger.debug(f"films: toggle ignored, unknown film {film!r}")
            return False
        return self.update(current, not current.is_favorite)
