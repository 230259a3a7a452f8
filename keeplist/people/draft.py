"""State for one create/update person interaction.

A draft lives exactly as long as its dialog. Text is kept raw, as typed, and
parsed only when read.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .models import Person
from .store import PeopleStore

logger = logging.getLogger(__name__)


def parse_age(text: str) -> Optional[int]:
    """Parse an age field; empty or non-integer text counts as absent."""
    try:
        return int(text.strip())
    except ValueError:
        return None


@dataclass
class PersonDraft:
    name_text: str = ""
    age_text: str = ""
    existing: Optional[Person] = None

    @classmethod
    def for_create(cls) -> "PersonDraft":
        return cls()

    @classmethod
    def for_update(cls, person: Person) -> "PersonDraft":
        """Start a draft prefilled from ``person``."""
        return cls(name_text=person.name, age_text=str(person.age), existing=person)

    @property
    def is_update(self) -> bool:
        return self.existing is not None

    @property
    def name(self) -> Optional[str]:
        name = self.name_text.strip()
        return name or None

    @property
    def age(self) -> Optional[int]:
        return parse_age(self.age_text)

    @property
    def is_complete(self) -> bool:
        return self.name is not None and self.age is not None

    def commit(self, store: PeopleStore) -> Optional[Person]:
        """Apply the draft to ``store``.

        Returns:
            The created or updated person, or None when a required field is
            missing (in which case the store is not touched). For an update
            whose person has since left the store, the store is unchanged and
            the draft's computed person is still returned.
        """
        name, age = self.name, self.age
        if name is None or age is None:
            logger.debug("Person draft incomplete, nothing committed")
            return None

        if self.existing is None:
            person = Person.create(name=name, age=age)
            store.add(person)
            return person

        store.update_person(self.existing, name=name, age=age)
        return store.get(self.existing.uuid) or self.existing.updated(name=name, age=age)
