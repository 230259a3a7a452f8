"""In-memory owner of an ordered entity collection.

Every mutation replaces the whole snapshot (a tuple) and then notifies
listeners synchronously, in registration order, with the new snapshot.
Readers therefore never see a half-applied change.
"""

from __future__ import annotations

import logging
from typing import Any, Generic, Iterable, Iterator, Optional, Tuple, TypeVar, Union

from keeplist.shared.core.observable import Listener, Listeners, Subscription
from keeplist.shared.domain.entity import Entity

E = TypeVar("E", bound=Entity)

logger = logging.getLogger(__name__)


class EntityStore(Generic[E]):
    """Ordered collection of entities with publish/subscribe.

    Usage:
        store = EntityStore.initialize(seed)
        store.subscribe(lambda snapshot: render(snapshot))
        store.update_by_identity("2", is_favorite=True)
    """

    name = "entities"

    def __init__(self, seed: Iterable[E] = ()) -> None:
        self._items: Tuple[E, ...] = tuple(seed)
        self._listeners: Listeners[Tuple[E, ...]] = Listeners(self.name)

    @classmethod
    def initialize(cls, seed: Iterable[E] = ()) -> "EntityStore[E]":
        """Build a store holding ``seed`` as its starting snapshot."""
        return cls(seed)

    # --- Read access ---

    def snapshot(self) -> Tuple[E, ...]:
        """Current collection; a tuple, so callers cannot alter the store."""
        return self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[E]:
        return iter(self._items)

    def __contains__(self, item: object) -> bool:
        identity = item.identity if isinstance(item, Entity) else item
        return self._index_of(identity) is not None

    def get(self, identity: str) -> Optional[E]:
        index = self._index_of(identity)
        return None if index is None else self._items[index]

    # --- Subscriptions ---

    def subscribe(self, listener: Listener[Tuple[E, ...]]) -> Subscription[Tuple[E, ...]]:
        return self._listeners.add(listener)

    def unsubscribe(self, listener: Listener[Tuple[E, ...]]) -> None:
        self._listeners.remove(listener)

    @property
    def subscriber_count(self) -> int:
        return len(self._listeners)

    # --- Mutations ---

    def add(self, entity: E) -> None:
        """Append ``entity``. Duplicate identities are not checked."""
        self._publish(self._items + (entity,))
        logger.debug(f"{self.name}: added {entity.identity}")

    def remove(self, entity_or_identity: Union[E, str]) -> bool:
        """Remove the first entity with a matching identity.

        Returns:
            True if something was removed. Unknown identities are a no-op and
            publish nothing.
        """
        identity = self._identity_of(entity_or_identity)
        index = self._index_of(identity)
        if index is None:
            logger.debug(f"{self.name}: remove ignored, no entity with identity {identity!r}")
            return False
        self._publish(self._items[:index] + self._items[index + 1:])
        logger.debug(f"{self.name}: removed {identity}")
        return True

    def update_by_identity(self, entity_or_identity: Union[E, str], **changes: Any) -> bool:
        """Replace the matching entity, in place, with a copy carrying ``changes``.

        Returns:
            True if the store changed. Nothing is published when the identity
            is unknown or when every supplied value equals the current one.

        Raises:
            ImmutableFieldError: If ``changes`` names a field that may not change
        """
        identity = self._identity_of(entity_or_identity)
        index = self._index_of(identity)
        if index is None:
            logger.debug(f"{self.name}: update ignored, no entity with identity {identity!r}")
            return False

        current = self._items[index]
        replacement = current.with_changes(**changes)
        if not replacement.differs_from(current):
            return False

        items = list(self._items)
        items[index] = replacement
        self._publish(tuple(items))
        logger.debug(f"{self.name}: updated {identity} with {changes}")
        return True

    # --- Internals ---

    def _publish(self, items: Tuple[E, ...]) -> None:
        self._items = items
        self._listeners.notify(items)

    def _index_of(self, identity: Any) -> Optional[int]:
        for index, item in enumerate(self._items):
            if item.identity == identity:
                return index
        return None

    @staticmethod
    def _identity_of(entity_or_identity: Union[Entity, str]) -> str:
        if isinstance(entity_or_identity, Entity):
            return entity_or_identity.identity
        return entity_or_identity
