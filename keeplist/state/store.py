"""Global State Store - Service Locator Pattern.

Provides centralized access to both lists' state from any UI component.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from keeplist.films.catalog import load_films
from keeplist.films.store import FilmsStore
from keeplist.films.views import FilterMode
from keeplist.people.models import Person
from keeplist.people.store import PeopleStore
from keeplist.shared.core.configuration import SystemConfig
from keeplist.shared.core.event_bus import EventBus
from keeplist.shared.core.exceptions import StoreAlreadyInitializedError, StoreNotInitializedError
from keeplist.shared.domain.identity import provider_from_name, set_identity_provider

from .films_state import FilmsState
from .people_state import PeopleState

logger = logging.getLogger(__name__)


class Store:
    """Global state store for the application.

    Usage:
        # During app initialization
        Store.initialize(event_bus, config)

        # In any UI component
        store = Store.get()
        store.films.store.snapshot()
    """

    _instance: Optional['Store'] = None

    def __init__(self, event_bus: EventBus, config: Optional[SystemConfig] = None) -> None:
        """Build both lists' state from ``config``.

        Note: Do not call directly. Use Store.initialize() instead.

        Args:
            event_bus: The shared event bus instance
            config: Merged configuration; defaults when omitted
        """
        config = config or SystemConfig()
        self.bus = event_bus
        self.config = config

        set_identity_provider(provider_from_name(config.people.identity_provider))

        seed_file = Path(config.films.seed_file) if config.films.seed_file else None
        self.films = FilmsState(
            event_bus,
            FilmsStore(load_films(seed_file)),
            FilterMode(config.films.default_filter),
        )
        self.people = PeopleState(
            event_bus,
            PeopleStore([Person.create(name=p.name, age=p.age) for p in config.people.seed]),
        )

    async def start(self) -> None:
        """Bind every state object to the EventBus."""
        await self.films.initialize()
        await self.people.initialize()
        logger.info(
            f"Store started: {len(self.films.store)} film(s), {len(self.people.store)} person(s)"
        )

    @classmethod
    def initialize(cls, event_bus: EventBus, config: Optional[SystemConfig] = None) -> 'Store':
        """Initialize the global store instance.

        Should be called once during application startup before any UI
        components are created.

        Raises:
            StoreAlreadyInitializedError: If store is already initialized
        """
        if cls._instance is not None:
            raise StoreAlreadyInitializedError()

        cls._instance = cls(event_bus, config)
        return cls._instance

    @classmethod
    def get(cls) -> 'Store':
        """Get the global store instance.

        Raises:
            StoreNotInitializedError: If store has not been initialized
        """
        if cls._instance is None:
            raise StoreNotInitializedError()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the store instance. Used by tests."""
        cls._instance = None
