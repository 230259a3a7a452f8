"""Movies page state.

Turns intents arriving on the EventBus into FilmsStore / filter calls and
announces each resulting snapshot on ``films.changed``.
"""

from __future__ import annotations

import logging
from typing import Optional

from keeplist.films.store import FilmsStore
from keeplist.films.views import FilmListView, FilterMode, FilterModeState
from keeplist.shared.core import events
from keeplist.shared.core.event_bus import EventBus, EventPayload

logger = logging.getLogger(__name__)


class FilmsState:
    """Reactive state for the movies page.

    The store and filter mode are read synchronously by widgets; the bus is
    only the way in for user intents.
    """

    def __init__(
        self,
        event_bus: EventBus,
        store: Optional[FilmsStore] = None,
        default_filter: FilterMode = FilterMode.ALL,
    ) -> None:
        """Initialize movies state.

        Args:
            event_bus: The shared event bus
            store: Films store; a store seeded with the built-in catalogue if omitted
            default_filter: Filter mode at startup
        """
        self.bus = event_bus
        self.store = store if store is not None else FilmsStore()
        self.filter_mode = FilterModeState(default_filter)
        self.view = FilmListView(self.store, self.filter_mode)
        self._started = False

    async def initialize(self) -> None:
        """Bind intent handlers to the EventBus. Safe to call twice."""
        if self._started:
            return

        await self.bus.subscribe(events.TOPIC_FILMS_TOGGLE_FAVORITE, self._handle_toggle_favorite)
        await self.bus.subscribe(events.TOPIC_FILMS_SET_FAVORITE, self._handle_set_favorite)
        await self.bus.subscribe(events.TOPIC_FILMS_FILTER, self._handle_filter)

        self._started = True

    # --- Public Actions ---

    async def toggle_favorite(self, film_id: str) -> None:
        await self.bus.publish(
            events.TOPIC_FILMS_TOGGLE_FAVORITE,
            events.create_toggle_favorite_event(film_id),
        )

    async def set_favorite(self, film_id: str, is_favorite: bool) -> None:
        await self.bus.publish(
            events.TOPIC_FILMS_SET_FAVORITE,
            events.create_set_favorite_event(film_id, is_favorite),
        )

    async def change_filter(self, mode: FilterMode) -> None:
        await self.bus.publish(events.TOPIC_FILMS_FILTER, events.create_filter_event(mode.value))

    # --- Event Handlers ---

    async def _handle_toggle_favorite(self, payload: EventPayload) -> None:
        film_id = payload.get("id")
        if film_id is None:
            logger.warning("Received films.toggle_favorite without an id")
            return
        if self.store.toggle(str(film_id)):
            await self._announce()

    async def _handle_set_favorite(self, payload: EventPayload) -> None:
        film_id = payload.get("id")
        is_favorite = payload.get("is_favorite")
        if film_id is None or not isinstance(is_favorite, bool):
            logger.warning(f"Ignoring malformed films.set_favorite payload: {payload}")
            return
        if self.store.update(str(film_id), is_favorite):
            await self._announce()

    async def _handle_filter(self, payload: EventPayload) -> None:
        try:
            mode = FilterMode(payload.get("mode"))
        except ValueError:
            logger.warning(f"Ignoring unknown filter mode {payload.get('mode')!r}")
            return
        self.filter_mode.value = mode

    async def _announce(self) -> None:
        await self.bus.publish(
            events.TOPIC_FILMS_CHANGED,
            events.create_films_changed_event(self.store.snapshot()),
        )
