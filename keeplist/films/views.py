"""Derived views over the films snapshot.

``favorites``/``non_favorites`` are lazy and keep snapshot order. The filter
mode is its own piece of state; changing it never touches the store.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, Iterator, Tuple

from keeplist.shared.core.observable import Listener, Listeners, ObservableValue, Subscription

from .models import Film
from .store import FilmsStore

logger = logging.getLogger(__name__)


class FilterMode(Enum):
    """Which films the movies page shows."""
    ALL = "all"
    FAVORITES_ONLY = "favorites"
    NON_FAVORITES_ONLY = "non_favorites"

    @property
    def label(self) -> str:
        return {
            FilterMode.ALL: "All",
            FilterMode.FAVORITES_ONLY: "Favorites",
            FilterMode.NON_FAVORITES_ONLY: "Non-favorites",
        }[self]


def favorites(snapshot: Iterable[Film]) -> Iterator[Film]:
    return (film for film in snapshot if film.is_favorite)


def non_favorites(snapshot: Iterable[Film]) -> Iterator[Film]:
    return (film for film in snapshot if not film.is_favorite)


def select(snapshot: Iterable[Film], mode: FilterMode) -> Iterator[Film]:
    """Apply ``mode`` to ``snapshot``."""
    if mode is FilterMode.FAVORITES_ONLY:
        return favorites(snapshot)
    if mode is FilterMode.NON_FAVORITES_ONLY:
        return non_favorites(snapshot)
    return iter(snapshot)


class FilterModeState(ObservableValue[FilterMode]):
    """Current filter mode, observable by the presentation layer."""

    def __init__(self, initial: FilterMode = FilterMode.ALL) -> None:
        super().__init__(initial, name="films.filter")


class FilmListView:
    """The films the movies page should render right now.

    Recomputed whenever the store publishes or the filter mode changes, then
    pushed to subscribers. Call :meth:`close` to detach from both sources.
    """

    def __init__(self, store: FilmsStore, filter_state: FilterModeState) -> None:
        self.store = store
        self.filter_state = filter_state
        self._listeners: Listeners[Tuple[Film, ...]] = Listeners("films.view")
        self._visible = self._compute()
        self._store_sub = store.subscribe(self._on_source_changed)
        self._filter_sub = filter_state.subscribe(self._on_source_changed)

    def _compute(self) -> Tuple[Film, ...]:
        return tuple(select(self.store.snapshot(), self.filter_state.value))

    def _on_source_changed(self, _value: object) -> None:
        self._visible = self._compute()
        self._listeners.notify(self._visible)

    def visible(self) -> Tuple[Film, ...]:
        return self._visible

    def subscribe(self, listener: Listener[Tuple[Film, ...]]) -> Subscription[Tuple[Film, ...]]:
        return self._listeners.add(listener)

    def close(self) -> None:
        self._store_sub.cancel()
        self._filter_sub.cancel()
        self._listeners.clear()
