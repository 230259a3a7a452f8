from __future__ import annotations

import types

from keeplist.films import (
    ALL_FILMS,
    FilmListView,
    FilterMode,
    FilterModeState,
    favorites,
    non_favorites,
    select,
)


def test_favorites_empty_before_toggle_then_film_two(films_store):
    assert list(favorites(films_store.snapshot())) == []

    films_store.toggle("2")

    assert [film.id for film in favorites(films_store.snapshot())] == ["2"]


def test_views_are_lazy_and_keep_order(films_store):
    films_store.toggle("4")
    films_store.toggle("1")
    snapshot = films_store.snapshot()

    favs = favorites(snapshot)
    assert isinstance(favs, types.GeneratorType)
    assert [film.id for film in favs] == ["1", "4"]
    assert [film.id for film in non_favorites(snapshot)] == ["2", "3"]


def test_select_by_mode(films_store):
    films_store.toggle("3")
    snapshot = films_store.snapshot()

    assert [f.id for f in select(snapshot, FilterMode.ALL)] == ["1", "2", "3", "4"]
    assert [f.id for f in select(snapshot, FilterMode.FAVORITES_ONLY)] == ["3"]
    assert [f.id for f in select(snapshot, FilterMode.NON_FAVORITES_ONLY)] == ["1", "2", "4"]


def test_filter_mode_state_notifies_on_change_only(recorder):
    state = FilterModeState()
    state.subscribe(recorder)

    state.value = FilterMode.ALL
    assert recorder.count == 0

    state.value = FilterMode.FAVORITES_ONLY
    assert state.value is FilterMode.FAVORITES_ONLY
    assert recorder.calls == [FilterMode.FAVORITES_ONLY]


def test_filter_mode_does_not_touch_store(films_store, recorder):
    films_store.subscribe(recorder)
    state = FilterModeState()

    state.value = FilterMode.NON_FAVORITES_ONLY

    assert recorder.count == 0
    assert films_store.snapshot() == ALL_FILMS


def test_film_list_view_follows_store_and_filter(films_store, recorder):
    filter_state = FilterModeState(FilterMode.FAVORITES_ONLY)
    view = FilmListView(films_store, filter_state)
    view.subscribe(recorder)
    assert view.visible() == ()

    films_store.toggle("2")
    assert [f.id for f in view.visible()] == ["2"]

    filter_state.value = FilterMode.NON_FAVORITES_ONLY
    assert [f.id for f in view.visible()] == ["1", "3", "4"]

    assert recorder.count == 2
    assert recorder.calls[-1] == view.visible()


def test_film_list_view_close_detaches(films_store, recorder):
    filter_state = FilterModeState()
    view = FilmListView(films_store, filter_state)
    view.subscribe(recorder)

    view.close()
    films_store.toggle("1")
    filter_state.value = FilterMode.FAVORITES_ONLY

    assert recorder.count == 0
    assert films_store.subscriber_count == 0


def test_filter_mode_values_and_labels():
    assert FilterMode("favorites") is FilterMode.FAVORITES_ONLY
    assert [mode.label for mode in FilterMode] == ["All", "Favorites", "Non-favorites"]
