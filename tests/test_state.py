from __future__ import annotations

import asyncio

import pytest

from keeplist.films import FilterMode
from keeplist.people import PersonDraft
from keeplist.shared.core import events
from keeplist.shared.core.configuration import SystemConfig
from keeplist.shared.core.exceptions import StoreAlreadyInitializedError, StoreNotInitializedError
from keeplist.state import FilmsState, PeopleState, Store


async def _collect(bus, topic):
    received = []

    async def handler(payload):
        received.append(payload)

    await bus.subscribe(topic, handler)
    return received


@pytest.mark.asyncio
async def test_toggle_intent_updates_store_and_announces(bus):
    state = FilmsState(bus)
    await state.initialize()
    changed = await _collect(bus, events.TOPIC_FILMS_CHANGED)

    await state.toggle_favorite("2")
    await bus.wait_until_idle()

    assert state.store.get("2").is_favorite is True
    assert len(changed) == 1
    assert [film["is_favorite"] for film in changed[0]["films"]] == [False, True, False, False]


@pytest.mark.asyncio
async def test_set_favorite_to_current_value_is_silent(bus):
    state = FilmsState(bus)
    await state.initialize()
    changed = await _collect(bus, events.TOPIC_FILMS_CHANGED)

    await state.set_favorite("1", False)
    await state.toggle_favorite("missing")
    await bus.wait_until_idle()

    assert changed == []


@pytest.mark.asyncio
async def test_filter_intent_changes_view_not_store(bus, recorder):
    state = FilmsState(bus)
    await state.initialize()
    state.store.subscribe(recorder)
    state.store.toggle("3")
    recorder.calls.clear()

    await state.change_filter(FilterMode.FAVORITES_ONLY)
    await bus.wait_until_idle()

    assert state.filter_mode.value is FilterMode.FAVORITES_ONLY
    assert [film.id for film in state.view.visible()] == ["3"]
    assert recorder.count == 0


@pytest.mark.asyncio
async def test_malformed_intents_are_ignored(bus):
    state = FilmsState(bus)
    await state.initialize()

    await bus.publish(events.TOPIC_FILMS_FILTER, {"mode": "sideways"})
    await bus.publish(events.TOPIC_FILMS_SET_FAVORITE, {"id": "1"})
    await bus.publish(events.TOPIC_FILMS_TOGGLE_FAVORITE, {})
    await bus.wait_until_idle()

    assert state.filter_mode.value is FilterMode.ALL
    assert not any(film.is_favorite for film in state.store)


@pytest.mark.asyncio
async def test_initialize_twice_subscribes_once(bus):
    state = FilmsState(bus)
    await state.initialize()
    await state.initialize()

    await state.toggle_favorite("1")
    await bus.wait_until_idle()

    assert state.store.get("1").is_favorite is True


@pytest.mark.asyncio
async def test_people_create_update_delete(bus, sequential_ids):
    state = PeopleState(bus)
    await state.initialize()
    changed = await _collect(bus, events.TOPIC_PEOPLE_CHANGED)

    draft = PersonDraft(name_text="Ada", age_text="30")
    assert await state.submit(draft) is True
    await bus.wait_until_idle()

    (ada,) = state.store.snapshot()
    assert (ada.name, ada.age, ada.uuid) == ("Ada", 30, "1")

    # Unchanged values: no announcement
    assert await state.submit(PersonDraft.for_update(ada)) is True
    await bus.wait_until_idle()
    assert len(changed) == 1

    edit = PersonDraft.for_update(ada)
    edit.age_text = "31"
    await state.submit(edit)
    await bus.wait_until_idle()
    assert state.store.get("1").age == 31
    assert changed[-1]["people"] == [{"name": "Ada", "age": 31, "uuid": "1"}]

    await state.delete(ada)
    await bus.wait_until_idle()
    assert state.store.snapshot() == ()
    assert changed[-1] == {"people": []}
    assert len(changed) == 3


@pytest.mark.asyncio
async def test_incomplete_draft_publishes_nothing(bus):
    state = PeopleState(bus)
    await state.initialize()
    creates = await _collect(bus, events.TOPIC_PEOPLE_CREATE)

    assert await state.submit(PersonDraft(name_text="Ada", age_text="")) is False
    await bus.wait_until_idle()

    assert creates == []
    assert len(state.store) == 0


@pytest.mark.asyncio
async def test_delete_unknown_person_is_silent(bus):
    state = PeopleState(bus)
    await state.initialize()
    changed = await _collect(bus, events.TOPIC_PEOPLE_CHANGED)

    await bus.publish(events.TOPIC_PEOPLE_DELETE, events.create_person_delete_event("nobody"))
    await bus.publish(events.TOPIC_PEOPLE_UPDATE, events.create_person_update_event("nobody", age=3))
    await bus.publish(events.TOPIC_PEOPLE_CREATE, {"name": "Ada"})
    await bus.wait_until_idle()

    assert changed == []


def test_store_locator_lifecycle(bus):
    with pytest.raises(StoreNotInitializedError):
        Store.get()

    store = Store.initialize(bus)
    assert Store.get() is store

    with pytest.raises(RuntimeError):
        Store.initialize(bus)
    with pytest.raises(StoreAlreadyInitializedError):
        Store.initialize(bus)


def test_store_builds_state_from_config(bus, tmp_path):
    seed = tmp_path / "films.yaml"
    seed.write_text("- id: a\n  title: Alien\n- id: b\n  title: Heat\n", encoding="utf-8")
    config = SystemConfig(
        films={"seed_file": str(seed), "default_filter": "non_favorites"},
        people={"identity_provider": "sequential", "seed": [{"name": "Ada", "age": 30}]},
    )

    store = Store.initialize(bus, config)

    assert [film.id for film in store.films.store] == ["a", "b"]
    assert store.films.filter_mode.value is FilterMode.NON_FAVORITES_ONLY
    assert [(p.name, p.uuid) for p in store.people.store] == [("Ada", "1")]


@pytest.mark.asyncio
async def test_store_start_wires_both_states(bus):
    store = Store.initialize(bus)
    await store.start()

    assert bus.has_subscribers(events.TOPIC_FILMS_TOGGLE_FAVORITE)
    assert bus.has_subscribers(events.TOPIC_PEOPLE_CREATE)


def test_bus_is_reusable_across_event_loops(bus):
    async def round_trip(topic):
        received = await _collect(bus, topic)
        await bus.publish(topic, {"n": 1})
        await bus.wait_until_idle()
        return received

    assert asyncio.run(round_trip("first")) == [{"n": 1}]
    assert asyncio.run(round_trip("second")) == [{"n": 1}]
