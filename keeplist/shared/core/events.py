"""Canonical event definitions for keeplist."""

from __future__ import annotations

from typing import Any, Iterable

from .event_bus import EventPayload

# Movies intents
TOPIC_FILMS_TOGGLE_FAVORITE = "films.toggle_favorite"
TOPIC_FILMS_SET_FAVORITE = "films.set_favorite"
TOPIC_FILMS_FILTER = "films.filter"

# People intents
TOPIC_PEOPLE_CREATE = "people.create"
TOPIC_PEOPLE_UPDATE = "people.update"
TOPIC_PEOPLE_DELETE = "people.delete"

# Change notices, published after a store mutation
TOPIC_FILMS_CHANGED = "films.changed"
TOPIC_PEOPLE_CHANGED = "people.changed"


def create_toggle_favorite_event(film_id: str) -> EventPayload:
    """Ask for the favourite flag of a film to be flipped."""
    return {"id": film_id}


def create_set_favorite_event(film_id: str, is_favorite: bool) -> EventPayload:
    return {"id": film_id, "is_favorite": is_favorite}


def create_filter_event(mode: str) -> EventPayload:
    """Change which subset of films is displayed.

    Args:
        mode: A ``FilterMode`` value ("all", "favorites", "non_favorites")
    """
    return {"mode": mode}


def create_person_create_event(name: str, age: int) -> EventPayload:
    return {"name": name, "age": age}


def create_person_update_event(
    uuid: str,
    name: str | None = None,
    age: int | None = None,
) -> EventPayload:
    """Create a person update event.

    Only the fields that were supplied end up in the payload, so handlers can
    tell "leave unchanged" apart from an explicit value.
    """
    event: EventPayload = {"uuid": uuid}
    if name is not None:
        event["name"] = name
    if age is not None:
        event["age"] = age
    return event


def create_person_delete_event(uuid: str) -> EventPayload:
    return {"uuid": uuid}


def create_films_changed_event(films: Iterable[Any]) -> EventPayload:
    """Create a films snapshot event from ``Film`` models."""
    return {"films": [film.model_dump() for film in films]}


def create_people_changed_event(people: Iterable[Any]) -> EventPayload:
    """Create a people snapshot event from ``Person`` models."""
    return {"people": [person.model_dump() for person in people]}
