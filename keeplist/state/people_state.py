"""People page state."""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import ValidationError

from keeplist.people.draft import PersonDraft
from keeplist.people.models import Person
from keeplist.people.store import PeopleStore
from keeplist.shared.core import events
from keeplist.shared.core.event_bus import EventBus, EventPayload

logger = logging.getLogger(__name__)


class PeopleState:
    """Reactive state for the people page.

    Subscribes to the people intent topics, applies them to the PeopleStore
    and publishes ``people.changed`` whenever the store actually changed.
    """

    def __init__(self, event_bus: EventBus, store: Optional[PeopleStore] = None) -> None:
        self.bus = event_bus
        self.store = store if store is not None else PeopleStore()
        self._started = False

    async def initialize(self) -> None:
        """Bind intent handlers to the EventBus. Safe to call twice."""
        if self._started:
            return

        await self.bus.subscribe(events.TOPIC_PEOPLE_CREATE, self._handle_create)
        await self.bus.subscribe(events.TOPIC_PEOPLE_UPDATE, self._handle_update)
        await self.bus.subscribe(events.TOPIC_PEOPLE_DELETE, self._handle_delete)

        self._started = True

    # --- Public Actions ---

    async def submit(self, draft: PersonDraft) -> bool:
        """Forward a confirmed dialog as a create or update intent.

        Returns:
            False when the draft is incomplete; nothing is published then.
        """
        name, age = draft.name, draft.age
        if name is None or age is None:
            return False

        if draft.existing is None:
            await self.bus.publish(events.TOPIC_PEOPLE_CREATE, events.create_person_create_event(name, age))
        else:
            await self.bus.publish(
                events.TOPIC_PEOPLE_UPDATE,
                events.create_person_update_event(draft.existing.uuid, name=name, age=age),
            )
        return True

    async def delete(self, person: Person) -> None:
        await self.bus.publish(events.TOPIC_PEOPLE_DELETE, events.create_person_delete_event(person.uuid))

    # --- Event Handlers ---

    async def _handle_create(self, payload: EventPayload) -> None:
        try:
            person = Person.create(name=payload["name"], age=payload["age"])
        except (KeyError, ValidationError) as e:
            logger.warning(f"Ignoring malformed people.create payload {payload}: {e}")
            return
        self.store.add(person)
        await self._announce()

    async def _handle_update(self, payload: EventPayload) -> None:
        uuid = payload.get("uuid")
        if not uuid:
            logger.warning("Received people.update without a uuid")
            return
        try:
            changed = self.store.update_person(uuid, name=payload.get("name"), age=payload.get("age"))
        except ValidationError as e:
            logger.warning(f"Ignoring invalid people.update payload {payload}: {e}")
            return
        if changed:
            await self._announce()

    async def _handle_delete(self, payload: EventPayload) -> None:
        uuid = payload.get("uuid")
        if uuid and self.store.remove(uuid):
            await self._announce()

    async def _announce(self) -> None:
        await self.bus.publish(
            events.TOPIC_PEOPLE_CHANGED,
            events.create_people_changed_event(self.store.snapshot()),
        )
