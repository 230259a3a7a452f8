from __future__ import annotations

from typing import Optional, Union

from keeplist.shared.domain.collection import EntityStore

from .models import Person


class PeopleStore(EntityStore[Person]):
    """The people list; starts empty unless seeded."""

    name = "people"

    def update_person(
        self,
        person: Union[Person, str],
        name: Optional[str] = None,
        age: Optional[int] = None,
    ) -> bool:
        """Replace name and/or age of the person with ``person``'s uuid.

        Fields left as ``None`` keep their current value. Returns whether the
        store changed.
        """
        changes = {}
        if name is not None:
            changes["name"] = name
        if age is not None:
            changes["age"] = age
        return self.update_by_identity(person, **changes)
