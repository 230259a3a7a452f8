from __future__ import annotations

from typing import ClassVar, FrozenSet, Optional

from pydantic import Field

from keeplist.shared.domain.entity import Entity
from keeplist.shared.domain.identity import IdentityProvider, new_identity


class Person(Entity):
    """A person in the people list, identified by ``uuid`` alone."""

    identity_field: ClassVar[str] = "uuid"
    mutable_fields: ClassVar[FrozenSet[str]] = frozenset({"name", "age"})

    name: str
    age: int
    uuid: str = Field(default_factory=new_identity, min_length=1)

    @classmethod
    def create(
        cls,
        name: str,
        age: int,
        uuid: Optional[str] = None,
        identity_provider: Optional[IdentityProvider] = None,
    ) -> "Person":
        """Build a person, generating ``uuid`` when none is given.

        Args:
            name: Display name
            age: Age in years
            uuid: Existing identity to keep
            identity_provider: Generator used instead of the active provider
        """
        if uuid is None:
            uuid = identity_provider() if identity_provider else new_identity()
        return cls(name=name, age=age, uuid=uuid)

    def updated(self, name: Optional[str] = None, age: Optional[int] = None) -> "Person":
        """Copy with ``name``/``age`` replaced where given."""
        changes = {}
        if name is not None:
            changes["name"] = name
        if age is not None:
            changes["age"] = age
        return self.with_changes(**changes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        return self.uuid == other.uuid

    def __hash__(self) -> int:
        return hash(self.uuid)

    def __str__(self) -> str:
        return f"Person, name: {self.name}, age: {self.age}"
