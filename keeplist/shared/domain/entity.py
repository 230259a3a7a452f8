"""Immutable, identity-bearing domain values."""

from __future__ import annotations

from typing import Any, ClassVar, FrozenSet

from pydantic import BaseModel, ConfigDict

from keeplist.shared.core.exceptions import ImmutableFieldError


class Entity(BaseModel):
    """Base for frozen entities.

    Subclasses name their identity field and the fields a copy-with may
    replace. Nothing is ever changed in place: ``with_changes`` builds a new
    validated instance.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    identity_field: ClassVar[str] = "id"
    mutable_fields: ClassVar[FrozenSet[str]] = frozenset()

    @property
    def identity(self) -> str:
        return getattr(self, self.identity_field)

    def with_changes(self, **changes: Any) -> "Entity":
        """Return a copy with the named fields replaced.

        Raises:
            ImmutableFieldError: If a name is the identity field, an immutable
                field, or not a field at all
        """
        rejected = [name for name in changes if name not in self.mutable_fields]
        if rejected:
            raise ImmutableFieldError(type(self).__name__, rejected)
        if not changes:
            return self
        data = self.model_dump()
        data.update(changes)
        return type(self).model_validate(data)

    def non_identity_values(self) -> dict[str, Any]:
        data = self.model_dump()
        data.pop(self.identity_field, None)
        return data

    def differs_from(self, other: "Entity") -> bool:
        """True when any non-identity field differs.

        Independent of ``==``, which some entities narrow on purpose.
        """
        return self.non_identity_values() != other.non_identity_values()
