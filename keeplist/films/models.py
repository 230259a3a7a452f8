from __future__ import annotations

from typing import ClassVar, FrozenSet

from keeplist.shared.domain.entity import Entity


class Film(Entity):
    """A film in the catalogue.

    ``id``, ``title`` and ``description`` never change; the favourite flag is
    changed by building a replacement with :meth:`with_favorite`.

    Two films compare equal when ``id`` and ``is_favorite`` match. Title and
    description are left out of equality and hashing.
    """

    identity_field: ClassVar[str] = "id"
    mutable_fields: ClassVar[FrozenSet[str]] = frozenset({"is_favorite"})

    id: str
    title: str
    description: str
    is_favorite: bool

    def with_favorite(self, is_favorite: bool) -> "Film":
        return self.with_changes(is_favorite=is_favorite)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Film):
            return NotImplemented
        return self.id == other.id and self.is_favorite == other.is_favorite

    def __hash__(self) -> int:
        return hash((self.id, self.is_favorite))

    def __str__(self) -> str:
        return (
            f"Film(id: {self.id}, title: {self.title}, "
            f"description: {self.description}, isFavorite: {self.is_favorite})"
        )
