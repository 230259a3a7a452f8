"""
Shared Domain Module
====================

Entity base class, identity providers and the generic entity store used by
both lists.
"""

from .collection import EntityStore
from .entity import Entity
from .identity import (
    IdentityProvider,
    identity_provider,
    new_identity,
    provider_from_name,
    sequential_provider,
    set_identity_provider,
    uuid4_provider,
)

__all__ = [
    "Entity",
    "EntityStore",
    "IdentityProvider",
    "identity_provider",
    "new_identity",
    "provider_from_name",
    "sequential_provider",
    "set_identity_provider",
    "uuid4_provider",
]
