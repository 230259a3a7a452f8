"""Identity generation for entities created without an explicit identity.

The active provider is process-wide and swappable so tests (and the
``sequential`` config option) can get predictable identities.
"""

from __future__ import annotations

import itertools
import logging
import uuid
from contextlib import contextmanager
from typing import Callable, Iterator, TypeAlias

IdentityProvider: TypeAlias = Callable[[], str]

logger = logging.getLogger(__name__)


def uuid4_provider() -> str:
    return str(uuid.uuid4())


def sequential_provider(prefix: str = "", start: int = 1) -> IdentityProvider:
    """Build a provider yielding ``prefix1``, ``prefix2``, ..."""
    counter = itertools.count(start)

    def _next_identity() -> str:
        return f"{prefix}{next(counter)}"

    return _next_identity


PROVIDERS: dict[str, Callable[[], IdentityProvider]] = {
    "uuid4": lambda: uuid4_provider,
    "sequential": sequential_provider,
}

_provider: IdentityProvider = uuid4_provider


def new_identity() -> str:
    """Generate an identity with the active provider."""
    return _provider()


def get_identity_provider() -> IdentityProvider:
    return _provider


def set_identity_provider(provider: IdentityProvider) -> IdentityProvider:
    """Install ``provider`` and return the one it replaced."""
    global _provider
    previous = _provider
    _provider = provider
    return previous


def provider_from_name(name: str) -> IdentityProvider:
    """Resolve a configured provider name ("uuid4" or "sequential")."""
    try:
        return PROVIDERS[name]()
    except KeyError:
        raise ValueError(f"Unknown identity provider '{name}', expected one of {sorted(PROVIDERS)}") from None


@contextmanager
def identity_provider(provider: IdentityProvider) -> Iterator[IdentityProvider]:
    """Temporarily install ``provider``."""
    previous = set_identity_provider(provider)
    try:
        yield provider
    finally:
        set_identity_provider(previous)
