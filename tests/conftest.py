"""Shared fixtures: deterministic identities, fresh stores, clean globals."""

from __future__ import annotations

import os
import sys
from typing import Iterator, List

import pytest

# Put the repository root first on sys.path so the in-repo package is
# imported even without an editable install.
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from keeplist.films.store import FilmsStore
from keeplist.people.store import PeopleStore
from keeplist.shared.core.configuration import ENV_MAP
from keeplist.shared.core.event_bus import EventBus
from keeplist.shared.domain.identity import (
    get_identity_provider,
    sequential_provider,
    set_identity_provider,
)
from keeplist.state.store import Store


@pytest.fixture(autouse=True)
def _restore_globals(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep env overrides, the identity provider and the Store singleton
    from leaking between tests."""
    for env_key in ENV_MAP:
        monkeypatch.delenv(env_key, raising=False)
    previous = get_identity_provider()
    Store.reset()
    yield
    Store.reset()
    set_identity_provider(previous)


@pytest.fixture
def sequential_ids() -> None:
    """New persons get uuids "1", "2", ... in creation order."""
    set_identity_provider(sequential_provider())


@pytest.fixture
def films_store() -> FilmsStore:
    return FilmsStore()


@pytest.fixture
def people_store() -> PeopleStore:
    return PeopleStore()


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


class Recorder:
    """Listener that keeps every snapshot it receives."""

    def __init__(self) -> None:
        self.calls: List[tuple] = []

    def __call__(self, snapshot: tuple) -> None:
        self.calls.append(snapshot)

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()
