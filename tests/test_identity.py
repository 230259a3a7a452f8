from __future__ import annotations

import uuid

import pytest

from keeplist.shared.domain.identity import (
    get_identity_provider,
    identity_provider,
    new_identity,
    provider_from_name,
    sequential_provider,
    uuid4_provider,
)


def test_default_provider_generates_uuid4():
    value = new_identity()
    assert uuid.UUID(value).version == 4


def test_sequential_provider_counts_up():
    provider = sequential_provider(prefix="id-", start=5)
    assert [provider(), provider(), provider()] == ["id-5", "id-6", "id-7"]


def test_context_manager_restores_previous_provider():
    before = get_identity_provider()
    with identity_provider(lambda: "fixed"):
        assert new_identity() == "fixed"
    assert get_identity_provider() is before


def test_provider_from_name():
    assert provider_from_name("uuid4") is uuid4_provider
    sequential = provider_from_name("sequential")
    assert [sequential(), sequential()] == ["1", "2"]
    with pytest.raises(ValueError, match="Unknown identity provider"):
        provider_from_name("snowflake")
