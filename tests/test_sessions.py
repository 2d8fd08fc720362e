"""
Tests for the in-memory checkout session store.
"""

from __future__ import annotations

import pytest

from storefront.infrastructure.store.memory_sessions import MemoryCheckoutSessionStore


def _store(checkout_factory, max_sessions: int) -> MemoryCheckoutSessionStore:
    return MemoryCheckoutSessionStore(
        factory=lambda context: checkout_factory(session_id=context.session_id),
        max_sessions=max_sessions,
    )


def test_existing_session_is_reused(checkout_factory):
    store = _store(checkout_factory, max_sessions=5)
    sid = store.get_or_create(None)
    assert store.get_or_create(sid) == sid
    assert store.get(sid).context.session_id == sid
    assert len(store) == 1


def test_least_recently_used_session_is_evicted(checkout_factory):
    store = _store(checkout_factory, max_sessions=2)
    first = store.get_or_create(None)
    second = store.get_or_create(None)
    store.get(first)

    third = store.get_or_create(None)

    assert len(store) == 2
    assert store.get(second) is None
    assert store.get(first) is not None
    assert store.get(third) is not None


def test_session_in_payment_is_never_evicted(checkout_factory, good_conduct):
    store = _store(checkout_factory, max_sessions=1)
    paying = store.get_or_create(None)
    checkout = store.get(paying)
    checkout.add_service(good_conduct)
    checkout.begin_checkout()

    other = store.get_or_create(None)

    assert store.get(paying) is checkout
    assert store.get(other) is not None
    assert len(store) == 2


def test_cap_must_be_positive(checkout_factory):
    with pytest.raises(ValueError):
        _store(checkout_factory, max_sessions=0)
