"""Test session storage."""

from datetime import datetime, timedelta

import pytest
from sqlalchemy import update

from app.core.errors import SessionStoreError
from app.models.session_record import SessionRecord
from app.schemas.session import SessionData
from factories import (
    complete_triage,
    draft_return,
    filling_out_return,
    session_with,
    subscription_ready,
    uk_address,
)


@pytest.mark.asyncio
async def test_get_missing_session(session_store):
    assert await session_store.get("unknown") is None


@pytest.mark.asyncio
async def test_store_and_get(session_store):
    session_data = session_with(filling_out_return(draft_return(triage_answers=complete_triage())))

    await session_store.store("key", session_data)

    assert await session_store.get("key") == session_data


@pytest.mark.asyncio
async def test_update_applies_mutator_to_stored_data(session_store):
    await session_store.store("key", session_with(subscription_ready()))

    updated = await session_store.update("key", lambda s: s.model_copy(update={"journey_status": None}))

    assert updated == SessionData.empty()
    assert await session_store.get("key") == SessionData.empty()


@pytest.mark.asyncio
async def test_update_missing_session_starts_from_empty(session_store):
    seen = []

    def mutator(session_data):
        seen.append(session_data)
        return session_data

    await session_store.update("new-key", mutator)

    assert seen == [SessionData.empty()]
    assert await session_store.get("new-key") == SessionData.empty()


@pytest.mark.asyncio
async def test_noop_update_leaves_session_unchanged(session_store):
    session_data = session_with(filling_out_return(draft_return(triage_answers=complete_triage())))
    await session_store.store("key", session_data)

    await session_store.update("key", lambda s: s)

    assert await session_store.get("key") == session_data


@pytest.mark.asyncio
async def test_update_draft_return(session_store):
    await session_store.store("key", session_with(filling_out_return(draft_return(triage_answers=complete_triage()))))

    updated = await session_store.update_draft_return(
        "key", lambda d: d.with_answers("property_address", uk_address())
    )

    assert updated.journey_status.draft_return.property_address == uk_address()
    stored = await session_store.get("key")
    assert stored.journey_status.draft_return.property_address == uk_address()
    assert stored.journey_status.draft_return.triage_answers == complete_triage()


@pytest.mark.asyncio
async def test_update_draft_return_without_a_return(session_store):
    original = session_with(subscription_ready())
    await session_store.store("key", original)

    with pytest.raises(SessionStoreError):
        await session_store.update_draft_return("key", lambda d: d)

    assert await session_store.get("key") == original


@pytest.mark.asyncio
async def test_expired_session_is_ignored(session_store):
    await session_store.store("key", session_with(subscription_ready()))

    async with session_store._session_factory() as db:
        await db.execute(
            update(SessionRecord)
            .where(SessionRecord.id == "key")
            .values(updated_at=datetime.utcnow() - timedelta(days=1))
        )
        await db.commit()

    assert await session_store.get("key") is None


@pytest.mark.asyncio
async def test_unparseable_session_data(session_store):
    async with session_store._session_factory() as db:
        db.add(SessionRecord(id="key", data={"journey_status": {"type": "nonsense"}}))
        await db.commit()

    with pytest.raises(SessionStoreError):
        await session_store.get("key")
