"""Session storage backed by the sessions table."""

import logging
from datetime import datetime
from typing import Callable, Optional

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from app.core.database import init_db
from app.core.errors import SessionStoreError
from app.models.session_record import SessionRecord
from app.schemas.draft_return import DraftReturn
from app.schemas.session import FillingOutReturn, SessionData

logger = logging.getLogger(__name__)


class SessionStore:
    """Reads and writes SessionData by session key.

    Every read-modify-write goes through ``update``, which applies the
    mutator inside a single transaction holding the session row.
    """

    def __init__(self, session_factory: async_sessionmaker, ttl_seconds: int):
        self._session_factory = session_factory
        self._ttl_seconds = ttl_seconds

    async def init_schema(self) -> None:
        """Create the sessions table on the engine this store is bound to."""
        await init_db(self._session_factory.kw["bind"])

    def _to_session_data(self, record: Optional[SessionRecord]) -> Optional[SessionData]:
        if record is None or record.is_expired(self._ttl_seconds):
            return None
        try:
            return SessionData.model_validate(record.data)
        except ValidationError as e:
            raise SessionStoreError(f"Could not parse session data for session {record.id}") from e

    async def get(self, key: str) -> Optional[SessionData]:
        """Fetch the session data for a key.

        Args:
            key: Session key

        Returns:
            SessionData, or None if there is no live session for the key

        Raises:
            SessionStoreError: If the data could not be read or parsed
        """
        try:
            async with self._session_factory() as db:
                record = await db.get(SessionRecord, key)
                return self._to_session_data(record)
        except SQLAlchemyError as e:
            raise SessionStoreError(f"Could not read session {key}") from e

    async def store(self, key: str, session_data: SessionData) -> None:
        """Replace the session data for a key."""
        await self.update(key, lambda _: session_data)

    async def update(self, key: str, mutator: Callable[[SessionData], SessionData]) -> SessionData:
        """Apply a pure function to the stored session data.

        A missing or expired session is treated as empty. Nothing is written
        if the mutator raises.

        Args:
            key: Session key
            mutator: Function from the current to the new session data

        Returns:
            The session data as stored

        Raises:
            SessionStoreError: If the data could not be read or written
        """
        try:
            async with self._session_factory() as db:
                async with db.begin():
                    result = await db.execute(
                        select(SessionRecord)
                        .where(SessionRecord.id == key)
                        .with_for_update()
                    )
                    record = result.scalar_one_or_none()
                    current = self._to_session_data(record) or SessionData.empty()
                    updated = mutator(current)
                    data = updated.model_dump(mode="json")

                    if record is None:
                        db.add(SessionRecord(id=key, data=data, updated_at=datetime.utcnow()))
                    else:
                        record.data = data
                        record.updated_at = datetime.utcnow()
        except SQLAlchemyError as e:
            raise SessionStoreError(f"Could not update session {key}") from e

        logger.debug("Updated session %s", key)
        return updated

    async def update_draft_return(
        self, key: str, mutator: Callable[[DraftReturn], DraftReturn]
    ) -> SessionData:
        """Apply a pure function to the draft return held in the session.

        Raises:
            SessionStoreError: If the session holds no draft return, or it
                could not be read or written
        """
        def update_journey(session_data: SessionData) -> SessionData:
            journey = session_data.journey_status
            if not isinstance(journey, FillingOutReturn):
                raise SessionStoreError(f"No draft return found in session {key}")
            updated_journey = journey.with_draft_return(mutator(journey.draft_return))
            return session_data.model_copy(update={"journey_status": updated_journey})

        return await self.update(key, update_journey)
