"""
SessionRecord database model
"""
from datetime import datetime
from sqlalchemy import Column, String, DateTime, JSON
from app.core.database import Base


class SessionRecord(Base):
    """
    SessionRecord model holding the serialized session data for one session key.

    Features:
    - Keyed by the opaque session id carried on the request
    - Session data stored as JSON (SessionData.model_dump(mode="json"))
    - updated_at drives expiry: records older than the configured TTL are ignored
    """
    __tablename__ = "sessions"

    id = Column(String(128), primary_key=True, index=True)
    data = Column(JSON, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<SessionRecord(id={self.id}, updated_at={self.updated_at})>"

    def is_expired(self, ttl_seconds: int, now: datetime = None) -> bool:
        """Check if the record is older than the session TTL"""
        now = now or datetime.utcnow()
        return (now - self.updated_at).total_seconds() > ttl_seconds
