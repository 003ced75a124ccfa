"""
Id generation
"""
import uuid


class UUIDGenerator:
    """Source of correlation ids; replaced in tests to make ids predictable."""

    def next_id(self) -> uuid.UUID:
        return uuid.uuid4()
