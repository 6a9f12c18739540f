"""Base class and helpers shared by all domain entities"""

import uuid
from datetime import datetime
from sqlmodel import SQLModel


def generate_uuid() -> str:
    """Generate a new entity identifier (UUID4 string)"""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.utcnow()


class BaseModel(SQLModel):
    """Common base for table entities"""

    def touch(self) -> None:
        """Refresh updated_at on entities that track it"""
        if hasattr(self, "updated_at"):
            self.updated_at = utcnow()
