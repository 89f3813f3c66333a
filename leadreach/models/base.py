"""Base model class with common fields for all models."""

from datetime import datetime
from sqlalchemy import Column, DateTime, Integer
from leadreach.database import Base


class BaseModel(Base):
    """Abstract base model with common fields."""

    __abstract__ = True

    id = Column(Integer, primary_key=True, autoincrement=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    def __repr__(self):
        """Default string representation."""
        return f"<{self.__class__.__name__}(id={self.id})>"

    def to_dict(self):
        """Convert model to dictionary."""
        return {c.name: getattr(self, c.name) for c in self.__table__.columns}
