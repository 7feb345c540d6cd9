"""Activity SQLAlchemy model."""

from datetime import datetime, timezone
from sqlalchemy import String, Boolean, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.session import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ActivityModel(Base):
    """SQLAlchemy model for activities, options kept as a JSON document."""
    
    __tablename__ = "activities"
    
    # Primary key
    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    
    type: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    options: Mapped[list] = mapped_column(JSON, default=list, nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False, index=True)
    search: Mapped[str | None] = mapped_column(String, nullable=True)
    
    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        nullable=False
    )
    
    def __repr__(self) -> str:
        return f"<ActivityModel(id={self.id}, type={self.type})>"
