from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Table, JSON, func
from app.db.base import Base

users_activity = Table(
    "users_activity",
    Base.metadata,
    Column("user_id", String(14), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("activity_id", Integer, ForeignKey("activity.id"), primary_key=True),
)

class Activity(Base):
    """Append-only audit record. Rows are never updated or deleted."""

    __tablename__ = "activity"

    id = Column(Integer, primary_key=True, index=True)
    action = Column(String, nullable=False)
    type = Column(String, nullable=False)
    entry_id = Column(String(14), nullable=False, index=True)
    # No foreign key: the record outlives the board it describes.
    board_id = Column(String(14), nullable=True, index=True)
    entry = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
