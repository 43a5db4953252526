from sqlalchemy import Column, String, DateTime, Boolean, ForeignKey, Table, false, func
from app.db.base import Base

# Ownership and stars are both plain user <-> board join tables.
users_boards = Table(
    "users_boards",
    Base.metadata,
    Column("user_id", String(14), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("board_id", String(14), ForeignKey("boards.id", ondelete="CASCADE"), primary_key=True),
)

users_starred_boards = Table(
    "users_starred_boards",
    Base.metadata,
    Column("user_id", String(14), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("board_id", String(14), ForeignKey("boards.id", ondelete="CASCADE"), primary_key=True),
)

class Board(Base):
    __tablename__ = "boards"

    id = Column(String(14), primary_key=True)
    title = Column(String, nullable=False)
    archived = Column(Boolean, nullable=False, server_default=false())
    created_at = Column(DateTime(timezone=True), server_default=func.now())
