from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Table, func
from app.db.base import Base

# list_id is the whole primary key: a list belongs to exactly one board.
boards_lists = Table(
    "boards_lists",
    Base.metadata,
    Column("board_id", String(14), ForeignKey("boards.id", ondelete="CASCADE"), nullable=False, index=True),
    Column("list_id", String(14), ForeignKey("lists.id", ondelete="CASCADE"), primary_key=True),
)

class BoardList(Base):
    __tablename__ = "lists"

    id = Column(String(14), primary_key=True)
    title = Column(String, nullable=False)
    position = Column(Integer, nullable=False, server_default="0")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
