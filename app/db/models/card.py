from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Table, JSON, func
from app.db.base import Base

# card_id is the whole primary key: a card belongs to exactly one list.
lists_cards = Table(
    "lists_cards",
    Base.metadata,
    Column("list_id", String(14), ForeignKey("lists.id", ondelete="CASCADE"), nullable=False, index=True),
    Column("card_id", String(14), ForeignKey("cards.id", ondelete="CASCADE"), primary_key=True),
)

class Card(Base):
    __tablename__ = "cards"

    id = Column(String(14), primary_key=True)
    text = Column(String, nullable=False)
    colors = Column(JSON, nullable=False, server_default="[]")  # ordered, unique color tags
    position = Column(Integer, nullable=False, server_default="0")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
