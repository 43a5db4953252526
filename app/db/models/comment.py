from sqlalchemy import Column, String, DateTime, ForeignKey, func
from app.db.base import Base

class Comment(Base):
    __tablename__ = "comments"

    id = Column(String(14), primary_key=True)
    card_id = Column(String(14), ForeignKey("cards.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(String(14), ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    text = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
