import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.core import ids
from app.core.activity import ActivityRecorder
from app.core.links import card_link
from app.db.gateway import Gateway
from app.schemas.comment import CommentCreate, CommentWithActivity

logger = logging.getLogger(__name__)


class CommentService:
    def __init__(self, db: AsyncSession) -> None:
        self.gateway = Gateway(db)
        self.activity = ActivityRecorder(self.gateway)

    async def create(self, user_id: str, card_id: str, data: CommentCreate) -> CommentWithActivity:
        """Add a comment to a card and record it on the card's board."""
        async with self.gateway.transaction():
            card = await self.gateway.query_one("card.find_by_id", card_id=card_id)
            comment = await self.gateway.query_one(
                "comment.insert",
                comment_id=ids.generate(),
                card_id=card_id,
                user_id=user_id,
                text=data.text,
            )
            activity = await self.activity.record(
                user_id, "Commented", "card", card_id,
                {"text": data.text, "link": card_link(card["board_id"], card_id)},
                board_id=card["board_id"],
            )

        logger.info(f"Comment {comment['id']} added to card {card_id}")
        return CommentWithActivity(activity=activity, **comment)
