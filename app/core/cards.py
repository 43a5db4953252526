import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.activity import ActivityRecorder
from app.core.links import card_link
from app.db.gateway import Gateway
from app.schemas.card import (
    CardColor,
    CardColors,
    CardMove,
    CardMoved,
    CardRead,
    CardUpdate,
    CardWithActivity,
)
from app.schemas.comment import CommentRead
from app.schemas.common import EntityRef

logger = logging.getLogger(__name__)


class CardService:
    def __init__(self, db: AsyncSession) -> None:
        self.gateway = Gateway(db)
        self.activity = ActivityRecorder(self.gateway)

    async def find_by_id(self, card_id: str) -> CardRead:
        async with self.gateway.transaction():
            card = await self.gateway.query_one("card.find_by_id", card_id=card_id)
            comments = await self.gateway.query_many("card.find_comments", card_id=card_id)

        return CardRead(
            id=card["id"],
            text=card["text"],
            colors=card["colors"] or [],
            link=card_link(card["board_id"], card_id),
            list_id=card["list_id"],
            board_id=card["board_id"],
            comments=[CommentRead(**c) for c in comments],
        )

    async def update(self, user_id: str, card_id: str, data: CardUpdate) -> CardWithActivity:
        async with self.gateway.transaction():
            await self.gateway.execute("card.update_text", card_id=card_id, text=data.text)
            card = await self.gateway.query_one("card.find_by_id", card_id=card_id)
            link = card_link(card["board_id"], card_id)
            activity = await self.activity.record(
                user_id, "Updated", "card", card_id,
                {"text": data.text, "link": link},
                board_id=card["board_id"],
            )

        logger.info(f"Updated card {card_id}")
        return CardWithActivity(id=card_id, text=card["text"], link=link, activity=activity)

    async def drop(self, card_id: str) -> EntityRef:
        async with self.gateway.transaction():
            await self.gateway.execute("card.delete", card_id=card_id)

        logger.info(f"Dropped card {card_id}")
        return EntityRef(id=card_id)

    async def add_color(self, card_id: str, data: CardColor) -> CardColors:
        async with self.gateway.transaction():
            card = await self.gateway.query_one("card.find_by_id", card_id=card_id)
            colors = list(card["colors"] or [])
            if data.color not in colors:
                colors.append(data.color)
                await self.gateway.execute("card.update_colors", card_id=card_id, colors=colors)

        return CardColors(id=card_id, colors=colors)

    async def remove_color(self, card_id: str, data: CardColor) -> CardColors:
        async with self.gateway.transaction():
            card = await self.gateway.query_one("card.find_by_id", card_id=card_id)
            colors = [c for c in card["colors"] or [] if c != data.color]
            await self.gateway.execute("card.update_colors", card_id=card_id, colors=colors)

        return CardColors(id=card_id, colors=colors)

    async def move(self, user_id: str, data: CardMove) -> CardMoved:
        """Move a card to ``data.list_id`` at ``data.position`` (end of list by default)."""
        async with self.gateway.transaction():
            card = await self.gateway.query_one("card.find_by_id", card_id=data.card_id)
            target = await self.gateway.query_one("list.find_by_id", list_id=data.list_id)

            position = data.position
            if position is None:
                end = await self.gateway.query_one(
                    "card.next_position", list_id=data.list_id, card_id=data.card_id
                )
                position = end["position"]

            await self.gateway.execute("card.move", card_id=data.card_id, list_id=data.list_id)
            await self.gateway.execute(
                "card.shift_positions", list_id=data.list_id, card_id=data.card_id, position=position
            )
            await self.gateway.execute("card.set_position", card_id=data.card_id, position=position)

            link = card_link(target["board_id"], data.card_id)
            await self.activity.record(
                user_id, "Moved", "card", data.card_id,
                {"text": card["text"], "from_list": card["list_id"], "to_list": data.list_id, "link": link},
                board_id=target["board_id"],
            )

        logger.info(f"Moved card {data.card_id} to list {data.list_id} at {position}")
        return CardMoved(id=data.card_id, list_id=data.list_id, position=position, link=link)
