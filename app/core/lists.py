import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.core import ids
from app.core.activity import ActivityRecorder
from app.core.links import card_link, list_link
from app.db.gateway import Gateway
from app.schemas.card import CardCreate, CardWithActivity
from app.schemas.common import EntityRef
from app.schemas.list import ListUpdate, ListWithActivity

logger = logging.getLogger(__name__)


class ListService:
    def __init__(self, db: AsyncSession) -> None:
        self.gateway = Gateway(db)
        self.activity = ActivityRecorder(self.gateway)

    async def update(self, user_id: str, list_id: str, data: ListUpdate) -> ListWithActivity:
        async with self.gateway.transaction():
            await self.gateway.execute("list.update_title", list_id=list_id, title=data.title)
            board_list = await self.gateway.query_one("list.find_by_id", list_id=list_id)
            link = list_link(board_list["board_id"], list_id)
            activity = await self.activity.record(
                user_id, "Updated", "list", list_id,
                {"title": data.title, "link": link},
                board_id=board_list["board_id"],
            )

        logger.info(f"Updated list {list_id}")
        return ListWithActivity(id=list_id, title=board_list["title"], link=link, activity=activity)

    async def drop(self, list_id: str) -> EntityRef:
        """Delete a list and its cards."""
        async with self.gateway.transaction():
            await self.gateway.execute("list.delete_cards", list_id=list_id)
            await self.gateway.execute("list.delete", list_id=list_id)

        logger.info(f"Dropped list {list_id}")
        return EntityRef(id=list_id)

    async def create_card(self, user_id: str, list_id: str, data: CardCreate) -> CardWithActivity:
        """Append a new card to the end of the list."""
        card_id = ids.generate()

        async with self.gateway.transaction():
            board_list = await self.gateway.query_one("list.find_by_id", list_id=list_id)
            link = card_link(board_list["board_id"], card_id)
            await self.gateway.execute(
                "card.insert", card_id=card_id, text=data.text, colors=[], list_id=list_id
            )
            await self.gateway.execute("card.link_list", list_id=list_id, card_id=card_id)
            activity = await self.activity.record(
                user_id, "Created", "card", card_id,
                {"text": data.text, "link": link},
                board_id=board_list["board_id"],
            )

        logger.info(f"Created card {card_id} in list {list_id}")
        return CardWithActivity(id=card_id, text=data.text, link=link, activity=activity)
