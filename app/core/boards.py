"""
Board aggregate: reads and writes of a board and its lists and cards.

Every public method runs as one transaction, so an entity write and the
activity record describing it are committed together or not at all.
"""

import logging
from collections import defaultdict
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from app.core import ids
from app.core.activity import ActivityRecorder
from app.core.errors import ValidationError
from app.core.links import board_link, card_link, list_link
from app.db.gateway import Gateway
from app.schemas.activity import ActivityRead
from app.schemas.board import (
    BoardCreate,
    BoardRead,
    BoardSummary,
    BoardUpdate,
    BoardWithActivity,
    CardPreview,
    ListPreview,
)
from app.schemas.common import EntityRef
from app.schemas.list import ListCreate, ListWithActivity

logger = logging.getLogger(__name__)


class BoardService:
    def __init__(self, db: AsyncSession) -> None:
        self.gateway = Gateway(db)
        self.activity = ActivityRecorder(self.gateway)

    async def create(self, user_id: str, data: BoardCreate) -> BoardWithActivity:
        """Create a board owned by ``user_id``."""
        board_id = ids.generate()
        link = board_link(board_id)

        async with self.gateway.transaction():
            await self.gateway.execute("board.insert", board_id=board_id, title=data.title)
            await self.gateway.execute("board.link_user", user_id=user_id, board_id=board_id)
            activity = await self.activity.record(
                user_id, "Created", "board", board_id,
                {"title": data.title, "link": link},
                board_id=board_id,
            )

        logger.info(f"Created board {board_id} for user {user_id}")
        return BoardWithActivity(id=board_id, title=data.title, link=link, activity=activity)

    async def update(self, user_id: str, board_id: str, fields: BoardUpdate) -> BoardWithActivity:
        """Apply a partial update and record the changed fields."""
        changes = fields.model_dump(exclude_none=True)
        if not changes:
            raise ValidationError("'title' is required", field="title")

        link = board_link(board_id)
        async with self.gateway.transaction():
            await self.gateway.execute("board.update_title", board_id=board_id, title=changes["title"])
            board = await self.gateway.query_one("board.find_by_id", board_id=board_id)
            activity = await self.activity.record(
                user_id, "Updated", "board", board_id,
                {**changes, "link": link},
                board_id=board_id,
            )

        logger.info(f"Updated board {board_id}: {sorted(changes)}")
        return BoardWithActivity(id=board["id"], title=board["title"], link=link, activity=activity)

    async def drop(self, board_id: str) -> EntityRef:
        """Delete a board together with its lists and cards."""
        async with self.gateway.transaction():
            await self.gateway.execute("board.delete_cards", board_id=board_id)
            await self.gateway.execute("board.delete_lists", board_id=board_id)
            await self.gateway.execute("board.delete", board_id=board_id)

        logger.info(f"Dropped board {board_id}")
        return EntityRef(id=board_id)

    async def create_list(self, user_id: str, board_id: str, data: ListCreate) -> ListWithActivity:
        """Append a new list to the end of the board."""
        list_id = ids.generate()
        link = list_link(board_id, list_id)

        async with self.gateway.transaction():
            await self.gateway.query_one("board.find_by_id", board_id=board_id)
            await self.gateway.execute("list.insert", list_id=list_id, title=data.title, board_id=board_id)
            await self.gateway.execute("list.link_board", board_id=board_id, list_id=list_id)
            activity = await self.activity.record(
                user_id, "Created", "list", list_id,
                {"title": data.title, "link": link},
                board_id=board_id,
            )

        logger.info(f"Created list {list_id} on board {board_id}")
        return ListWithActivity(id=list_id, title=data.title, link=link, activity=activity)

    async def find_by_id(self, board_id: str) -> BoardRead:
        """Fetch a board with its lists and each list's cards."""
        async with self.gateway.transaction():
            board = await self.gateway.query_one("board.find_by_id", board_id=board_id)
            lists = await self.gateway.query_many("board.find_lists", board_id=board_id)
            cards = await self.gateway.query_many("board.find_cards", board_id=board_id)

        cards_by_list = defaultdict(list)
        for card in cards:
            cards_by_list[card["list_id"]].append(
                CardPreview(id=card["id"], text=card["text"], link=card_link(board_id, card["id"]))
            )

        return BoardRead(
            id=board["id"],
            title=board["title"],
            link=board_link(board_id),
            lists=[
                ListPreview(
                    id=l["id"],
                    title=l["title"],
                    link=list_link(board_id, l["id"]),
                    cards=cards_by_list[l["id"]],
                )
                for l in lists
            ],
        )

    async def find_all_by_user(self, user_id: str) -> List[BoardSummary]:
        """Boards owned by the user, with counters and this user's star."""
        async with self.gateway.transaction():
            rows = await self.gateway.query_many("board.find_all_by_user", user_id=user_id)
        return [BoardSummary(link=board_link(row["id"]), **row) for row in rows]

    async def archive(self, board_id: str) -> EntityRef:
        """Flag the board as archived. No activity is recorded for archiving."""
        async with self.gateway.transaction():
            await self.gateway.execute("board.archive", board_id=board_id, archived=True)

        logger.info(f"Archived board {board_id}")
        return EntityRef(id=board_id)

    async def mark_as_starred(self, user_id: str, board_id: str) -> BoardSummary:
        """Star the board for this user; starring twice keeps a single star."""
        link = board_link(board_id)
        async with self.gateway.transaction():
            board = await self.gateway.query_one("board.find_by_id", board_id=board_id)
            await self.gateway.execute("board.star", user_id=user_id, board_id=board_id)
            await self.activity.record(
                user_id, "Starred", "board", board_id,
                {"title": board["title"], "link": link},
                board_id=board_id,
            )
            summary = await self.gateway.query_one("board.find_summary", board_id=board_id, user_id=user_id)

        return BoardSummary(link=link, **summary)

    async def unmark_as_starred(self, user_id: str, board_id: str) -> BoardSummary:
        link = board_link(board_id)
        async with self.gateway.transaction():
            board = await self.gateway.query_one("board.find_by_id", board_id=board_id)
            await self.gateway.execute("board.unstar", user_id=user_id, board_id=board_id)
            await self.activity.record(
                user_id, "Unstarred", "board", board_id,
                {"title": board["title"], "link": link},
                board_id=board_id,
            )
            summary = await self.gateway.query_one("board.find_summary", board_id=board_id, user_id=user_id)

        return BoardSummary(link=link, **summary)

    async def find_activity(self, board_id: str) -> List[ActivityRead]:
        """Activity feed of the board, newest first."""
        async with self.gateway.transaction():
            await self.gateway.query_one("board.find_by_id", board_id=board_id)
            return await self.activity.find_by_board(board_id)
