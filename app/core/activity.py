import logging
from typing import Any, Dict, List, Optional

from app.db.gateway import Gateway
from app.schemas.activity import ActivityRead

logger = logging.getLogger(__name__)


class ActivityRecorder:
    """
    Appends audit records in the caller's transaction.

    Activity rows are never updated or deleted and outlive the board they
    describe.
    """

    def __init__(self, gateway: Gateway) -> None:
        self.gateway = gateway

    async def record(
        self,
        user_id: Optional[str],
        action: str,
        type: str,
        entry_id: str,
        entry: Dict[str, Any],
        board_id: Optional[str] = None,
    ) -> ActivityRead:
        row = await self.gateway.query_one(
            "activity.insert",
            action=action,
            type=type,
            entry_id=entry_id,
            board_id=board_id,
            entry=entry,
        )
        if user_id is not None:
            await self.gateway.execute("activity.link_user", user_id=user_id, activity_id=row["id"])

        logger.info(f"Activity {row['id']}: {action} {type} {entry_id}")
        return ActivityRead(**row)

    async def find_by_board(self, board_id: str) -> List[ActivityRead]:
        rows = await self.gateway.query_many("activity.find_by_board", board_id=board_id)
        return [ActivityRead(**row) for row in rows]
