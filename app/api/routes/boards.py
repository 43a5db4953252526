import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_user_id
from app.core.boards import BoardService
from app.core.validation import parse_body
from app.db.session import get_db
from app.schemas.activity import ActivityRead
from app.schemas.board import (
    BoardCreate,
    BoardRead,
    BoardSummary,
    BoardUpdate,
    BoardWithActivity,
)
from app.schemas.common import EntityRef
from app.schemas.list import ListCreate, ListWithActivity

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/boards", tags=["boards"])


@router.get("/", response_model=List[BoardSummary])
async def list_boards(
    user_id: str = Depends(get_user_id),
    db: AsyncSession = Depends(get_db),
):
    """List the user's boards with list/card counts and star flag."""
    return await BoardService(db).find_all_by_user(user_id)


@router.post("/", response_model=BoardWithActivity)
async def create_board(
    data: dict,
    user_id: str = Depends(get_user_id),
    db: AsyncSession = Depends(get_db),
):
    board = parse_body(BoardCreate, data, ["title"])
    return await BoardService(db).create(user_id, board)


@router.get("/{board_id}", response_model=BoardRead)
async def get_board(
    board_id: str,
    db: AsyncSession = Depends(get_db),
):
    """Fetch board by ID along with its lists and cards."""
    return await BoardService(db).find_by_id(board_id)


@router.put("/{board_id}", response_model=BoardWithActivity)
async def update_board(
    board_id: str,
    data: dict,
    user_id: str = Depends(get_user_id),
    db: AsyncSession = Depends(get_db),
):
    fields = parse_body(BoardUpdate, data, ["title"])
    return await BoardService(db).update(user_id, board_id, fields)


@router.delete("/{board_id}", response_model=EntityRef)
async def delete_board(
    board_id: str,
    db: AsyncSession = Depends(get_db),
):
    """Delete a board along with its lists and cards."""
    return await BoardService(db).drop(board_id)


@router.post("/{board_id}/lists", response_model=ListWithActivity)
async def create_list(
    board_id: str,
    data: dict,
    user_id: str = Depends(get_user_id),
    db: AsyncSession = Depends(get_db),
):
    board_list = parse_body(ListCreate, data, ["title"])
    return await BoardService(db).create_list(user_id, board_id, board_list)


@router.post("/{board_id}/archive", response_model=EntityRef)
async def archive_board(
    board_id: str,
    db: AsyncSession = Depends(get_db),
):
    return await BoardService(db).archive(board_id)


@router.post("/{board_id}/star", response_model=BoardSummary)
async def star_board(
    board_id: str,
    user_id: str = Depends(get_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await BoardService(db).mark_as_starred(user_id, board_id)


@router.delete("/{board_id}/star", response_model=BoardSummary)
async def unstar_board(
    board_id: str,
    user_id: str = Depends(get_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await BoardService(db).unmark_as_starred(user_id, board_id)


@router.get("/{board_id}/activity", response_model=List[ActivityRead])
async def board_activity(
    board_id: str,
    db: AsyncSession = Depends(get_db),
):
    """Activity feed of the board, newest first."""
    return await BoardService(db).find_activity(board_id)
