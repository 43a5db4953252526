from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_user_id
from app.core.lists import ListService
from app.core.validation import parse_body
from app.db.session import get_db
from app.schemas.card import CardCreate, CardWithActivity
from app.schemas.common import EntityRef
from app.schemas.list import ListUpdate, ListWithActivity

router = APIRouter(prefix="/api/lists", tags=["lists"])


@router.put("/{list_id}", response_model=ListWithActivity)
async def update_list(
    list_id: str,
    data: dict,
    user_id: str = Depends(get_user_id),
    db: AsyncSession = Depends(get_db),
):
    board_list = parse_body(ListUpdate, data, ["title"])
    return await ListService(db).update(user_id, list_id, board_list)


@router.delete("/{list_id}", response_model=EntityRef)
async def delete_list(
    list_id: str,
    db: AsyncSession = Depends(get_db),
):
    return await ListService(db).drop(list_id)


@router.post("/{list_id}/cards", response_model=CardWithActivity)
async def create_card(
    list_id: str,
    data: dict,
    user_id: str = Depends(get_user_id),
    db: AsyncSession = Depends(get_db),
):
    card = parse_body(CardCreate, data, ["text"])
    return await ListService(db).create_card(user_id, list_id, card)
