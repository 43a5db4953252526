from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_user_id
from app.core.cards import CardService
from app.core.comments import CommentService
from app.core.validation import parse_body
from app.db.session import get_db
from app.schemas.card import (
    CardColor,
    CardColors,
    CardMove,
    CardMoved,
    CardRead,
    CardUpdate,
    CardWithActivity,
)
from app.schemas.comment import CommentCreate, CommentWithActivity
from app.schemas.common import EntityRef

router = APIRouter(prefix="/api/cards", tags=["cards"])


# Registered before the /{card_id} routes so "move" is never read as an id.
@router.post("/move", response_model=CardMoved)
async def move_card(
    data: dict,
    user_id: str = Depends(get_user_id),
    db: AsyncSession = Depends(get_db),
):
    move = parse_body(CardMove, data, ["card_id", "list_id"])
    return await CardService(db).move(user_id, move)


@router.get("/{card_id}", response_model=CardRead)
async def get_card(
    card_id: str,
    db: AsyncSession = Depends(get_db),
):
    """Fetch a card with its colors and comments."""
    return await CardService(db).find_by_id(card_id)


@router.put("/{card_id}", response_model=CardWithActivity)
async def update_card(
    card_id: str,
    data: dict,
    user_id: str = Depends(get_user_id),
    db: AsyncSession = Depends(get_db),
):
    card = parse_body(CardUpdate, data, ["text"])
    return await CardService(db).update(user_id, card_id, card)


@router.delete("/{card_id}", response_model=EntityRef)
async def delete_card(
    card_id: str,
    db: AsyncSession = Depends(get_db),
):
    return await CardService(db).drop(card_id)


@router.post("/{card_id}/addColor", response_model=CardColors)
async def add_color(
    card_id: str,
    data: dict,
    db: AsyncSession = Depends(get_db),
):
    color = parse_body(CardColor, data, ["color"])
    return await CardService(db).add_color(card_id, color)


@router.post("/{card_id}/removeColor", response_model=CardColors)
async def remove_color(
    card_id: str,
    data: dict,
    db: AsyncSession = Depends(get_db),
):
    color = parse_body(CardColor, data, ["color"])
    return await CardService(db).remove_color(card_id, color)


@router.post("/{card_id}/comments", response_model=CommentWithActivity)
async def create_comment(
    card_id: str,
    data: dict,
    user_id: str = Depends(get_user_id),
    db: AsyncSession = Depends(get_db),
):
    comment = parse_body(CommentCreate, data, ["text"])
    return await CommentService(db).create(user_id, card_id, comment)
