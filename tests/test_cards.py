"""Tests for the list, card and comment services."""

import pytest

from app.core import ids
from app.core.boards import BoardService
from app.core.cards import CardService
from app.core.comments import CommentService
from app.core.errors import NotFoundError
from app.core.lists import ListService
from app.schemas.card import CardColor, CardCreate, CardMove, CardUpdate
from app.schemas.comment import CommentCreate
from app.schemas.list import ListCreate, ListUpdate

pytestmark = pytest.mark.asyncio


class TestListService:
    """Tests for ListService."""

    async def test_update_title(self, db, seed) -> None:
        board_list = await ListService(db).update(seed.user_id, seed.list_id, ListUpdate(title="renamed"))

        assert board_list.title == "renamed"
        assert board_list.link == f"/boards/{seed.board_id}/lists/{seed.list_id}"
        assert board_list.activity.action == "Updated"
        assert board_list.activity.type == "list"
        assert board_list.activity.entry == {"title": "renamed", "link": board_list.link}

    async def test_update_missing_list(self, db, seed) -> None:
        with pytest.raises(NotFoundError, match="List missing not found"):
            await ListService(db).update(seed.user_id, "missing", ListUpdate(title="x"))

    async def test_drop_removes_cards(self, db, seed, query) -> None:
        result = await ListService(db).drop(seed.list_id)

        assert result.model_dump() == {"id": seed.list_id}
        assert await query("SELECT id FROM cards") == []
        board = await BoardService(db).find_by_id(seed.board_id)
        assert board.lists == []

    async def test_create_card(self, db, seed, query) -> None:
        card = await ListService(db).create_card(seed.user_id, seed.list_id, CardCreate(text="new card"))

        assert ids.is_valid(card.id)
        assert card.link == f"/boards/{seed.board_id}/cards/{card.id}"
        assert card.activity.action == "Created"
        assert card.activity.type == "card"

        rows = await query("SELECT list_id FROM lists_cards WHERE card_id = :id", id=card.id)
        assert rows == [{"list_id": seed.list_id}]

        board = await BoardService(db).find_by_id(seed.board_id)
        assert [c.id for c in board.lists[0].cards] == [seed.card_id, card.id]

    async def test_create_card_after_a_card_moved_out(self, db, seed, query) -> None:
        lists = ListService(db)
        second = await lists.create_card(seed.user_id, seed.list_id, CardCreate(text="second"))
        third = await lists.create_card(seed.user_id, seed.list_id, CardCreate(text="third"))
        target = await BoardService(db).create_list(seed.user_id, seed.board_id, ListCreate(title="done"))
        await CardService(db).move(seed.user_id, CardMove(card_id=seed.card_id, list_id=target.id))

        fourth = await lists.create_card(seed.user_id, seed.list_id, CardCreate(text="fourth"))

        board = await BoardService(db).find_by_id(seed.board_id)
        assert [c.id for c in board.lists[0].cards] == [second.id, third.id, fourth.id]

        rows = await query("SELECT id, position FROM cards")
        positions = {row["id"]: row["position"] for row in rows}
        assert positions[fourth.id] > positions[third.id]

    async def test_create_card_in_missing_list(self, db, seed) -> None:
        with pytest.raises(NotFoundError):
            await ListService(db).create_card(seed.user_id, "missing", CardCreate(text="x"))


class TestCardService:
    """Tests for CardService."""

    async def test_find_by_id(self, db, seed) -> None:
        card = await CardService(db).find_by_id(seed.card_id)

        assert card.model_dump() == {
            "id": seed.card_id,
            "text": "test card",
            "colors": [],
            "link": f"/boards/{seed.board_id}/cards/{seed.card_id}",
            "list_id": seed.list_id,
            "board_id": seed.board_id,
            "comments": [],
        }

    async def test_find_missing_card(self, db, seed) -> None:
        with pytest.raises(NotFoundError, match="Card missing not found"):
            await CardService(db).find_by_id("missing")

    async def test_update(self, db, seed) -> None:
        service = CardService(db)
        card = await service.update(seed.user_id, seed.card_id, CardUpdate(text="edited"))

        assert card.text == "edited"
        assert card.activity.entry == {"text": "edited", "link": card.link}
        assert (await service.find_by_id(seed.card_id)).text == "edited"

    async def test_drop(self, db, seed, query) -> None:
        service = CardService(db)
        result = await service.drop(seed.card_id)

        assert result.model_dump() == {"id": seed.card_id}
        assert await query("SELECT card_id FROM lists_cards") == []
        with pytest.raises(NotFoundError):
            await service.drop(seed.card_id)

    async def test_colors_are_unique_and_ordered(self, db, seed) -> None:
        service = CardService(db)
        await service.add_color(seed.card_id, CardColor(color="red"))
        await service.add_color(seed.card_id, CardColor(color="blue"))
        result = await service.add_color(seed.card_id, CardColor(color="red"))

        assert result.model_dump() == {"id": seed.card_id, "colors": ["red", "blue"]}
        assert (await service.find_by_id(seed.card_id)).colors == ["red", "blue"]

    async def test_remove_color(self, db, seed) -> None:
        service = CardService(db)
        await service.add_color(seed.card_id, CardColor(color="red"))
        await service.add_color(seed.card_id, CardColor(color="blue"))
        result = await service.remove_color(seed.card_id, CardColor(color="red"))

        assert result.colors == ["blue"]

    async def test_color_on_missing_card(self, db, seed) -> None:
        with pytest.raises(NotFoundError):
            await CardService(db).add_color("missing", CardColor(color="red"))

    async def test_move_to_other_list(self, db, seed) -> None:
        target = await BoardService(db).create_list(seed.user_id, seed.board_id, ListCreate(title="done"))

        moved = await CardService(db).move(seed.user_id, CardMove(card_id=seed.card_id, list_id=target.id))

        assert moved.model_dump() == {
            "id": seed.card_id,
            "list_id": target.id,
            "position": 0,
            "link": f"/boards/{seed.board_id}/cards/{seed.card_id}",
        }
        board = await BoardService(db).find_by_id(seed.board_id)
        assert [len(l.cards) for l in board.lists] == [0, 1]

    async def test_move_to_front_of_list(self, db, seed) -> None:
        lists = ListService(db)
        other = await lists.create_card(seed.user_id, seed.list_id, CardCreate(text="second"))

        moved = await CardService(db).move(
            seed.user_id, CardMove(card_id=other.id, list_id=seed.list_id, position=0)
        )

        assert moved.position == 0
        board = await BoardService(db).find_by_id(seed.board_id)
        assert [c.id for c in board.lists[0].cards] == [other.id, seed.card_id]

    async def test_move_to_end_of_same_list(self, db, seed) -> None:
        other = await ListService(db).create_card(seed.user_id, seed.list_id, CardCreate(text="second"))

        moved = await CardService(db).move(seed.user_id, CardMove(card_id=seed.card_id, list_id=seed.list_id))

        assert moved.position == 2
        board = await BoardService(db).find_by_id(seed.board_id)
        assert [c.id for c in board.lists[0].cards] == [other.id, seed.card_id]

    async def test_move_to_end_after_gap(self, db, seed) -> None:
        lists = ListService(db)
        second = await lists.create_card(seed.user_id, seed.list_id, CardCreate(text="second"))
        third = await lists.create_card(seed.user_id, seed.list_id, CardCreate(text="third"))
        await CardService(db).drop(second.id)
        target = await BoardService(db).create_list(seed.user_id, seed.board_id, ListCreate(title="done"))
        incoming = await lists.create_card(seed.user_id, target.id, CardCreate(text="incoming"))

        moved = await CardService(db).move(seed.user_id, CardMove(card_id=incoming.id, list_id=seed.list_id))

        assert moved.position == 3
        board = await BoardService(db).find_by_id(seed.board_id)
        assert [c.id for c in board.lists[0].cards] == [seed.card_id, third.id, incoming.id]

    async def test_move_records_activity(self, db, seed) -> None:
        target = await BoardService(db).create_list(seed.user_id, seed.board_id, ListCreate(title="done"))
        await CardService(db).move(seed.user_id, CardMove(card_id=seed.card_id, list_id=target.id))

        feed = await BoardService(db).find_activity(seed.board_id)
        assert feed[0].action == "Moved"
        assert feed[0].entry["from_list"] == seed.list_id
        assert feed[0].entry["to_list"] == target.id

    async def test_move_to_missing_list(self, db, seed) -> None:
        with pytest.raises(NotFoundError):
            await CardService(db).move(seed.user_id, CardMove(card_id=seed.card_id, list_id="missing"))


class TestCommentService:
    """Tests for CommentService."""

    async def test_create_comment(self, db, seed) -> None:
        comment = await CommentService(db).create(seed.user_id, seed.card_id, CommentCreate(text="looks good"))

        assert ids.is_valid(comment.id)
        assert comment.text == "looks good"
        assert comment.user_id == seed.user_id
        assert comment.created_at is not None
        assert comment.activity.action == "Commented"
        assert comment.activity.entry["link"] == f"/boards/{seed.board_id}/cards/{seed.card_id}"

        card = await CardService(db).find_by_id(seed.card_id)
        assert [c.text for c in card.comments] == ["looks good"]

    async def test_comment_on_missing_card(self, db, seed) -> None:
        with pytest.raises(NotFoundError):
            await CommentService(db).create(seed.user_id, "missing", CommentCreate(text="x"))

    async def test_comments_go_with_card(self, db, seed, query) -> None:
        await CommentService(db).create(seed.user_id, seed.card_id, CommentCreate(text="x"))
        await CardService(db).drop(seed.card_id)

        assert await query("SELECT id FROM comments") == []
