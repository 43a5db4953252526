from app.db.models.user import User
from app.db.models.board import Board, users_boards, users_starred_boards
from app.db.models.list import BoardList, boards_lists
from app.db.models.card import Card, lists_cards
from app.db.models.comment import Comment
from app.db.models.activity import Activity, users_activity

__all__ = [
    "Activity",
    "Board",
    "BoardList",
    "Card",
    "Comment",
    "User",
    "boards_lists",
    "lists_cards",
    "users_activity",
    "users_boards",
    "users_starred_boards",
]
