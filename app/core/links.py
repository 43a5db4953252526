"""Links are derived from ids on every read; nothing stores them."""


def board_link(board_id: str) -> str:
    return f"/boards/{board_id}"


def list_link(board_id: str, list_id: str) -> str:
    return f"{board_link(board_id)}/lists/{list_id}"


def card_link(board_id: str, card_id: str) -> str:
    return f"{board_link(board_id)}/cards/{card_id}"
