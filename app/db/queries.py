"""
Named, parameterized statements.

Every statement the gateway runs is registered here at import time under an
operation name. A statement registered with ``entity``/``key`` is singular:
the gateway raises ``NotFoundError(entity, params[key])`` when it matches no
rows. ``verify_statements`` compiles the whole registry against the engine's
dialect at startup.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Union

from sqlalchemy import Boolean, DateTime, Integer, JSON, String, bindparam, text
from sqlalchemy.sql.elements import TextClause
from sqlalchemy.sql.selectable import TextualSelect


@dataclass(frozen=True)
class Statement:
    name: str
    clause: Union[TextClause, TextualSelect]
    entity: Optional[str] = None
    key: Optional[str] = None

    @property
    def singular(self) -> bool:
        return self.entity is not None


STATEMENTS: Dict[str, Statement] = {}


def register(
    name: str,
    sql: str,
    *,
    entity: Optional[str] = None,
    key: Optional[str] = None,
    binds: Optional[dict] = None,
    columns: Optional[dict] = None,
) -> Statement:
    if name in STATEMENTS:
        raise ValueError(f"Statement {name!r} is already registered")

    clause = text(sql)
    if binds:
        clause = clause.bindparams(*[bindparam(k, type_=t) for k, t in binds.items()])
    if columns:
        clause = clause.columns(**columns)

    statement = Statement(name=name, clause=clause, entity=entity, key=key)
    STATEMENTS[name] = statement
    return statement


def get_statement(name: str) -> Statement:
    try:
        return STATEMENTS[name]
    except KeyError:
        raise LookupError(f"No statement registered as {name!r}") from None


def verify_statements(dialect) -> int:
    """Compile every statement and check singular ones bind their key."""
    for statement in STATEMENTS.values():
        compiled = statement.clause.compile(dialect=dialect)
        if statement.key and statement.key not in compiled.params:
            raise RuntimeError(
                f"Statement {statement.name!r} does not bind its key {statement.key!r}"
            )
    return len(STATEMENTS)


# --- Boards --- #

BOARD_SUMMARY_COLUMNS = dict(
    id=String, title=String, lists_length=Integer, cards_length=Integer, starred=Boolean
)

BOARD_SUMMARY_SQL = """
    SELECT
        b.id,
        b.title,
        (SELECT COUNT(*) FROM boards_lists bl WHERE bl.board_id = b.id) AS lists_length,
        (SELECT COUNT(*)
            FROM boards_lists bl
            JOIN lists_cards lc ON lc.list_id = bl.list_id
            WHERE bl.board_id = b.id) AS cards_length,
        EXISTS (
            SELECT 1 FROM users_starred_boards s
            WHERE s.board_id = b.id AND s.user_id = :user_id
        ) AS starred
    FROM boards b
"""

register(
    "board.find_by_id",
    "SELECT id, title FROM boards WHERE id = :board_id",
    entity="board",
    key="board_id",
    columns=dict(id=String, title=String),
)

register(
    "board.find_lists",
    """
    SELECT l.id, l.title
    FROM lists l
    JOIN boards_lists bl ON bl.list_id = l.id
    WHERE bl.board_id = :board_id
    ORDER BY l.position, l.created_at, l.id
    """,
    columns=dict(id=String, title=String),
)

register(
    "board.find_cards",
    """
    SELECT c.id, c.text, lc.list_id
    FROM cards c
    JOIN lists_cards lc ON lc.card_id = c.id
    JOIN boards_lists bl ON bl.list_id = lc.list_id
    WHERE bl.board_id = :board_id
    ORDER BY c.position, c.created_at, c.id
    """,
    columns=dict(id=String, text=String, list_id=String),
)

register(
    "board.find_all_by_user",
    BOARD_SUMMARY_SQL
    + """
    JOIN users_boards ub ON ub.board_id = b.id
    WHERE ub.user_id = :user_id
    ORDER BY b.created_at, b.id
    """,
    columns=BOARD_SUMMARY_COLUMNS,
)

register(
    "board.find_summary",
    BOARD_SUMMARY_SQL + " WHERE b.id = :board_id",
    entity="board",
    key="board_id",
    columns=BOARD_SUMMARY_COLUMNS,
)

register("board.insert", "INSERT INTO boards (id, title) VALUES (:board_id, :title)")

register(
    "board.link_user",
    "INSERT INTO users_boards (user_id, board_id) VALUES (:user_id, :board_id)",
)

register(
    "board.update_title",
    "UPDATE boards SET title = :title WHERE id = :board_id",
    entity="board",
    key="board_id",
)

register(
    "board.archive",
    "UPDATE boards SET archived = :archived WHERE id = :board_id",
    entity="board",
    key="board_id",
    binds=dict(archived=Boolean),
)

# Lists and cards hang off join tables, so the board's children are removed
# explicitly before the board row; the join rows go by cascade.
register(
    "board.delete_cards",
    """
    DELETE FROM cards WHERE id IN (
        SELECT lc.card_id
        FROM lists_cards lc
        JOIN boards_lists bl ON bl.list_id = lc.list_id
        WHERE bl.board_id = :board_id
    )
    """,
)

register(
    "board.delete_lists",
    "DELETE FROM lists WHERE id IN (SELECT list_id FROM boards_lists WHERE board_id = :board_id)",
)

register(
    "board.delete",
    "DELETE FROM boards WHERE id = :board_id",
    entity="board",
    key="board_id",
)

register(
    "board.star",
    """
    INSERT INTO users_starred_boards (user_id, board_id)
    SELECT CAST(:user_id AS VARCHAR), CAST(:board_id AS VARCHAR)
    WHERE NOT EXISTS (
        SELECT 1 FROM users_starred_boards
        WHERE user_id = :user_id AND board_id = :board_id
    )
    """,
)

register(
    "board.unstar",
    "DELETE FROM users_starred_boards WHERE user_id = :user_id AND board_id = :board_id",
)

# --- Lists --- #

register(
    "list.insert",
    """
    INSERT INTO lists (id, title, position)
    VALUES (
        :list_id,
        :title,
        (
            SELECT COALESCE(MAX(l.position) + 1, 0)
            FROM lists l
            JOIN boards_lists bl ON bl.list_id = l.id
            WHERE bl.board_id = :board_id
        )
    )
    """,
)

register(
    "list.link_board",
    "INSERT INTO boards_lists (board_id, list_id) VALUES (:board_id, :list_id)",
)

register(
    "list.find_by_id",
    """
    SELECT l.id, l.title, bl.board_id
    FROM lists l
    JOIN boards_lists bl ON bl.list_id = l.id
    WHERE l.id = :list_id
    """,
    entity="list",
    key="list_id",
    columns=dict(id=String, title=String, board_id=String),
)

register(
    "list.update_title",
    "UPDATE lists SET title = :title WHERE id = :list_id",
    entity="list",
    key="list_id",
)

register(
    "list.delete_cards",
    "DELETE FROM cards WHERE id IN (SELECT card_id FROM lists_cards WHERE list_id = :list_id)",
)

register(
    "list.delete",
    "DELETE FROM lists WHERE id = :list_id",
    entity="list",
    key="list_id",
)

# --- Cards --- #

register(
    "card.insert",
    """
    INSERT INTO cards (id, text, colors, position)
    VALUES (
        :card_id,
        :text,
        :colors,
        (
            SELECT COALESCE(MAX(c.position) + 1, 0)
            FROM cards c
            JOIN lists_cards lc ON lc.card_id = c.id
            WHERE lc.list_id = :list_id
        )
    )
    """,
    binds=dict(colors=JSON),
)

register(
    "card.link_list",
    "INSERT INTO lists_cards (list_id, card_id) VALUES (:list_id, :card_id)",
)

register(
    "card.find_by_id",
    """
    SELECT c.id, c.text, c.colors, c.position, lc.list_id, bl.board_id
    FROM cards c
    JOIN lists_cards lc ON lc.card_id = c.id
    JOIN boards_lists bl ON bl.list_id = lc.list_id
    WHERE c.id = :card_id
    """,
    entity="card",
    key="card_id",
    columns=dict(
        id=String, text=String, colors=JSON, position=Integer, list_id=String, board_id=String
    ),
)

register(
    "card.find_comments",
    """
    SELECT id, text, user_id, created_at
    FROM comments
    WHERE card_id = :card_id
    ORDER BY created_at, id
    """,
    columns=dict(id=String, text=String, user_id=String, created_at=DateTime),
)

register(
    "card.update_text",
    "UPDATE cards SET text = :text WHERE id = :card_id",
    entity="card",
    key="card_id",
)

register(
    "card.update_colors",
    "UPDATE cards SET colors = :colors WHERE id = :card_id",
    entity="card",
    key="card_id",
    binds=dict(colors=JSON),
)

register(
    "card.delete",
    "DELETE FROM cards WHERE id = :card_id",
    entity="card",
    key="card_id",
)

register(
    "card.move",
    "UPDATE lists_cards SET list_id = :list_id WHERE card_id = :card_id",
    entity="card",
    key="card_id",
)

register(
    "card.next_position",
    """
    SELECT COALESCE(MAX(c.position) + 1, 0) AS position
    FROM cards c
    JOIN lists_cards lc ON lc.card_id = c.id
    WHERE lc.list_id = :list_id AND c.id <> :card_id
    """,
    columns=dict(position=Integer),
)

register(
    "card.shift_positions",
    """
    UPDATE cards SET position = position + 1
    WHERE position >= :position
      AND id <> :card_id
      AND id IN (SELECT card_id FROM lists_cards WHERE list_id = :list_id)
    """,
)

register(
    "card.set_position",
    "UPDATE cards SET position = :position WHERE id = :card_id",
    entity="card",
    key="card_id",
)

# --- Comments --- #

register(
    "comment.insert",
    """
    INSERT INTO comments (id, card_id, user_id, text)
    VALUES (:comment_id, :card_id, :user_id, :text)
    RETURNING id, text, user_id, created_at
    """,
    columns=dict(id=String, text=String, user_id=String, created_at=DateTime),
)

# --- Activity --- #

register(
    "activity.insert",
    """
    INSERT INTO activity (action, type, entry_id, board_id, entry)
    VALUES (:action, :type, :entry_id, :board_id, :entry)
    RETURNING id, action, type, entry, created_at
    """,
    binds=dict(entry=JSON),
    columns=dict(id=Integer, action=String, type=String, entry=JSON, created_at=DateTime),
)

register(
    "activity.link_user",
    "INSERT INTO users_activity (user_id, activity_id) VALUES (:user_id, :activity_id)",
)

register(
    "activity.find_by_board",
    """
    SELECT id, action, type, entry, created_at
    FROM activity
    WHERE board_id = :board_id
    ORDER BY id DESC
    """,
    columns=dict(id=Integer, action=String, type=String, entry=JSON, created_at=DateTime),
)

# --- System --- #

register(
    "system.stats",
    """
    SELECT
        (SELECT COUNT(*) FROM boards) AS boards,
        (SELECT COUNT(*) FROM lists) AS lists,
        (SELECT COUNT(*) FROM cards) AS cards,
        (SELECT COUNT(*) FROM activity) AS activity
    """,
    columns=dict(boards=Integer, lists=Integer, cards=Integer, activity=Integer),
)
