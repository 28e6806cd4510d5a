"""
db/queries.py
-------------
Statement construction for the users/posts schema.

Every statement is parameterized: user-supplied values travel as bind
values only. The LIMIT clause is the single piece of SQL built from a
value, and only after `resolve_limit` has turned it into a plain int.
"""

from dataclasses import dataclass
from typing import Optional

from ulid import ULID

from errors import InvalidLimitError

DEFAULT_LIMIT = 10

_PLACEHOLDERS = {
    "format": "%s",  # psycopg2
    "qmark": "?",    # sqlite3
}


@dataclass(frozen=True)
class Statement:
    """A SQL statement plus its positional bind values."""
    sql: str
    params: tuple = ()


def resolve_limit(limit: Optional[int]) -> int:
    """
    Apply the default-limit policy.

    ``None``, zero and negative values mean `DEFAULT_LIMIT`.

    Raises:
        InvalidLimitError: If ``limit`` is not an int (bools included).
    """
    if limit is None:
        return DEFAULT_LIMIT
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise InvalidLimitError(limit)
    if limit <= 0:
        return DEFAULT_LIMIT
    return int(limit)


class QueryBuilder:
    """Builds statements in the placeholder style of the target driver."""

    def __init__(self, paramstyle: str = "format"):
        if paramstyle not in _PLACEHOLDERS:
            raise ValueError(f"unsupported paramstyle: {paramstyle!r}")
        self.paramstyle = paramstyle
        self._placeholder = _PLACEHOLDERS[paramstyle]

    def _statement(self, sql: str, *params) -> Statement:
        # Templates are written with %s and contain no literal percent signs.
        if self._placeholder != "%s":
            sql = sql.replace("%s", self._placeholder)
        return Statement(sql=sql, params=tuple(params))

    # ── INSERT ────────────────────────────────────────────

    def insert_user(self, user_id: ULID, name: str) -> Statement:
        sql = "INSERT INTO users (id, name) VALUES (%s, %s);"
        return self._statement(sql, str(user_id), name)

    def insert_post(self, post_id: ULID, title: str, body: str, user_id: ULID) -> Statement:
        sql = "INSERT INTO posts (id, title, body, user_id) VALUES (%s, %s, %s, %s);"
        return self._statement(sql, str(post_id), title, body, str(user_id))

    # ── SELECT ────────────────────────────────────────────

    def select_posts_by_user_id(self, user_id: ULID, limit: Optional[int] = None) -> Statement:
        """Posts of one user, newest first."""
        sql = f"""
            SELECT posts.id AS post_id, posts.title AS post_title,
                   posts.body AS post_body, posts.user_id AS post_user_id
            FROM posts
            WHERE posts.user_id = %s
            ORDER BY posts.id DESC
            LIMIT {resolve_limit(limit)};
        """
        return self._statement(sql, str(user_id))

    def list_posts_with_user(self, limit: Optional[int] = None) -> Statement:
        """All posts with their author columns, newest first."""
        sql = f"""
            SELECT P.id AS post_id, P.title AS post_title, P.body AS post_body,
                   U.id AS user_id, U.name AS user_name
            FROM posts AS P
            JOIN users AS U ON U.id = P.user_id
            ORDER BY P.id DESC
            LIMIT {resolve_limit(limit)};
        """
        return self._statement(sql)

    def get_user_with_posts(self, user_id: ULID) -> Statement:
        """
        One row per post of the user, newest first. A user without posts
        yields a single row whose post columns are NULL; an unknown user
        yields no rows.
        """
        sql = """
            SELECT U.id AS user_id, U.name AS user_name,
                   P.id AS post_id, P.title AS post_title,
                   P.body AS post_body, P.user_id AS post_user_id
            FROM users AS U
            LEFT JOIN posts AS P ON P.user_id = U.id
            WHERE U.id = %s
            ORDER BY P.id DESC;
        """
        return self._statement(sql, str(user_id))

    def ping(self) -> Statement:
        return self._statement("SELECT 1 AS ok;")
