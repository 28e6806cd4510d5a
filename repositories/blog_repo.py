"""
repositories/blog_repo.py
-------------------------
Data access layer for users and their posts.
All SQL executed against the `users` and `posts` tables goes through here.
"""

from typing import Optional

from ulid import ULID

from config import AppConfig
from db.queries import QueryBuilder, Statement
from errors import ExecutionError, NotFoundError, QueryCanceledError
from models.health import Health
from models.post import Post, PostWithUser
from models.rows import map_posts, map_posts_with_user, map_user_with_posts
from models.user import User, UserWithPosts
from utils.identifiers import IdentifierGenerator, default_generator
from utils.logger import get_logger

logger = get_logger(__name__)


class BlogRepository:
    """
    Repository for the users and posts tables.

    Args:
        database: Store handle exposing ``cursor(timeout_ms=...)``,
            ``paramstyle``, ``Error`` and ``canceled_errors``.
        config: Application config; its ``statement_timeout_ms`` is the
            default deadline of every call.
        id_generator: Source of new primary keys.
    """

    def __init__(
        self,
        database,
        config: Optional[AppConfig] = None,
        id_generator: Optional[IdentifierGenerator] = None,
    ):
        self._db = database
        self._queries = QueryBuilder(database.paramstyle)
        self._ids = id_generator or default_generator()
        self._timeout_ms = config.database.statement_timeout_ms if config else None

    def _execute(
        self, operation: str, statement: Statement, timeout_ms: Optional[int] = None
    ) -> list:
        """Run one statement in its own transaction and return its rows."""
        if timeout_ms is None:
            timeout_ms = self._timeout_ms
        logger.debug(f"{operation}: {' '.join(statement.sql.split())} {statement.params}")
        try:
            with self._db.cursor(timeout_ms=timeout_ms) as cur:
                cur.execute(statement.sql, statement.params)
                return cur.fetchall() if cur.description is not None else []
        except self._db.canceled_errors as e:
            logger.warning(f"{operation} cancelled after {timeout_ms} ms: {e}")
            raise QueryCanceledError(operation, statement, e) from e
        except self._db.Error as e:
            logger.error(f"{operation} failed: {e}")
            raise ExecutionError(operation, statement, e) from e

    # ── CREATE ────────────────────────────────────────────

    def insert_user(self, name: str, *, timeout_ms: Optional[int] = None) -> User:
        """
        Insert a new user with a freshly generated identifier.

        Raises:
            ExecutionError: If the store rejects the insert.
        """
        user = User(id=self._ids.generate(), name=name)
        self._execute("insert_user", self._queries.insert_user(user.id, name), timeout_ms)
        logger.info(f"Added user #{user.id}")
        return user

    def insert_post(
        self, title: str, body: str, user_id: ULID, *, timeout_ms: Optional[int] = None
    ) -> Post:
        """
        Insert a new post for ``user_id``.

        The store enforces that the user exists; a dangling reference
        surfaces as an ExecutionError.
        """
        post = Post(id=self._ids.generate(), title=title, body=body, user_id=user_id)
        statement = self._queries.insert_post(post.id, title, body, user_id)
        self._execute("insert_post", statement, timeout_ms)
        logger.info(f"Added post #{post.id} for user {user_id}")
        return post

    # ── READ ──────────────────────────────────────────────

    def select_posts_by_user_id(
        self, user_id: ULID, limit: Optional[int] = None, *, timeout_ms: Optional[int] = None
    ) -> list[Post]:
        """
        Posts of one user, newest first.

        Args:
            user_id: Author identifier.
            limit: Maximum number of posts; None or <= 0 means 10.

        Raises:
            InvalidLimitError: If ``limit`` is not an integer.
            ExecutionError: If the query fails.
        """
        statement = self._queries.select_posts_by_user_id(user_id, limit)
        rows = self._execute("select_posts_by_user_id", statement, timeout_ms)
        return map_posts(rows)

    def list_posts(
        self, limit: Optional[int] = None, *, timeout_ms: Optional[int] = None
    ) -> list[PostWithUser]:
        """Latest posts across all users, each with its author embedded."""
        statement = self._queries.list_posts_with_user(limit)
        rows = self._execute("list_posts", statement, timeout_ms)
        return map_posts_with_user(rows)

    def get_user_with_posts_by_id(
        self, user_id: ULID, *, timeout_ms: Optional[int] = None
    ) -> UserWithPosts:
        """
        Fetch a user and all of their posts, newest first.

        Raises:
            NotFoundError: If no user has this identifier.
            ExecutionError: If the query fails.
        """
        statement = self._queries.get_user_with_posts(user_id)
        rows = self._execute("get_user_with_posts_by_id", statement, timeout_ms)
        if not rows:
            raise NotFoundError(
                "get_user_with_posts_by_id", statement, f"user {user_id} not found"
            )
        return map_user_with_posts(rows)

    # ── HEALTH ────────────────────────────────────────────

    def health(self, *, timeout_ms: Optional[int] = None) -> Health:
        """Probe the store; failures are logged and reported, not raised."""
        try:
            self._execute("health", self._queries.ping(), timeout_ms)
            connected = True
        except ExecutionError as e:
            logger.error(f"Store health check failed: {e.cause}")
            connected = False
        return Health(mysql_connected=connected)
