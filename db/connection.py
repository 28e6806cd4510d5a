"""
db/connection.py
----------------
Manages the PostgreSQL connection pool.
Uses psycopg2's ThreadedConnectionPool so one pool can serve concurrent
requests; each `cursor()` call borrows a connection for a single
transaction and returns it afterwards.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

import psycopg2
from psycopg2 import extensions, extras, pool

from config import DatabaseConfig
from errors import ConfigError
from utils.logger import get_logger

logger = get_logger(__name__)


def build_dsn(config: DatabaseConfig) -> str:
    """
    Render a libpq connection string from the configuration.

    The port is left out when empty. With the ``unix`` method the host is
    the directory holding the server socket.

    Raises:
        ConfigError: If a unix socket host is not an absolute path.
    """
    params = {
        "user": config.user,
        "password": config.password,
        "host": config.host,
        "dbname": config.name,
    }
    if config.conn_method == "unix" and not config.host.startswith("/"):
        raise ConfigError(f"unix connections need a socket directory, got host {config.host!r}")
    if config.port:
        params["port"] = config.port
    return extensions.make_dsn(**params)


class Database:
    """
    Store handle backed by a psycopg2 connection pool.

    Rows are returned as ``RealDictRow`` objects, addressable by column name.
    """

    paramstyle = "format"
    Error = psycopg2.Error
    canceled_errors = (extensions.QueryCanceledError,)

    def __init__(self, config: DatabaseConfig):
        self._config = config
        self._pool: Optional[pool.ThreadedConnectionPool] = None

    def open(self) -> None:
        """
        Initialize the connection pool.

        Raises:
            psycopg2.OperationalError: If the database is unreachable.
        """
        if self._pool is not None:
            return
        try:
            self._pool = pool.ThreadedConnectionPool(
                self._config.pool_min, self._config.pool_max, build_dsn(self._config)
            )
            logger.info(
                f"Database connection pool initialized ({self._config.host}/{self._config.name})."
            )
        except psycopg2.OperationalError as e:
            logger.error(f"Failed to initialize database pool: {e}")
            raise

    def close(self) -> None:
        """Close all connections in the pool."""
        if self._pool is not None:
            self._pool.closeall()
            self._pool = None
            logger.info("Database connection pool closed.")

    @contextmanager
    def cursor(self, timeout_ms: Optional[int] = None) -> Iterator:
        """
        Borrow a connection and yield a cursor inside one transaction.

        Commits when the block exits normally, rolls back and re-raises
        otherwise. ``timeout_ms`` bounds every statement in the block.

        Raises:
            psycopg2.InterfaceError: If the pool has not been opened.
        """
        if self._pool is None:
            raise psycopg2.InterfaceError("Database pool not initialized. Call open() first.")
        conn = self._pool.getconn()
        try:
            with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                if timeout_ms is not None:
                    cur.execute("SET LOCAL statement_timeout = %s;", (int(timeout_ms),))
                yield cur
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            self._pool.putconn(conn)

    def __enter__(self) -> "Database":
        self.open()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
