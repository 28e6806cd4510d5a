import sqlite3
from contextlib import contextmanager

import pytest

from config import AppConfig
from db.init_db import SCHEMA_SQL
from repositories.blog_repo import BlogRepository


class SQLiteDatabase:
    """In-memory store handle with the same protocol as db.connection.Database."""

    paramstyle = "qmark"
    Error = sqlite3.Error
    canceled_errors = ()

    def __init__(self):
        self.conn = sqlite3.connect(":memory:", check_same_thread=False)
        self.conn.row_factory = sqlite3.Row
        self.conn.execute("PRAGMA foreign_keys = ON;")
        self.conn.executescript(SCHEMA_SQL)
        self.timeouts = []

    @contextmanager
    def cursor(self, timeout_ms=None):
        self.timeouts.append(timeout_ms)
        cur = self.conn.cursor()
        try:
            yield cur
            self.conn.commit()
        except Exception:
            self.conn.rollback()
            raise
        finally:
            cur.close()

    def close(self):
        self.conn.close()


@pytest.fixture()
def database():
    db = SQLiteDatabase()
    yield db
    db.close()


@pytest.fixture()
def repo(database):
    return BlogRepository(database, AppConfig())
