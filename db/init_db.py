"""
db/init_db.py
-------------
Creates the users/posts tables if they do not already exist.
Intended for local development and tests; production schemas are managed
outside this package. Run this module directly to initialize a database:
    python -m db.init_db
"""

from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Users table: identifiers are ULID strings assigned by the application
CREATE TABLE IF NOT EXISTS users (
    id              TEXT PRIMARY KEY,
    name            TEXT NOT NULL
);

-- Posts table: every post belongs to one user
CREATE TABLE IF NOT EXISTS posts (
    id              TEXT PRIMARY KEY,
    title           TEXT NOT NULL,
    body            TEXT NOT NULL,
    user_id         TEXT NOT NULL REFERENCES users(id)
);

-- Index for the per-user post listing
CREATE INDEX IF NOT EXISTS idx_posts_user_id ON posts(user_id, id);
"""


def create_tables(database) -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    try:
        with database.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        logger.info("Database schema initialized successfully.")
    except database.Error as e:
        logger.error(f"Failed to initialize schema: {e}")
        raise


if __name__ == "__main__":
    from config import load_config
    from db.connection import Database

    with Database(load_config().database) as db:
        create_tables(db)
    print("✅ Database schema created successfully.")
