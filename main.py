"""
main.py
-------
Process entry point for the postbook data-access layer.

Responsibilities:
    - Load the configuration once and configure logging.
    - Open the connection pool (and optionally create the schema).
    - Report store health, then shut the pool down.

The HTTP service layer builds the same objects at its own startup and
hands the repository to its request handlers.
"""

import argparse
import json
import sys

from config import load_config
from db.connection import Database
from db.init_db import create_tables
from repositories.blog_repo import BlogRepository
from utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


def build_repository(config, database: Database) -> BlogRepository:
    """Wire a repository to an open database."""
    return BlogRepository(database, config)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="postbook store bootstrap")
    parser.add_argument("--init-db", action="store_true", help="create tables if missing")
    args = parser.parse_args(argv)

    config = load_config()
    configure_logging(config.log_level)

    database = Database(config.database)
    database.open()
    try:
        if args.init_db:
            create_tables(database)
        health = build_repository(config, database).health()
        logger.info(f"Health: {json.dumps(health.to_dict())}")
        return 0 if health.mysql_connected else 1
    finally:
        database.close()


if __name__ == "__main__":
    sys.exit(main())
