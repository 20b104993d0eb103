"""Create the users and books tables.

Run once against a fresh database::

    python -m app.init_db [--drop]
"""
import argparse
import asyncio
import logging
import sys

from sqlalchemy.exc import SQLAlchemyError

from app.database import create_tables, engine

logger = logging.getLogger(__name__)


async def _init_db(drop_existing: bool) -> None:
    try:
        await create_tables(drop_existing=drop_existing)
    finally:
        await engine.dispose()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create the book catalog tables.")
    parser.add_argument("--drop", action="store_true", help="drop existing tables first")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        asyncio.run(_init_db(args.drop))
    except SQLAlchemyError:
        logger.exception("Error creating tables")
        return 1
    logger.info("Tables created successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
