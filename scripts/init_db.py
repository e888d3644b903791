"""
Database initialization script.

Creates the tables and seeds the built-in exercise catalog and the
default morning and evening routines (skipped when already seeded).

Usage:
    python scripts/init_db.py [--no-seed]
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from lumbar.core.config import settings
from lumbar.core.errors import LumbarError
from lumbar.core.logger import setup_logger
from lumbar.db.init_db import init_db
from lumbar.db.session import create_db_engine

if __name__ == "__main__":
    setup_logger(level=settings.LOG_LEVEL, log_file=settings.LOG_FILE)
    print("=" * 50)
    print("Lumbar Routines Database Initialization")
    print(f"Database: {settings.DATABASE_URL}")
    print("=" * 50)
    print()

    engine = create_db_engine(settings.DATABASE_URL)
    try:
        seeded = init_db(engine, seed="--no-seed" not in sys.argv)
        print()
        print("=" * 50)
        print("SUCCESS: Database initialized!" + (" (catalog seeded)" if seeded else ""))
        print("=" * 50)
        sys.exit(0)

    except (LumbarError, SQLAlchemyError) as e:
        logger.exception("Initialization failed")
        print()
        print("=" * 50)
        print("ERROR: Database initialization failed!")
        print(f"Details: {e}")
        print("=" * 50)
        sys.exit(1)
    finally:
        engine.dispose()
