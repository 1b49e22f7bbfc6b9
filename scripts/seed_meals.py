#!/usr/bin/env python3
"""
Standalone catalog seeding script
Creates the schema if needed and inserts the default menu into an empty meal table
"""

import sys
import os
import logging

# Ensure we're using the right Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from app.config import settings
from app.exceptions import StorageUnavailableError
from domain.models import Database
from services.catalog_service import CatalogService

logger = logging.getLogger("foodorder.scripts.seed")


def main(database_url: str = None) -> int:
    database = Database(database_url or settings.database_url, echo=settings.db_echo)
    try:
        database.init_database()
        with database.session_factory() as db:
            inserted = CatalogService.seed_meals(db)
    except StorageUnavailableError:
        return 1
    finally:
        database.dispose()

    if inserted:
        print(f"Meals seeded successfully ({inserted} inserted)")
    else:
        print("Meals already seeded")
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()), format=settings.log_format
    )
    sys.exit(main())
