"""Export Utility — dumps the four catalog tables to JSON files for the JSON store.

Usage:
    python -m pizzeria.export_json [--database-url URL] [--output-dir DIR]

Invariants:
    - One file per table, named as JsonCatalogStore expects (pizza_types.json, ...)
    - Rows written as stored (every column, stored types), 2-space indented
    - Output directory created if missing; existing files overwritten
    - Exit status 1 when the database cannot be opened
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from sqlalchemy import select

from pizzeria.config import async_database_url, get_settings
from pizzeria.core.errors import StoreUnavailableError
from pizzeria.infrastructure.json_catalog_store import TABLE_FILES
from pizzeria.infrastructure.observability import setup_logging
from pizzeria.infrastructure.sql_catalog_store import (
    CATALOG_TABLES, SqlCatalogStore,
)

logger = logging.getLogger(__name__)


async def export_tables(database_url: str, output_dir: str | Path) -> dict[str, int]:
    """Write every catalog table to output_dir. Returns rows written per table."""
    store = SqlCatalogStore.from_url(async_database_url(database_url))
    try:
        await store.verify()
        out = Path(output_dir)
        out.mkdir(parents=True, exist_ok=True)

        written = {}
        for model in CATALOG_TABLES:
            table = model.__tablename__
            async with store.db_manager.session() as db:
                result = await db.execute(select(model.__table__))
                rows = [dict(row) for row in result.mappings().all()]
            path = out / TABLE_FILES[table]
            with path.open("w", encoding="utf-8") as f:
                json.dump(rows, f, indent=2, ensure_ascii=False, default=str)
            logger.info(
                f"Exported {table} to {path}",
                extra={"table": table, "rows": len(rows)},
            )
            written[table] = len(rows)
        return written
    finally:
        await store.close()


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="pizzeria.export_json",
        description="Export catalog tables to JSON snapshot files.",
    )
    parser.add_argument("--database-url", default=settings.database_url)
    parser.add_argument("--output-dir", default=settings.data_dir)
    args = parser.parse_args(argv)

    setup_logging(settings.log_level, settings.log_format)
    try:
        asyncio.run(export_tables(args.database_url, args.output_dir))
    except StoreUnavailableError as e:
        logger.error(e.message, extra={"error_code": e.code})
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
