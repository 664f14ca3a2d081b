#!/usr/bin/env python3
"""Seed the Lookbook catalog.

Loads the bundled sample products and moodboards into the database.

Usage:
    python scripts/seed_catalog.py
    python scripts/seed_catalog.py --no-clear
    python scripts/seed_catalog.py --products-only
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import delete

from lookbook.catalog.models import MoodboardRecord, ProductRecord
from lookbook.catalog.sample_data import sample_moodboards, sample_products
from lookbook.infrastructure.database import Base, async_session_factory, engine


async def create_tables() -> None:
    """Create database tables if they don't exist."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def seed(clear: bool = True, with_moodboards: bool = True) -> dict:
    """Insert the sample catalog.

    Args:
        clear: Whether to delete existing products and moodboards first.
        with_moodboards: Whether to seed moodboards as well as products.

    Returns:
        Seeding result counts.
    """
    products = sample_products()
    moodboards = sample_moodboards() if with_moodboards else []

    async with async_session_factory() as session:
        deleted = 0
        if clear:
            # Moodboards reference products, so they go first
            result = await session.execute(delete(MoodboardRecord))
            deleted += result.rowcount or 0
            result = await session.execute(delete(ProductRecord))
            deleted += result.rowcount or 0

        session.add_all(ProductRecord.from_item(item) for item in products)
        await session.flush()
        session.add_all(MoodboardRecord.from_item(item) for item in moodboards)
        await session.commit()

    return {
        "deleted": deleted,
        "products_created": len(products),
        "moodboards_created": len(moodboards),
    }


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Seed the Lookbook catalog")
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Don't clear existing rows before seeding",
    )
    parser.add_argument(
        "--products-only",
        action="store_true",
        help="Seed products but not moodboards",
    )
    args = parser.parse_args()

    print("=" * 60)
    print("Lookbook Catalog Seeder")
    print("=" * 60)
    print(f"Clear existing: {not args.no_clear}")
    print()

    print("Creating database tables...")
    await create_tables()
    print("Tables ready.")
    print()

    try:
        result = await seed(clear=not args.no_clear, with_moodboards=not args.products_only)
    except Exception as e:
        print(f"  ✗ Error: {e}")
        raise SystemExit(1) from e
    finally:
        await engine.dispose()

    print(f"  ✓ Deleted: {result['deleted']} existing rows")
    print(f"  ✓ Products: {result['products_created']}")
    print(f"  ✓ Moodboards: {result['moodboards_created']}")
    print()
    print("Seeding complete!")


if __name__ == "__main__":
    asyncio.run(main())
