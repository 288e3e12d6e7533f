"""
Delete every menu item with the given name.

Usage:
    python scripts/remove_menu_item.py "Garlic Shrimp"
"""

import asyncio
import logging
import sys

from aloha.database import dispose_engine, session_scope
from aloha.services.sql_store import SqlMenuStore

logger = logging.getLogger("aloha.scripts.remove_menu_item")


async def remove_items(name: str) -> int:
    try:
        async with session_scope() as session:
            removed = await SqlMenuStore(session).delete_by_name(name)
    finally:
        await dispose_engine()
    return removed


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if not argv or not argv[0].strip():
        print("Error: Provide a menu item name to delete.", file=sys.stderr)
        print('Example: python scripts/remove_menu_item.py "Garlic Shrimp"', file=sys.stderr)
        return 1

    name = argv[0]
    try:
        removed = asyncio.run(remove_items(name))
    except Exception as e:
        logger.error("Failed to remove item: %s", str(e))
        return 1

    print(f'Removed {removed} item(s) named "{name}".')
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    sys.exit(main())
