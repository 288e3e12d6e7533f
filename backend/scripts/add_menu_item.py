"""
Create a menu item from the command line.

Usage:
    python scripts/add_menu_item.py ["Spam Musubi"] [5.99]
"""

import argparse
import asyncio
import logging

from aloha.database import dispose_engine, session_scope
from aloha.services.menu_service import menu_service
from aloha.services.sql_store import SqlMenuStore


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create a menu item.")
    parser.add_argument("name", nargs="?", default="Spam Musubi")
    parser.add_argument("price", nargs="?", type=float, default=5.99)
    parser.add_argument("--category", default="Specials")
    parser.add_argument("--description", default="Sample menu item created via script")
    return parser.parse_args(argv)


async def add_item(args: argparse.Namespace) -> None:
    try:
        async with session_scope() as session:
            item = await menu_service.create_item(
                SqlMenuStore(session),
                {
                    "name": args.name,
                    "description": args.description,
                    "price": args.price,
                    "image": None,
                    "category": args.category,
                },
            )
        print("Menu item created:", item.model_dump_json(by_alias=True))
    finally:
        await dispose_engine()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    asyncio.run(add_item(parse_args()))
