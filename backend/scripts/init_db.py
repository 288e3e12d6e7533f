"""
Create the menu table directly from the ORM metadata.

For local databases; deployed databases are migrated with `alembic upgrade head`.

Usage:
    python scripts/init_db.py
"""

import asyncio

from aloha.config import settings
from aloha.database import create_all, dispose_engine


async def init_db() -> None:
    try:
        await create_all()
    finally:
        await dispose_engine()
    print(f"Tables created on {settings.database_url.split('@')[-1]}")


if __name__ == "__main__":
    asyncio.run(init_db())
