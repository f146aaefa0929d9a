"""Script to initialize the database without migrations."""

import asyncio

from clinic_app.database import create_schema, engine


async def init_db() -> None:
    """Create all tables on the configured database."""
    await create_schema()
    await engine.dispose()
    print(f"✓ Database initialized successfully! ({engine.url.get_backend_name()})")


if __name__ == "__main__":
    asyncio.run(init_db())
