# scripts/init_db.py
import asyncio
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from app.db import engine
# Importing the package registers every model with Base
from app.models import Base


async def create_tables():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    print("✅ All missing tables created.")

if __name__ == "__main__":
    asyncio.run(create_tables())
