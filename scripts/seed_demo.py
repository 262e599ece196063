"""
Seed Demo Data: Menus, Tables and Foods

Menus and tables have no HTTP endpoints; this script is how a fresh
database gets the rows that foods and orders point at.
It is SAFE to run multiple times (skips when menus already exist).

Usage:
    python scripts/seed_demo.py [--tables 8]
"""

import argparse
import asyncio
import os
import sys

if sys.platform.startswith("win"):
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from app.crud.store import EntityStore
from app.db import async_session, create_db_and_tables
from app.utils.money import to_fixed

# (menu name, category, [(food name, price, image)])
MENUS = [
    ("Breakfast", "morning", [
        ("Masala Omelette", 7.5, "omelette.jpg"),
        ("Pancake Stack", 8.25, "pancakes.jpg"),
    ]),
    ("Mains", "all-day", [
        ("Chicken Biryani", 14.995, "biryani.jpg"),
        ("Paneer Tikka", 12.0, "paneer.jpg"),
        ("Veg Thali", 11.49, "thali.jpg"),
    ]),
    ("Drinks", "all-day", [
        ("Masala Chai", 2.5, "chai.jpg"),
        ("Mango Lassi", 4.25, "lassi.jpg"),
    ]),
]


async def seed(table_count: int):
    await create_db_and_tables()

    async with async_session() as session:
        store = EntityStore(session)

        if await store.count("menus") > 0:
            print("⚠️  Menus already exist. Skipping.")
            return

        for name, category, foods in MENUS:
            menu = await store.insert("menus", {"name": name, "category": category})
            print(f"✅ Menu: {name} ({menu['menu_id']})")
            for food_name, price, image in foods:
                await store.insert("foods", {
                    "name": food_name,
                    "price": to_fixed(price, 2),
                    "food_image": image,
                    "menu_id": menu["menu_id"],
                })
                print(f"   🍽  {food_name} @ {to_fixed(price, 2)}")

        for number in range(1, table_count + 1):
            table = await store.insert("tables", {
                "table_number": number,
                "number_of_guests": 4,
            })
            print(f"🪑 Table {number} ({table['table_id']})")

    print("✅ Done seeding.\n")


async def main():
    parser = argparse.ArgumentParser(description="Seed menus, foods and tables")
    parser.add_argument("--tables", type=int, default=8)
    args = parser.parse_args()
    await seed(args.tables)


if __name__ == "__main__":
    asyncio.run(main())
