"""
Shared fixtures: an in-memory SQLite store and an HTTP client wired to it.
"""
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.auth.dependencies import get_current_identity
from app.auth.tokens import Identity
from app.crud.store import EntityStore
from app.db import get_db
from app.main import app
from app.models import Base

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

TEST_IDENTITY = Identity(
    email="chef@example.com",
    first_name="Test",
    last_name="Chef",
    user_id="test-user-id",
)


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def store(db_session):
    return EntityStore(db_session)


def _override_db(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session
    return override_get_db


@pytest_asyncio.fixture
async def client(session_factory):
    """Authenticated client: identity check is stubbed out"""
    app.dependency_overrides[get_db] = _override_db(session_factory)
    app.dependency_overrides[get_current_identity] = lambda: TEST_IDENTITY
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def anon_client(session_factory):
    """Client that goes through the real bearer-token check"""
    app.dependency_overrides[get_db] = _override_db(session_factory)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


async def seed_order(store: EntityStore, lines, table_number=3):
    """
    Insert a menu, a table, one food per line and an order holding the lines.

    `lines` is a list of (price, quantity). Returns (order, foods, table).
    """
    menu = await store.insert("menus", {"name": "Mains", "category": "all-day"})
    table = await store.insert("tables", {"table_number": table_number, "number_of_guests": 4})

    foods = []
    for index, (price, _) in enumerate(lines):
        foods.append(await store.insert("foods", {
            "name": f"Dish {index}",
            "price": price,
            "food_image": f"dish-{index}.jpg",
            "menu_id": menu["menu_id"],
        }))

    order = await store.insert("orders", {"table_id": table["table_id"]})
    await store.insert_many("order_items", [
        {
            "order_id": order["order_id"],
            "food_id": food["food_id"],
            "quantity": quantity,
            "unit_price": price,
        }
        for food, (price, quantity) in zip(foods, lines)
    ])
    return order, foods, table
