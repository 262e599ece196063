"""
Entity Store Gateway

Narrow document-style access to the restaurant collections. Documents are
plain dicts of column values addressed by their opaque string id; the
internal integer row id never leaves this module.

Every call runs under a fixed timeout. Timeouts and driver errors are
surfaced as StoreUnavailable; nothing here retries.
"""
import asyncio
import logging
import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from fastapi import Depends
from sqlalchemy import func, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.core.config import settings
from app.core.exceptions import NotFound, StoreUnavailable, ValidationFailed
from app.db import get_db
from app.models import Food, Invoice, Menu, Order, OrderItem, Table, User

log = logging.getLogger(__name__)

# collection -> (model, opaque key column, noun used in errors)
COLLECTIONS = {
    "foods": (Food, "food_id", "food"),
    "menus": (Menu, "menu_id", "menu"),
    "tables": (Table, "table_id", "table"),
    "orders": (Order, "order_id", "order"),
    "order_items": (OrderItem, "order_item_id", "order item"),
    "invoices": (Invoice, "invoice_id", "invoice"),
    "users": (User, "user_id", "user"),
}

PROTECTED_FIELDS = {"id", "created_at"}

Document = Dict[str, Any]


def _resolve(collection: str):
    try:
        return COLLECTIONS[collection]
    except KeyError:
        raise KeyError(f"Unknown collection: {collection}")


def to_document(row) -> Document:
    return {
        column.key: getattr(row, column.key)
        for column in row.__table__.columns
        if column.key != "id"
    }


def _conditions(model, filters: Optional[Dict[str, Any]]):
    conditions = []
    for field, value in (filters or {}).items():
        column = getattr(model, field)
        if isinstance(value, (list, tuple, set, frozenset)):
            conditions.append(column.in_(list(value)))
        else:
            conditions.append(column == value)
    return conditions


class EntityStore:
    """Gateway over one AsyncSession"""

    def __init__(self, db: AsyncSession, timeout: Optional[float] = None):
        self.db = db
        self.timeout = settings.store_timeout_seconds if timeout is None else timeout

    async def _rollback(self):
        try:
            await self.db.rollback()
        except SQLAlchemyError as exc:
            log.warning("rollback after store failure also failed: %s", exc)

    async def _run(self, collection: str, op: str, coro):
        try:
            return await asyncio.wait_for(coro, timeout=self.timeout)
        except asyncio.TimeoutError:
            await self._rollback()
            log.error("store %s on %s timed out after %ss", op, collection, self.timeout)
            raise StoreUnavailable(f"{op} on {collection} timed out")
        except SQLAlchemyError as exc:
            await self._rollback()
            log.error("store %s on %s failed: %s", op, collection, exc)
            raise StoreUnavailable(f"{op} on {collection} failed")
        except (OverflowError, ValueError) as exc:
            # Driver rejects values it cannot bind, e.g. ints beyond 64 bits
            await self._rollback()
            log.warning("store %s on %s rejected a value: %s", op, collection, exc)
            raise ValidationFailed(f"value out of range for {collection}")

    def _select(self, model, filters=None):
        return (
            select(model)
            .where(*_conditions(model, filters))
            .order_by(model.id)
            .execution_options(populate_existing=True)
        )

    async def _fetch(self, stmt) -> List[Document]:
        result = await self.db.execute(stmt)
        return [to_document(row) for row in result.scalars().all()]

    async def find_one(self, collection: str, key: str) -> Document:
        model, key_field, noun = _resolve(collection)
        stmt = self._select(model, {key_field: key}).limit(1)
        rows = await self._run(collection, "find_one", self._fetch(stmt))
        if not rows:
            raise NotFound(f"{noun} not found")
        return rows[0]

    async def find_many(
        self,
        collection: str,
        filters: Optional[Dict[str, Any]] = None,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> List[Document]:
        model, _, _ = _resolve(collection)
        stmt = self._select(model, filters).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        return await self._run(collection, "find_many", self._fetch(stmt))

    async def _count(self, model, filters=None) -> int:
        stmt = select(func.count()).select_from(model).where(*_conditions(model, filters))
        result = await self.db.execute(stmt)
        return result.scalar_one()

    async def count(self, collection: str, filters: Optional[Dict[str, Any]] = None) -> int:
        model, _, _ = _resolve(collection)
        return await self._run(collection, "count", self._count(model, filters))

    async def find_page(self, collection: str, offset: int, limit: int) -> Tuple[int, List[Document]]:
        """
        Total count of the collection plus one slice, under a single timeout.

        A slice starting at or past the end is empty without querying rows,
        so offset and limit sent to the driver never exceed the row count.
        """
        model, _, _ = _resolve(collection)

        async def _page():
            total = await self._count(model)
            if offset >= total:
                return total, []
            size = min(limit, total - offset)
            rows = await self._fetch(self._select(model).offset(offset).limit(size))
            return total, rows

        return await self._run(collection, "find_page", _page())

    async def insert(self, collection: str, document: Document) -> Document:
        created = await self.insert_many(collection, [document])
        return created[0]

    async def insert_many(self, collection: str, documents: List[Document]) -> List[Document]:
        model, key_field, _ = _resolve(collection)
        now = datetime.utcnow()

        rows = []
        for document in documents:
            values = {k: v for k, v in document.items() if k not in PROTECTED_FIELDS}
            values[key_field] = str(uuid.uuid4())
            values["created_at"] = now
            values["updated_at"] = now
            rows.append(model(**values))

        async def _insert():
            self.db.add_all(rows)
            await self.db.flush()
            stored = [to_document(row) for row in rows]
            await self.db.commit()
            return stored

        return await self._run(collection, "insert", _insert())

    async def update_fields(self, collection: str, key: str, fields: Document) -> Document:
        """Merge `fields` into one document. Never upserts."""
        model, key_field, noun = _resolve(collection)

        values = {
            k: v for k, v in fields.items()
            if k not in PROTECTED_FIELDS and k != key_field
        }
        values["updated_at"] = datetime.utcnow()

        stmt = (
            update(model)
            .where(getattr(model, key_field) == key)
            .values(**values)
            .execution_options(synchronize_session=False)
        )

        async def _update():
            result = await self.db.execute(stmt)
            await self.db.commit()
            return result.rowcount

        matched = await self._run(collection, "update_fields", _update())
        if not matched:
            raise NotFound(f"{noun} not found")
        return await self.find_one(collection, key)


async def get_store(db: AsyncSession = Depends(get_db)) -> EntityStore:
    return EntityStore(db)
