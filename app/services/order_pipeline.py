"""
Order-Item Join Pipeline

Rebuilds the billable view of an order from independently stored order
items, foods, orders and tables. Relationships exist only as matching id
values, so the join happens here at read time:

    filter -> enrich -> compute amount -> group -> summarize

Missing related documents degrade the enriched record (None fields, zero
amount) instead of failing the order.
"""
import logging
from typing import Any, Dict, Iterable, List, Mapping

from app.core.exceptions import NotFound
from app.crud.store import EntityStore
from app.utils.money import to_fixed

log = logging.getLogger(__name__)

Document = Dict[str, Any]


def index_by(documents: Iterable[Document], key: str) -> Dict[Any, Document]:
    """First document wins when ids repeat"""
    indexed = {}
    for document in documents:
        indexed.setdefault(document.get(key), document)
    return indexed


def enrich_item(
    item: Document,
    foods: Mapping[str, Document],
    orders: Mapping[str, Document],
    tables: Mapping[str, Document],
) -> Document:
    food = foods.get(item.get("food_id")) or {}
    order = orders.get(item.get("order_id")) or {}
    table_id = order.get("table_id")
    table = tables.get(table_id) or {}

    price = food.get("price")
    quantity = item.get("quantity") or 0

    # Full precision per line; only the group total is rounded
    amount = price * quantity if price is not None else 0

    return {
        "order_item_id": item.get("order_item_id"),
        "order_id": item.get("order_id"),
        "food_id": item.get("food_id"),
        "food_name": food.get("name"),
        "food_image": food.get("food_image"),
        "price": price,
        "unit_price": item.get("unit_price"),
        "quantity": quantity,
        "amount": amount,
        "table_id": table_id,
        "table_number": table.get("table_number"),
    }


def enrich_items(
    items: Iterable[Document],
    foods: Iterable[Document],
    orders: Iterable[Document],
    tables: Iterable[Document],
) -> List[Document]:
    foods_by_id = index_by(foods, "food_id")
    orders_by_id = index_by(orders, "order_id")
    tables_by_id = index_by(tables, "table_id")
    return [enrich_item(item, foods_by_id, orders_by_id, tables_by_id) for item in items]


def group_items(enriched: Iterable[Document]) -> List[Document]:
    """
    Group enriched items by (order_id, table_id, table_number).

    Returns one summary per group, in first-seen order:
        {order_id, table_id, table_number, payment_due, total_count, order_items}
    """
    groups: Dict[tuple, Document] = {}

    for item in enriched:
        key = (item["order_id"], item["table_id"], item["table_number"])
        group = groups.get(key)
        if group is None:
            group = {
                "order_id": item["order_id"],
                "table_id": item["table_id"],
                "table_number": item["table_number"],
                "payment_due": 0,
                "total_count": 0,
                "order_items": [],
            }
            groups[key] = group

        group["payment_due"] += item["amount"]
        group["total_count"] += item["quantity"]
        group["order_items"].append(item)

    for group in groups.values():
        group["payment_due"] = to_fixed(group["payment_due"], 2)

    return list(groups.values())


class OrderItemPipeline:
    """Fetches the documents an order touches and runs the join in memory"""

    def __init__(self, store: EntityStore):
        self.store = store

    async def items_by_order(self, order_id: str) -> List[Document]:
        items = await self.store.find_many("order_items", {"order_id": order_id})
        if not items:
            log.info("no order items for order=%s", order_id)
            return []

        food_ids = {item["food_id"] for item in items}
        foods = await self.store.find_many("foods", {"food_id": food_ids})
        orders = await self.store.find_many("orders", {"order_id": order_id})

        table_ids = {order["table_id"] for order in orders}
        tables = await self.store.find_many("tables", {"table_id": table_ids}) if table_ids else []

        if len(foods) < len(food_ids):
            log.warning(
                "order=%s references %d missing food(s); amounts degraded to 0",
                order_id, len(food_ids) - len(foods),
            )

        groups = group_items(enrich_items(items, foods, orders, tables))
        log.debug("order=%s joined %d items into %d group(s)", order_id, len(items), len(groups))
        return groups

    async def order_summary(self, order_id: str) -> Document:
        """
        The one group for `order_id`.

        Raises:
            NotFound: the order has no items
        """
        groups = await self.items_by_order(order_id)
        if not groups:
            raise NotFound("order details not found")

        # Items are selected by order id, so there is one group per order
        if len(groups) > 1:
            log.warning("order=%s produced %d groups; using the first", order_id, len(groups))
        return groups[0]
