import logging
from datetime import datetime

from app.core.exceptions import ValidationFailed
from app.crud.store import EntityStore
from app.schemas.order_item import OrderItemPack, OrderItemUpdate
from app.services.order_pipeline import OrderItemPipeline
from app.utils.money import to_fixed

log = logging.getLogger(__name__)


async def _foods_by_id(store: EntityStore, food_ids):
    foods = await store.find_many("foods", {"food_id": set(food_ids)})
    found = {food["food_id"]: food for food in foods}
    missing = sorted(set(food_ids) - set(found))
    if missing:
        raise ValidationFailed(f"food not found: {', '.join(missing)}")
    return found


async def create_order_with_items(store: EntityStore, pack: OrderItemPack):
    """
    Create an order for a table together with its items.

    Each item's unit price is captured now (from the food unless given)
    so later price changes do not rewrite history. The order and its items
    are separate writes; there is no transaction spanning them.
    """
    if not pack.order_items:
        raise ValidationFailed("order_items cannot be empty")

    foods = await _foods_by_id(store, [item.food_id for item in pack.order_items])

    order = await store.insert("orders", {
        "table_id": pack.table_id,
        "order_date": datetime.utcnow(),
    })

    documents = []
    for item in pack.order_items:
        unit_price = item.unit_price if item.unit_price is not None else foods[item.food_id]["price"]
        documents.append({
            "order_id": order["order_id"],
            "food_id": item.food_id,
            "quantity": item.quantity,
            "unit_price": to_fixed(unit_price, 2),
        })

    items = await store.insert_many("order_items", documents)
    log.info("created order=%s table=%s with %d items", order["order_id"], pack.table_id, len(items))

    return {
        "order_id": order["order_id"],
        "table_id": order["table_id"],
        "order_items": items,
    }


async def get_order_item(store: EntityStore, order_item_id: str):
    return await store.find_one("order_items", order_item_id)


async def get_items_by_order(store: EntityStore, order_id: str):
    return await store.find_many("order_items", {"order_id": order_id})


async def update_order_item(store: EntityStore, order_item_id: str, updates: OrderItemUpdate):
    update_data = updates.model_dump(exclude_unset=True, exclude_none=True)
    if not update_data:
        raise ValidationFailed("no fields to update")

    if "food_id" in update_data:
        foods = await _foods_by_id(store, [update_data["food_id"]])
        # Switching food re-captures its current price unless one is given
        update_data.setdefault("unit_price", foods[update_data["food_id"]]["price"])

    if "unit_price" in update_data:
        update_data["unit_price"] = to_fixed(update_data["unit_price"], 2)

    return await store.update_fields("order_items", order_item_id, update_data)


async def get_order_summary(store: EntityStore, order_id: str):
    return await OrderItemPipeline(store).order_summary(order_id)
