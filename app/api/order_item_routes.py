from fastapi import APIRouter, Depends
from typing import List

from app.auth.dependencies import get_current_identity
from app.crud import order_item as order_item_crud
from app.crud.store import EntityStore, get_store
from app.schemas.order_item import (
    OrderItemPack,
    OrderItemPackRead,
    OrderItemRead,
    OrderItemUpdate,
    OrderSummary,
)

router = APIRouter(dependencies=[Depends(get_current_identity)])


@router.post("/", response_model=OrderItemPackRead, status_code=201)
async def create_order_items(pack: OrderItemPack, store: EntityStore = Depends(get_store)):
    """Create an order for a table together with all of its items"""
    return await order_item_crud.create_order_with_items(store, pack)


# Specific /order/... paths before /{order_item_id}
@router.get("/order/{order_id}", response_model=List[OrderItemRead])
async def get_order_items_by_order(order_id: str, store: EntityStore = Depends(get_store)):
    return await order_item_crud.get_items_by_order(store, order_id)


@router.get("/order/{order_id}/summary", response_model=OrderSummary)
async def get_order_summary(order_id: str, store: EntityStore = Depends(get_store)):
    """Items enriched with food and table details, with totals"""
    return await order_item_crud.get_order_summary(store, order_id)


@router.get("/{order_item_id}", response_model=OrderItemRead)
async def get_order_item(order_item_id: str, store: EntityStore = Depends(get_store)):
    return await order_item_crud.get_order_item(store, order_item_id)


@router.patch("/{order_item_id}", response_model=OrderItemRead)
async def update_order_item(
    order_item_id: str,
    updates: OrderItemUpdate,
    store: EntityStore = Depends(get_store),
):
    return await order_item_crud.update_order_item(store, order_item_id, updates)
