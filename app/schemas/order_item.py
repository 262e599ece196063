from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

MAX_QUANTITY = 10_000


# ---------- Order Item ----------
class OrderItemCreate(BaseModel):
    food_id: str
    quantity: int = Field(..., ge=1, le=MAX_QUANTITY)
    unit_price: Optional[float] = Field(None, gt=0)  # defaults to the food's price


class OrderItemUpdate(BaseModel):
    food_id: Optional[str] = None
    quantity: Optional[int] = Field(None, ge=1, le=MAX_QUANTITY)
    unit_price: Optional[float] = Field(None, gt=0)


class OrderItemRead(BaseModel):
    order_item_id: str
    order_id: str
    food_id: str
    quantity: int
    unit_price: float
    created_at: datetime
    updated_at: datetime


# ---------- Order + items in one request ----------
class OrderItemPack(BaseModel):
    table_id: str
    order_items: List[OrderItemCreate]


class OrderItemPackRead(BaseModel):
    order_id: str
    table_id: str
    order_items: List[OrderItemRead]


# ---------- Aggregated view ----------
class EnrichedOrderItem(BaseModel):
    order_item_id: Optional[str] = None
    order_id: Optional[str] = None
    food_id: Optional[str] = None
    food_name: Optional[str] = None
    food_image: Optional[str] = None
    price: Optional[float] = None
    unit_price: Optional[float] = None
    quantity: int
    amount: float
    table_id: Optional[str] = None
    table_number: Optional[int] = None


class OrderSummary(BaseModel):
    order_id: Optional[str] = None
    table_id: Optional[str] = None
    table_number: Optional[int] = None
    payment_due: float
    total_count: int
    order_items: List[EnrichedOrderItem]
