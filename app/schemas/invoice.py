from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime
from enum import Enum

from app.schemas.order_item import EnrichedOrderItem


class PaymentMethod(str, Enum):
    card = "CARD"
    cash = "CASH"


class PaymentStatus(str, Enum):
    pending = "PENDING"
    paid = "PAID"


class InvoiceCreate(BaseModel):
    order_id: str
    payment_method: Optional[PaymentMethod] = None
    payment_status: Optional[PaymentStatus] = None


class InvoiceUpdate(BaseModel):
    payment_method: Optional[PaymentMethod] = None
    payment_status: Optional[PaymentStatus] = None


class InvoiceRead(BaseModel):
    invoice_id: str
    order_id: str
    payment_method: Optional[str] = None
    payment_status: str
    payment_due_date: datetime
    created_at: datetime
    updated_at: datetime


class InvoiceTotals(BaseModel):
    """Computed totals for one order"""
    order_id: str
    payment_due: float
    item_count: int
    table_number: Optional[int] = None
    items: List[EnrichedOrderItem]


class InvoiceView(BaseModel):
    invoice_id: str
    payment_method: str
    order_id: str
    payment_status: str
    payment_due_date: datetime
    payment_due: float
    table_number: Optional[int] = None
    order_details: List[EnrichedOrderItem]
