from sqlalchemy import Column, String, Integer, Float, DateTime, Index
from datetime import datetime
from app.models.base import Base
import uuid


class OrderItem(Base):
    """A purchased line, tied to its order and food by id value only"""
    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_item_id = Column(String, unique=True, nullable=False, default=lambda: str(uuid.uuid4()))
    order_id = Column(String, nullable=False)
    food_id = Column(String, nullable=False)
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Float, nullable=False)  # captured when ordered
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        Index("idx_order_items_order", "order_id"),
        Index("idx_order_items_food", "food_id"),
    )
