from sqlalchemy import Column, String, Integer, DateTime
from datetime import datetime
from app.models.base import Base
import uuid


class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(String, unique=True, nullable=False, index=True, default=lambda: str(uuid.uuid4()))
    table_id = Column(String, nullable=False, index=True)
    order_date = Column(DateTime, default=datetime.utcnow)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
