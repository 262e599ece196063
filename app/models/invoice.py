from sqlalchemy import Column, String, Integer, DateTime
from datetime import datetime
from app.models.base import Base
import uuid


class Invoice(Base):
    __tablename__ = "invoices"

    id = Column(Integer, primary_key=True, autoincrement=True)
    invoice_id = Column(String, unique=True, nullable=False, index=True, default=lambda: str(uuid.uuid4()))
    order_id = Column(String, nullable=False, index=True)
    payment_method = Column(String, nullable=True)  # CARD, CASH; unset until paid
    payment_status = Column(String, default="PENDING", nullable=False)  # PENDING, PAID
    payment_due_date = Column(DateTime, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
