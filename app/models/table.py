from sqlalchemy import Column, String, Integer, DateTime
from datetime import datetime
from app.models.base import Base
import uuid


class Table(Base):
    __tablename__ = "tables"

    id = Column(Integer, primary_key=True, autoincrement=True)
    table_id = Column(String, unique=True, nullable=False, index=True, default=lambda: str(uuid.uuid4()))
    number_of_guests = Column(Integer, nullable=False)
    table_number = Column(Integer, nullable=False)  # unique by convention only
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
