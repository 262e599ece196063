from sqlalchemy import Column, String, Integer, Float, DateTime
from datetime import datetime
from app.models.base import Base
import uuid


class Food(Base):
    __tablename__ = "foods"

    id = Column(Integer, primary_key=True, autoincrement=True)
    food_id = Column(String, unique=True, nullable=False, index=True, default=lambda: str(uuid.uuid4()))
    name = Column(String, nullable=False)
    price = Column(Float, nullable=False)  # always stored at 2dp
    food_image = Column(String, nullable=False)

    # Reference by value only, no FK: deleting a menu leaves its foods alone
    menu_id = Column(String, nullable=False, index=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
