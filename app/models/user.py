from sqlalchemy import Column, String, Integer, DateTime, Text
from datetime import datetime
from app.models.base import Base
import uuid


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String, unique=True, nullable=False, index=True, default=lambda: str(uuid.uuid4()))
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, nullable=False, index=True)
    phone = Column(String, nullable=False, index=True)
    password = Column(String, nullable=False)  # hash only
    avatar = Column(String, nullable=True)

    # Rewritten on every login
    token = Column(Text, nullable=True)
    refresh_token = Column(Text, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
