from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class FoodBase(BaseModel):
    name: str = Field(..., min_length=2, max_length=100)
    price: float = Field(..., gt=0)
    food_image: str
    menu_id: str


class FoodCreate(FoodBase):
    pass


class FoodUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=2, max_length=100)
    price: Optional[float] = Field(None, gt=0)
    food_image: Optional[str] = None
    menu_id: Optional[str] = None


class FoodRead(FoodBase):
    food_id: str
    created_at: datetime
    updated_at: datetime
