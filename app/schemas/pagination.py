from pydantic import BaseModel
from typing import Generic, List, TypeVar

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    total_count: int
    items: List[T]
