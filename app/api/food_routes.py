from typing import Tuple

from fastapi import APIRouter, Depends

from app.auth.dependencies import get_current_identity
from app.crud import food as food_crud
from app.crud.store import EntityStore, get_store
from app.schemas.food import FoodCreate, FoodRead, FoodUpdate
from app.schemas.pagination import Page
from app.services.pagination import page_query

router = APIRouter(dependencies=[Depends(get_current_identity)])


@router.get("/", response_model=Page[FoodRead])
async def list_foods(
    paging: Tuple[int, int] = Depends(page_query),
    store: EntityStore = Depends(get_store),
):
    """One page of foods plus the total count"""
    page_size, page_number = paging
    return await food_crud.list_foods(store, page_size, page_number)


@router.get("/{food_id}", response_model=FoodRead)
async def get_food(food_id: str, store: EntityStore = Depends(get_store)):
    return await food_crud.get_food(store, food_id)


@router.post("/", response_model=FoodRead, status_code=201)
async def create_food(food: FoodCreate, store: EntityStore = Depends(get_store)):
    return await food_crud.create_food(store, food)


@router.patch("/{food_id}", response_model=FoodRead)
async def update_food(food_id: str, updates: FoodUpdate, store: EntityStore = Depends(get_store)):
    return await food_crud.update_food(store, food_id, updates)
