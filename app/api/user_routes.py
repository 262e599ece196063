from typing import Tuple

from fastapi import APIRouter, Depends

from app.auth.dependencies import get_current_identity
from app.crud import user as user_crud
from app.crud.store import EntityStore, get_store
from app.schemas.pagination import Page
from app.schemas.user import UserCreate, UserLogin, UserRead, UserWithTokens
from app.services.pagination import page_query

router = APIRouter()


@router.post("/signup", response_model=UserWithTokens, status_code=201)
async def signup(user: UserCreate, store: EntityStore = Depends(get_store)):
    return await user_crud.signup(store, user)


@router.post("/login", response_model=UserWithTokens)
async def login(credentials: UserLogin, store: EntityStore = Depends(get_store)):
    return await user_crud.login(store, credentials)


@router.get("/", response_model=Page[UserRead], dependencies=[Depends(get_current_identity)])
async def list_users(
    paging: Tuple[int, int] = Depends(page_query),
    store: EntityStore = Depends(get_store),
):
    page_size, page_number = paging
    return await user_crud.list_users(store, page_size, page_number)


@router.get("/{user_id}", response_model=UserRead, dependencies=[Depends(get_current_identity)])
async def get_user(user_id: str, store: EntityStore = Depends(get_store)):
    return await user_crud.get_user(store, user_id)
