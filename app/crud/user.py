import logging

from app.auth.passwords import hash_password, verify_password
from app.auth.tokens import generate_all_tokens, update_all_tokens
from app.core.exceptions import AuthenticationFailed, ConflictFailed
from app.crud.store import EntityStore
from app.schemas.user import UserCreate, UserLogin
from app.services.pagination import list_page

log = logging.getLogger(__name__)


async def signup(store: EntityStore, user: UserCreate):
    """Register a user; email and phone must both be unused"""
    email_count = await store.count("users", {"email": user.email})
    phone_count = await store.count("users", {"phone": user.phone})
    if email_count > 0 or phone_count > 0:
        raise ConflictFailed("email or phone already exists")

    created = await store.insert("users", {
        "first_name": user.first_name,
        "last_name": user.last_name,
        "email": user.email,
        "phone": user.phone,
        "password": hash_password(user.password),
        "avatar": user.avatar,
    })

    # Tokens embed the user id, which only exists after insert
    token, refresh_token = generate_all_tokens(
        created["email"], created["first_name"], created["last_name"], created["user_id"]
    )
    created = await update_all_tokens(store, token, refresh_token, created["user_id"])
    log.info("registered user=%s", created["user_id"])
    return created


async def login(store: EntityStore, credentials: UserLogin):
    matches = await store.find_many("users", {"email": credentials.email}, limit=1)
    if not matches:
        raise AuthenticationFailed("invalid credentials")

    user = matches[0]
    if not verify_password(credentials.password, user["password"]):
        raise AuthenticationFailed("invalid credentials")

    token, refresh_token = generate_all_tokens(
        user["email"], user["first_name"], user["last_name"], user["user_id"]
    )
    return await update_all_tokens(store, token, refresh_token, user["user_id"])


async def get_user(store: EntityStore, user_id: str):
    return await store.find_one("users", user_id)


async def list_users(store: EntityStore, page_size: int, page_number: int):
    return await list_page(store, "users", page_size, page_number)
