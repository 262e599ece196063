# app/auth/tokens.py
import logging
from typing import Tuple

import jwt
from fastapi_users.jwt import decode_jwt, generate_jwt
from pydantic import BaseModel

from app.core.config import settings
from app.core.exceptions import AuthenticationFailed
from app.crud.store import EntityStore

log = logging.getLogger(__name__)

ACCESS = "access"
REFRESH = "refresh"


class Identity(BaseModel):
    """Who the caller is, as far as the rest of the service cares"""
    email: str
    first_name: str
    last_name: str
    user_id: str


def generate_all_tokens(email: str, first_name: str, last_name: str, user_id: str) -> Tuple[str, str]:
    claims = {
        "email": email,
        "first_name": first_name,
        "last_name": last_name,
        "uid": user_id,
        "token_type": ACCESS,
        "aud": settings.jwt_audience,
    }
    refresh_claims = {
        "uid": user_id,
        "token_type": REFRESH,
        "aud": settings.jwt_audience,
    }

    token = generate_jwt(
        claims,
        settings.secret_key,
        lifetime_seconds=settings.access_token_lifetime_seconds,
        algorithm=settings.jwt_algorithm,
    )
    refresh_token = generate_jwt(
        refresh_claims,
        settings.secret_key,
        lifetime_seconds=settings.refresh_token_lifetime_seconds,
        algorithm=settings.jwt_algorithm,
    )
    return token, refresh_token


def validate_token(signed_token: str) -> Identity:
    try:
        claims = decode_jwt(
            signed_token,
            settings.secret_key,
            audience=[settings.jwt_audience],
            algorithms=[settings.jwt_algorithm],
        )
    except jwt.ExpiredSignatureError:
        raise AuthenticationFailed("token has expired")
    except jwt.PyJWTError as exc:
        log.info("rejected token: %s", exc)
        raise AuthenticationFailed("invalid token")

    if claims.get("token_type") != ACCESS:
        raise AuthenticationFailed("invalid token")

    return Identity(
        email=claims["email"],
        first_name=claims["first_name"],
        last_name=claims["last_name"],
        user_id=claims["uid"],
    )


async def update_all_tokens(store: EntityStore, token: str, refresh_token: str, user_id: str) -> dict:
    return await store.update_fields(
        "users", user_id, {"token": token, "refresh_token": refresh_token}
    )
