# auth/dependencies.py
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.auth.tokens import Identity, validate_token
from app.core.exceptions import AuthenticationFailed

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Identity:
    if credentials is None or not credentials.credentials:
        raise AuthenticationFailed("Not authenticated")
    return validate_token(credentials.credentials)
