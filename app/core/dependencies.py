"""
Core dependencies for route protection and ownership checks
"""

from fastapi import Depends, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from app.core.exceptions import ForbiddenError, UnauthorizedError
from app.core.security import decode_access_token
from app.database.json_store import RecordStore
from app.database.store_client import get_store
from app.modules.users.models import User
from typing import Optional
import jwt
import logging

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security),
    store: RecordStore = Depends(get_store)
) -> User:
    """Resolve the bearer token to a stored user"""
    if credentials is None:
        raise UnauthorizedError("Missing or invalid Authorization header")
    try:
        payload = decode_access_token(credentials.credentials)
    except jwt.InvalidTokenError as e:
        logger.debug(f"Rejected token: {e}")
        raise UnauthorizedError("Invalid or expired token")
    user = store.users.get(payload["sub"])
    if user is None:
        raise UnauthorizedError("Invalid or expired token")
    return user


def get_current_user_id(user: User = Depends(get_current_user)) -> str:
    return user.id


def check_owner(owner_id: str, user_id: str, detail: str) -> None:
    """Raise Forbidden unless user_id owns the resource"""
    if owner_id != user_id:
        raise ForbiddenError(detail)
