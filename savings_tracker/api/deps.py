# savings_tracker/api/deps.py
import logging
from typing import Optional
import uuid

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
import jwt

from savings_tracker.core.database import get_async_session
from savings_tracker.core.auth import User
from savings_tracker.core.config import settings
from savings_tracker.core.exceptions import Unauthorized

logger = logging.getLogger(__name__)

optional_security = HTTPBearer(auto_error=False)

def _extract_token(request: Request, credentials: Optional[HTTPAuthorizationCredentials]) -> Optional[str]:
    """Bearer header first, then the access_token cookie."""
    if credentials and credentials.credentials:
        return credentials.credentials

    token = request.cookies.get("access_token")
    # Remove "Bearer " prefix if present in cookie
    if token and token.startswith("Bearer "):
        token = token[7:]
    return token or None

async def get_current_user(
    request: Request,
    db: AsyncSession = Depends(get_async_session),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(optional_security)
) -> User:
    """
    Resolve the caller from its access token.

    The returned user is the explicit session context that routes pass on to
    the goal service; nothing downstream looks the session up on its own.
    """
    token = _extract_token(request, credentials)
    if not token:
        raise Unauthorized()

    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
            audience=settings.JWT_AUDIENCE,
        )
    except jwt.ExpiredSignatureError:
        raise Unauthorized("Token has expired")
    except jwt.InvalidTokenError:
        raise Unauthorized("Invalid token")

    user_id_str = payload.get("sub")
    if not user_id_str:
        raise Unauthorized("Invalid token: missing user ID")

    try:
        user_id = uuid.UUID(user_id_str)
    except ValueError:
        raise Unauthorized("Invalid user ID format in token")

    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalars().first()

    if not user:
        raise Unauthorized("User not found")

    if not user.is_active:
        raise Unauthorized("Inactive user")

    return user
