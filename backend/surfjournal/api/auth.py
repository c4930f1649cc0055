"""Bearer-credential resolution and role checks for mutating endpoints."""

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from surfjournal.api.errors import UnauthorizedError
from surfjournal.config import SessionUser, Settings, get_settings

bearer_scheme = HTTPBearer(auto_error=False)


async def get_session_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> SessionUser | None:
    """Resolve the presented bearer token, if any, to a session user."""
    if credentials is None:
        return None
    return settings.session_users.get(credentials.credentials)


async def require_session(user: SessionUser | None = Depends(get_session_user)) -> SessionUser:
    if user is None:
        raise UnauthorizedError("You must be signed in to change articles")
    return user


async def require_admin(user: SessionUser | None = Depends(get_session_user)) -> SessionUser:
    if user is None or not user.is_admin:
        raise UnauthorizedError("You must be an administrator to delete articles")
    return user
