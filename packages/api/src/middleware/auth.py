# This project was developed with assistance from AI tools.
"""
Caller identity dependency.

The caller's user identifier travels out-of-band in a request header
(``x-user-id`` by default, see USER_ID_HEADER). Authenticated routes depend
on ``get_current_user``; a missing or blank header fails the request with
401 before any business logic runs.

Set AUTH_DISABLED=true to treat every request as a fixed dev user.
"""

import logging
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from ..core.config import settings
from ..schemas.auth import UserContext

logger = logging.getLogger(__name__)

_DISABLED_USER = UserContext(user_id="dev-user")


def _extract_user_id(request: Request) -> str | None:
    """Read the caller's user id from the configured header."""
    value = request.headers.get(settings.USER_ID_HEADER)
    if value is None:
        return None
    value = value.strip()
    return value or None


async def get_current_user(request: Request) -> UserContext:
    """FastAPI dependency: return the caller's UserContext or raise 401.

    When AUTH_DISABLED=true, returns the dev user without inspecting headers.
    """
    if settings.AUTH_DISABLED:
        return _DISABLED_USER

    user_id = _extract_user_id(request)
    if not user_id:
        logger.info("Rejected %s %s: missing user id", request.method, request.url.path)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User ID required",
        )
    return UserContext(user_id=user_id)


# Type alias for use in route signatures
CurrentUser = Annotated[UserContext, Depends(get_current_user)]
