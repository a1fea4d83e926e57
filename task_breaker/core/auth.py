"""
Session/identity lookup.

Authentication itself happens upstream: the proxy in front of the app
signs the user in and forwards the user id in a header
(``settings.AUTH_USER_HEADER``). These dependencies only read it.
"""

from typing import Optional

from fastapi import HTTPException, Request

from task_breaker.core.config import settings


def current_user_id(request: Request) -> Optional[str]:
    """Returns the signed-in user id, or None when there is no session."""
    raw = request.headers.get(settings.AUTH_USER_HEADER, "")
    user_id = raw.strip()
    return user_id or None


def require_user_id(request: Request) -> str:
    user_id = current_user_id(request)
    if not user_id:
        raise HTTPException(401, "Unauthorized")
    return user_id
