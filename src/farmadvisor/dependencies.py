"""Shared FastAPI dependencies."""

from fastapi import Header

from farmadvisor.logging_config import set_context

DEFAULT_USER_ID = "default-user"


async def get_current_user_id(x_user_id: str | None = Header(default=None)) -> str:
    """
    Id of the calling user.

    Authentication happens upstream; the gateway forwards the resolved id in
    the ``X-User-Id`` header.
    """
    user_id = x_user_id or DEFAULT_USER_ID
    set_context(user_id=user_id)
    return user_id
