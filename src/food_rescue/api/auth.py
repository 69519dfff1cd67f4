"""Request identity resolution."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from fastapi import Depends, Header, HTTPException, Request, status

from food_rescue.config import parse_roles

if TYPE_CHECKING:
    from food_rescue.config import Settings
    from food_rescue.containers import AppContainer

DEVELOPER_ROLE = "Developer"


@dataclass(frozen=True)
class CurrentUser:
    """Authenticated identity attached to a request."""

    user_id: str
    email: str | None
    roles: frozenset[str]


def _get_settings(request: Request) -> Settings:
    container: AppContainer = request.app.state.container
    return container.settings


async def current_user(
    request: Request,
    x_user_id: str | None = Header(default=None),
    x_user_roles: str | None = Header(default=None),
) -> CurrentUser:
    """Resolve the caller from proxy headers or the developer identity."""
    if x_user_id:
        return CurrentUser(
            user_id=x_user_id, email=None, roles=parse_roles(x_user_roles)
        )
    settings = _get_settings(request)
    if settings.dev_auth_enabled:
        return CurrentUser(
            user_id=settings.dev_user_name,
            email=settings.dev_user_email,
            roles=parse_roles(settings.dev_user_roles),
        )
    raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


def require_role(role: str) -> Callable[..., Awaitable[CurrentUser]]:
    """Build a dependency that rejects callers without ``role``."""

    async def dependency(user: CurrentUser = Depends(current_user)) -> CurrentUser:
        if role not in user.roles:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN)
        return user

    return dependency


require_developer = require_role(DEVELOPER_ROLE)
