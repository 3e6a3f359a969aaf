# This project was developed with assistance from AI tools.
"""
Session-token auth for the catalog and chat routes.

The web front end signs a short-lived HS256 JWT with AUTH_SECRET; its ``sub``
claim is the identity chat history is keyed on. ``role`` is optional and
defaults to a plain user. AUTH_DISABLED=true skips all of this and acts as a
dev admin.
"""

import logging
from typing import Annotated

import jwt
from db.enums import UserRole
from fastapi import Depends, HTTPException, Request, status

from ..core.config import settings
from ..schemas.auth import TokenPayload, UserContext

logger = logging.getLogger(__name__)

_DEV_ADMIN = UserContext(
    user_id="dev-user",
    role=UserRole.ADMIN,
    email="dev@loan-advisor.local",
    name="Dev User",
)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _bearer_token(request: Request) -> str | None:
    scheme, _, token = request.headers.get("Authorization", "").partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    return token


def _resolve_role(claims: TokenPayload) -> UserRole:
    """Missing role means USER; an unrecognized one is refused outright."""
    if not claims.role:
        return UserRole.USER
    try:
        return UserRole(claims.role.lower())
    except ValueError as exc:
        logger.warning("Token for %s carries unknown role %r", claims.sub, claims.role)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="No recognized role assigned",
        ) from exc


async def get_current_user(request: Request) -> UserContext:
    """Resolve the caller from the Authorization header."""
    if settings.AUTH_DISABLED:
        return _DEV_ADMIN

    token = _bearer_token(request)
    if token is None:
        raise _unauthorized("Missing authentication token")

    try:
        claims = TokenPayload(
            **jwt.decode(
                token,
                settings.AUTH_SECRET,
                algorithms=[settings.AUTH_ALGORITHM],
                options={"require": ["sub"]},
            )
        )
    except jwt.ExpiredSignatureError as exc:
        raise _unauthorized("Token has expired") from exc
    except jwt.InvalidTokenError as exc:
        raise _unauthorized("Invalid token") from exc

    return UserContext(
        user_id=claims.sub,
        role=_resolve_role(claims),
        email=claims.email,
        name=claims.name,
    )


CurrentUser = Annotated[UserContext, Depends(get_current_user)]


def require_roles(*allowed: UserRole):
    """Build a dependency that admits only the given roles."""

    async def _check(user: CurrentUser) -> UserContext:
        if user.role not in allowed:
            logger.warning("Denied %s (role=%s)", user.user_id, user.role.value)
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions",
            )
        return user

    return _check
