"""Shared router dependencies: bearer-token principal and access checks."""

from __future__ import annotations

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from vendor_portal.core.context import ANONYMOUS, Principal
from vendor_portal.core.exceptions import ForbiddenError, UnauthorizedError
from vendor_portal.core.security import ROLE_ADMIN, ROLE_VENDOR, decode_token
from vendor_portal.db.base import get_db
from vendor_portal.services.auth import AuthService

_bearer = HTTPBearer(auto_error=False)


def _client_ip(request: Request) -> str | None:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else None


async def get_optional_principal(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
) -> Principal:
    """Caller identity from the bearer token; anonymous when no token is sent."""
    ip = _client_ip(request)
    agent = request.headers.get("user-agent")
    if credentials is None:
        return Principal(ANONYMOUS.subject, ANONYMOUS.role, ip_address=ip, user_agent=agent)

    claims = decode_token(credentials.credentials)
    if not claims or claims.get("role") not in (ROLE_ADMIN, ROLE_VENDOR) or not claims.get("sub"):
        raise UnauthorizedError("Invalid or expired token")
    return Principal(
        subject=claims["sub"],
        role=claims["role"],
        email=claims.get("email"),
        vendor_id=claims.get("vendor_id"),
        admin_id=claims.get("admin_id"),
        ip_address=ip,
        user_agent=agent,
    )


async def get_principal(
    principal: Principal = Depends(get_optional_principal),
    session: AsyncSession = Depends(get_db),
) -> Principal:
    if principal.role == ANONYMOUS.role:
        raise UnauthorizedError()
    await AuthService(session).require_active(principal)
    return principal


async def require_admin(principal: Principal = Depends(get_principal)) -> Principal:
    if not principal.is_admin:
        raise ForbiddenError("Admin access required")
    return principal


async def require_vendor_access(
    vendor_id: str, principal: Principal = Depends(get_principal)
) -> Principal:
    """Admins, or the vendor account that owns ``vendor_id``."""
    if not principal.can_access_vendor(vendor_id):
        raise ForbiddenError("You do not have access to this vendor")
    return principal
