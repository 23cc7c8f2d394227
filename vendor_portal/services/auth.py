"""Admin and vendor account authentication, plus admin account management."""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from vendor_portal.core.context import Principal
from vendor_portal.core.exceptions import (
    BadRequestError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
)
from vendor_portal.core.security import (
    ROLE_ADMIN,
    ROLE_VENDOR,
    create_access_token,
    generate_portal_id,
    get_password_hash,
    verify_password,
)
from vendor_portal.domain.account import AdminUser, User
from vendor_portal.repositories.account import AdminUserRepository, UserRepository
from vendor_portal.repositories.vendor import VendorRepository
from vendor_portal.services.audit import AuditService
from vendor_portal.services.email import ACTION_SIGNIN, ACTION_SIGNUP, EmailService

logger = logging.getLogger(__name__)

ADMIN_ID_PREFIX = "ADM"
MAX_ID_ATTEMPTS = 10
INVALID_CREDENTIALS = "Invalid email or password"


def admin_token(admin: AdminUser) -> str:
    return create_access_token(
        admin.id, ROLE_ADMIN, email=admin.email, admin_id=admin.admin_id, admin_role=admin.role
    )


def vendor_token(user: User) -> str:
    return create_access_token(user.id, ROLE_VENDOR, email=user.email, vendor_id=user.vendor_id)


class AuthService:
    def __init__(self, session: AsyncSession):
        self._admins = AdminUserRepository(session)
        self._users = UserRepository(session)
        self._vendors = VendorRepository(session)
        self._audit = AuditService(session)
        self._email = EmailService()

    # ------------------------------------------------------------------
    # Admin accounts
    # ------------------------------------------------------------------

    async def _new_admin_id(self) -> str:
        for _ in range(MAX_ID_ATTEMPTS):
            candidate = generate_portal_id(ADMIN_ID_PREFIX)
            if not await self._admins.admin_id_taken(candidate):
                return candidate
        raise ConflictError("Could not allocate a unique admin id, please retry")

    async def admin_signup(self, name: str, email: str, password: str, role: str) -> AdminUser:
        if await self._admins.get_by_email(email):
            raise ConflictError("An admin with this email already exists")
        admin = await self._admins.create(
            admin_id=await self._new_admin_id(),
            name=name.strip(),
            email=email.strip().lower(),
            password_hash=get_password_hash(password),
            role=role,
        )
        logger.info("Admin account %s created (%s)", admin.admin_id, admin.role)
        self._email.send_confirmation(admin.email, admin.admin_id, "account", ACTION_SIGNUP)
        return admin

    async def admin_login(self, email: str, password: str) -> tuple[AdminUser, str]:
        admin = await self._admins.get_by_email(email)
        if not admin or not admin.is_active or not verify_password(password, admin.password_hash):
            logger.warning("Failed admin login for %s", email)
            raise UnauthorizedError(INVALID_CREDENTIALS)
        self._email.send_confirmation(admin.email, admin.admin_id, "account", ACTION_SIGNIN)
        return admin, admin_token(admin)

    async def get_admin(self, admin_pk: str) -> AdminUser:
        admin = await self._admins.get_by_id(admin_pk)
        if not admin:
            raise NotFoundError("Admin", admin_pk)
        return admin

    async def list_admins(
        self, *, offset: int, limit: int, search: str | None = None
    ) -> tuple[list[AdminUser], int]:
        return await self._admins.list(offset=offset, limit=limit, search=search)

    async def toggle_admin_active(self, admin_pk: str, actor: Principal) -> AdminUser:
        admin = await self.get_admin(admin_pk)
        if admin.id == actor.subject:
            raise BadRequestError("You cannot deactivate your own account")
        updated = await self._admins.update(admin_pk, is_active=not admin.is_active)
        await self._audit.record(
            "ADMIN_STATUS_CHANGED", "admin_user", admin_pk,
            actor=actor,
            old_values={"is_active": admin.is_active},
            new_values={"is_active": not admin.is_active},
        )
        return updated  # type: ignore[return-value]

    async def delete_admin(self, admin_pk: str, actor: Principal) -> None:
        admin = await self.get_admin(admin_pk)
        if admin.id == actor.subject:
            raise BadRequestError("You cannot delete your own account")
        await self._admins.delete(admin_pk)
        await self._audit.record(
            "ADMIN_DELETED", "admin_user", admin_pk,
            actor=actor,
            old_values={
                "admin_id": admin.admin_id,
                "name": admin.name,
                "email": admin.email,
                "role": admin.role,
            },
        )
        logger.info("Admin %s deleted by %s", admin.admin_id, actor.subject)

    # ------------------------------------------------------------------
    # Vendor accounts
    # ------------------------------------------------------------------

    async def vendor_signup(self, vendor_id: str, email: str, password: str) -> tuple[User, str]:
        vendor = await self._vendors.get_by_id(vendor_id.strip().upper())
        if not vendor or vendor.email.lower() != email.strip().lower():
            raise BadRequestError("Vendor ID and email do not match a registered vendor")
        if await self._users.get_by_email(email):
            raise ConflictError("An account with this email already exists")
        user = await self._users.create(
            email=vendor.email,
            password_hash=get_password_hash(password),
            vendor_id=vendor.vendor_id,
        )
        logger.info("Portal account created for vendor %s", vendor.vendor_id)
        self._email.send_confirmation(user.email, vendor.vendor_id, "account", ACTION_SIGNUP)
        return user, vendor_token(user)

    async def vendor_login(self, email: str, password: str) -> tuple[User, str]:
        user = await self._users.get_by_email(email)
        if not user or not user.is_active or not verify_password(password, user.password_hash):
            logger.warning("Failed vendor login for %s", email)
            raise UnauthorizedError(INVALID_CREDENTIALS)
        return user, vendor_token(user)

    async def require_active(self, principal: Principal) -> None:
        """Reject tokens whose account has since been deactivated or removed."""
        if principal.is_admin:
            admin = await self._admins.get_by_id(principal.subject)
            if not admin or not admin.is_active:
                raise ForbiddenError("Admin account is inactive")
        elif principal.is_vendor:
            user = await self._users.get_by_id(principal.subject)
            if not user or not user.is_active:
                raise ForbiddenError("Account is inactive")
