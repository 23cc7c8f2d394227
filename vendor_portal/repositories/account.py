"""Account repositories (vendor portal users and admins)."""

from __future__ import annotations

from sqlalchemy import func, select

from vendor_portal.domain.account import AdminUser, User
from vendor_portal.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    model = User

    async def get_by_email(self, email: str) -> User | None:
        result = await self._session.execute(
            select(User).where(func.lower(User.email) == email.strip().lower())
        )
        return result.scalars().first()


class AdminUserRepository(BaseRepository[AdminUser]):
    model = AdminUser
    search_columns = ("name", "email", "role", "admin_id")

    async def get_by_email(self, email: str) -> AdminUser | None:
        result = await self._session.execute(
            select(AdminUser).where(func.lower(AdminUser.email) == email.strip().lower())
        )
        return result.scalars().first()

    async def admin_id_taken(self, admin_id: str) -> bool:
        return await self.get_by(admin_id=admin_id) is not None
