"""SQLAlchemy ORM models for portal accounts (vendor users and admins)."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import Boolean, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from vendor_portal.db.base import Base
from vendor_portal.domain.mixins import TimestampMixin, UUIDPrimaryKeyMixin

ADMIN_ROLES = ("super_admin", "admin", "reviewer")


class User(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """A vendor's login to the self-service portal."""

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    vendor_id: Mapped[Optional[str]] = mapped_column(
        String(10), ForeignKey("vendors.vendor_id", ondelete="CASCADE"),
        nullable=True, index=True,
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)


class AdminUser(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "admin_users"

    # Human-facing identifier, e.g. ADMQWER123
    admin_id: Mapped[str] = mapped_column(String(10), nullable=False, unique=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(50), default="admin", nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
