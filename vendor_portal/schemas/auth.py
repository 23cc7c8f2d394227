"""Authentication and admin-management schemas."""

from datetime import datetime
from typing import Literal

from pydantic import EmailStr, Field, model_validator

from vendor_portal.schemas.common import CamelModel

AdminRole = Literal["super_admin", "admin", "reviewer"]


class _PasswordConfirmation(CamelModel):
    password: str
    confirm_password: str

    @model_validator(mode="after")
    def _passwords_match(self):
        if self.password != self.confirm_password:
            raise ValueError("Passwords do not match")
        return self


class AdminSignup(_PasswordConfirmation):
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(min_length=6)
    role: AdminRole


class VendorSignup(_PasswordConfirmation):
    vendor_id: str = Field(min_length=10, max_length=10)
    email: EmailStr
    password: str = Field(min_length=8)


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(min_length=1)


class AdminOut(CamelModel):
    id: str
    admin_id: str
    name: str
    email: str
    role: str
    is_active: bool
    created_at: datetime


class VendorAccountOut(CamelModel):
    id: str
    email: str
    vendor_id: str | None = None
    created_at: datetime


class TokenOut(CamelModel):
    access_token: str
    token_type: str = "bearer"
    role: str
    admin: AdminOut | None = None
    account: VendorAccountOut | None = None
