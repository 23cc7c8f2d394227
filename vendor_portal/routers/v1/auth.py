"""Authentication router: admin and vendor signup / login."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from vendor_portal.core.context import Principal
from vendor_portal.core.response import DataResponse
from vendor_portal.core.security import ROLE_ADMIN, ROLE_VENDOR
from vendor_portal.db.base import get_db
from vendor_portal.routers.deps import get_principal
from vendor_portal.schemas.auth import (
    AdminOut,
    AdminSignup,
    LoginRequest,
    TokenOut,
    VendorAccountOut,
    VendorSignup,
)
from vendor_portal.services.auth import AuthService, admin_token

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/admin/signup", response_model=DataResponse[TokenOut], status_code=status.HTTP_201_CREATED)
async def admin_signup(body: AdminSignup, session: AsyncSession = Depends(get_db)):
    admin = await AuthService(session).admin_signup(body.name, body.email, body.password, body.role)
    return {
        "data": TokenOut(
            access_token=admin_token(admin), role=ROLE_ADMIN, admin=AdminOut.model_validate(admin)
        )
    }


@router.post("/admin/login", response_model=DataResponse[TokenOut])
async def admin_login(body: LoginRequest, session: AsyncSession = Depends(get_db)):
    admin, token = await AuthService(session).admin_login(body.email, body.password)
    return {"data": TokenOut(access_token=token, role=ROLE_ADMIN, admin=AdminOut.model_validate(admin))}


@router.post("/vendor/signup", response_model=DataResponse[TokenOut], status_code=status.HTTP_201_CREATED)
async def vendor_signup(body: VendorSignup, session: AsyncSession = Depends(get_db)):
    user, token = await AuthService(session).vendor_signup(body.vendor_id, body.email, body.password)
    return {
        "data": TokenOut(
            access_token=token, role=ROLE_VENDOR, account=VendorAccountOut.model_validate(user)
        )
    }


@router.post("/vendor/login", response_model=DataResponse[TokenOut])
async def vendor_login(body: LoginRequest, session: AsyncSession = Depends(get_db)):
    user, token = await AuthService(session).vendor_login(body.email, body.password)
    return {
        "data": TokenOut(
            access_token=token, role=ROLE_VENDOR, account=VendorAccountOut.model_validate(user)
        )
    }


@router.get("/me")
async def whoami(principal: Principal = Depends(get_principal)):
    return {
        "data": {
            "subject": principal.subject,
            "role": principal.role,
            "email": principal.email,
            "vendorId": principal.vendor_id,
            "adminId": principal.admin_id,
        }
    }
