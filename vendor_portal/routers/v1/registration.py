"""Public vendor registration router: wizard step checks, drafts, submission."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from vendor_portal.core.context import Principal
from vendor_portal.core.response import DataResponse
from vendor_portal.db.base import get_db
from vendor_portal.routers.deps import get_optional_principal
from vendor_portal.schemas.vendor import (
    DraftOut,
    RegistrationFields,
    RegistrationOut,
    StepValidationOut,
    StepValidationRequest,
    VendorOut,
    VendorRegister,
)
from vendor_portal.services.registration import RegistrationService, validate_step

router = APIRouter(prefix="/registrations", tags=["Registration"])


@router.post("/validate-step", response_model=DataResponse[StepValidationOut])
async def validate_registration_step(body: StepValidationRequest):
    """Report the required fields of one wizard step that are still empty."""
    missing = validate_step(body.step, body.data.model_dump())
    return {"data": StepValidationOut(step=body.step, valid=not missing, missing_fields=missing)}


@router.post("", response_model=DataResponse[RegistrationOut], status_code=status.HTTP_201_CREATED)
async def register_vendor(
    body: VendorRegister,
    principal: Principal = Depends(get_optional_principal),
    session: AsyncSession = Depends(get_db),
):
    vendor = await RegistrationService(session).register_vendor(
        body.model_dump(exclude={"draft_id"}), draft_id=body.draft_id, actor=principal
    )
    return {"data": RegistrationOut(vendor=VendorOut.model_validate(vendor), email_sent_to=vendor.email)}


# ------------------------------------------------------------------
# Drafts
# ------------------------------------------------------------------

@router.post("/drafts", response_model=DataResponse[DraftOut], status_code=status.HTTP_201_CREATED)
async def create_draft(body: RegistrationFields, session: AsyncSession = Depends(get_db)):
    draft = await RegistrationService(session).save_draft(body.model_dump())
    return {"data": DraftOut.model_validate(draft)}


@router.put("/drafts/{draft_id}", response_model=DataResponse[DraftOut])
async def update_draft(
    draft_id: str, body: RegistrationFields, session: AsyncSession = Depends(get_db)
):
    draft = await RegistrationService(session).save_draft(body.model_dump(), draft_id=draft_id)
    return {"data": DraftOut.model_validate(draft)}


@router.get("/drafts/{draft_id}", response_model=DataResponse[DraftOut])
async def get_draft(draft_id: str, session: AsyncSession = Depends(get_db)):
    draft = await RegistrationService(session).get_draft(draft_id)
    return {"data": DraftOut.model_validate(draft)}


@router.delete("/drafts/{draft_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_draft(draft_id: str, session: AsyncSession = Depends(get_db)):
    await RegistrationService(session).delete_draft(draft_id)
