"""Vendor document upload / download router."""

from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession

from vendor_portal.core.context import Principal
from vendor_portal.core.pagination import PaginationParams
from vendor_portal.core.response import DataResponse, ListResponse, paginated
from vendor_portal.db.base import get_db
from vendor_portal.routers.deps import require_vendor_access
from vendor_portal.schemas.document import DocumentOut, VerificationDocumentsOut
from vendor_portal.services.document import DocumentService

router = APIRouter(prefix="/vendors/{vendor_id}/documents", tags=["Documents"])


@router.post("", response_model=DataResponse[DocumentOut], status_code=status.HTTP_201_CREATED)
async def upload_document(
    vendor_id: str,
    file: UploadFile = File(...),
    document_type: str = Form(..., alias="documentType", min_length=1),
    document_name: Optional[str] = Form(default=None, alias="documentName"),
    expiry_date: Optional[date] = Form(default=None, alias="expiryDate"),
    principal: Principal = Depends(require_vendor_access),
    session: AsyncSession = Depends(get_db),
):
    """Upload a document (max 10 MB; PDF, Word, JPEG, PNG or text)."""
    content = await file.read()
    document = await DocumentService(session).upload(
        vendor_id,
        filename=file.filename or "upload",
        content=content,
        mime_type=file.content_type,
        document_type=document_type,
        document_name=document_name,
        expiry_date=expiry_date,
        actor=principal,
    )
    return {"data": DocumentOut.model_validate(document)}


@router.get("", response_model=ListResponse[DocumentOut])
async def list_documents(
    vendor_id: str,
    document_type: Optional[str] = Query(default=None, alias="documentType"),
    pagination: PaginationParams = Depends(),
    _: Principal = Depends(require_vendor_access),
    session: AsyncSession = Depends(get_db),
):
    items, total = await DocumentService(session).list_documents(
        vendor_id, offset=pagination.offset, limit=pagination.limit, document_type=document_type
    )
    return paginated(
        [DocumentOut.model_validate(d) for d in items],
        total, pagination.page, pagination.limit,
    )


@router.get("/verification", response_model=DataResponse[VerificationDocumentsOut])
async def get_verification_documents(
    vendor_id: str,
    _: Principal = Depends(require_vendor_access),
    session: AsyncSession = Depends(get_db),
):
    row = await DocumentService(session).verification_documents(vendor_id)
    return {"data": VerificationDocumentsOut.model_validate(row)}


@router.get("/{document_id}", response_model=DataResponse[DocumentOut])
async def get_document(
    vendor_id: str,
    document_id: str,
    _: Principal = Depends(require_vendor_access),
    session: AsyncSession = Depends(get_db),
):
    document = await DocumentService(session).get_document(vendor_id, document_id)
    return {"data": DocumentOut.model_validate(document)}


@router.get("/{document_id}/download", response_class=Response)
async def download_document(
    vendor_id: str,
    document_id: str,
    _: Principal = Depends(require_vendor_access),
    session: AsyncSession = Depends(get_db),
):
    document, content = await DocumentService(session).read_file(vendor_id, document_id)
    filename = (document.metadata_ or {}).get("original_name") or document.document_name
    return Response(
        content=content,
        media_type=document.mime_type or "application/octet-stream",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.delete("/{document_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_document(
    vendor_id: str,
    document_id: str,
    principal: Principal = Depends(require_vendor_access),
    session: AsyncSession = Depends(get_db),
):
    await DocumentService(session).delete_document(vendor_id, document_id, principal)
