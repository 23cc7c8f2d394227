"""Document metadata repositories."""

from vendor_portal.domain.document import Document, VerificationDocument
from vendor_portal.repositories.base import BaseRepository


class DocumentRepository(BaseRepository[Document]):
    model = Document
    search_columns = ("document_name", "document_type")
    default_order = "upload_date"


class VerificationDocumentRepository(BaseRepository[VerificationDocument]):
    model = VerificationDocument

    async def set_path(self, vendor_id: str, document_type: str, path: str) -> VerificationDocument:
        row = await self.get_by(vendor_id=vendor_id)
        if row is None:
            return await self.create(vendor_id=vendor_id, **{document_type: path})
        return await self.update(row.id, **{document_type: path})  # type: ignore[return-value]
