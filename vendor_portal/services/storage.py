"""Local filesystem storage for uploaded vendor documents."""

from __future__ import annotations

import logging
import re
import uuid
from pathlib import Path

from vendor_portal.core.config import settings
from vendor_portal.core.exceptions import NotFoundError

logger = logging.getLogger(__name__)


def _sanitize(part: str) -> str:
    return re.sub(r"[^\w.\-]", "", part.replace(" ", "_"))


class LocalFileStorage:
    """Stores files as ``<root>/<vendor_id>/<uuid>.<ext>``.

    Paths handed back to callers are relative to the storage root and use
    forward slashes, so they can be persisted as-is.
    """

    def __init__(self, root: Path | None = None):
        self.root = Path(root or settings.upload_dir)

    def _resolve(self, relative_path: str) -> Path:
        path = (self.root / relative_path).resolve()
        if self.root.resolve() not in path.parents:
            raise NotFoundError("File", relative_path)
        return path

    def save(self, vendor_id: str, filename: str, content: bytes) -> str:
        ext = Path(filename).suffix.lower()
        dest_dir = self.root / _sanitize(vendor_id)
        dest_dir.mkdir(parents=True, exist_ok=True)
        dest = dest_dir / f"{uuid.uuid4()}{_sanitize(ext)}"
        dest.write_bytes(content)
        logger.debug("Stored %d bytes at %s", len(content), dest)
        return dest.relative_to(self.root).as_posix()

    def read(self, relative_path: str) -> bytes:
        path = self._resolve(relative_path)
        if not path.is_file():
            raise NotFoundError("File", relative_path)
        return path.read_bytes()

    def delete(self, relative_path: str) -> bool:
        path = self._resolve(relative_path)
        if not path.exists():
            return False
        path.unlink()
        return True

    def delete_many(self, relative_paths: list[str]) -> int:
        """Remove files after their rows are gone; failures are logged, not raised."""
        removed = 0
        for rel in relative_paths:
            try:
                removed += self.delete(rel)
            except (OSError, NotFoundError) as exc:
                logger.warning("Could not remove stored file %s: %s", rel, exc)
        return removed
