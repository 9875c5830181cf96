import asyncio
import logging
import mimetypes
import secrets
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from app.core.config import settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoredFile:
    filename: str
    file_path: str
    file_size: int


class PhotoStorage:
    """Writes uploaded photo bytes below a local upload directory.

    Callers persist the generated filename and the public
    ``<UPLOAD_URL_PREFIX>/<filename>`` path; the directory on disk never
    leaves this class. No durability guarantees: files live wherever
    ``UPLOAD_DIR`` points.
    """

    def __init__(
        self, upload_dir: Optional[str] = None, url_prefix: Optional[str] = None
    ) -> None:
        self._root = Path(upload_dir or settings.UPLOAD_DIR)
        self._url_prefix = (url_prefix or settings.UPLOAD_URL_PREFIX).rstrip("/")

    def path_for(self, filename: str) -> Path:
        """Location on disk of a stored file."""
        return self._root / Path(filename).name

    def public_path(self, filename: str) -> str:
        return f"{self._url_prefix}/{filename}"

    @staticmethod
    def build_filename(prospect_id: int, original_name: str, mime_type: str) -> str:
        suffix = Path(original_name).suffix.lower()
        if not suffix:
            suffix = mimetypes.guess_extension(mime_type) or ".bin"
        stamp = int(time.time() * 1000)
        return f"prospect_{prospect_id}_{stamp}_{secrets.token_hex(4)}{suffix}"

    async def save(
        self, prospect_id: int, data: bytes, original_name: str, mime_type: str
    ) -> StoredFile:
        filename = self.build_filename(prospect_id, original_name, mime_type)
        path = self.path_for(filename)
        await asyncio.to_thread(self._write, path, data)
        logger.info("Stored %d byte photo at %s", len(data), path)
        return StoredFile(
            filename=filename,
            file_path=self.public_path(filename),
            file_size=len(data),
        )

    async def remove(self, filename: str) -> bool:
        """Delete a stored file; ``False`` if it was already gone."""
        path = self.path_for(filename)
        removed = await asyncio.to_thread(self._unlink, path)
        if not removed:
            logger.warning("Photo file already missing: %s", path)
        return removed

    @staticmethod
    def _write(path: Path, data: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)

    @staticmethod
    def _unlink(path: Path) -> bool:
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        return True
