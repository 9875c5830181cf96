import base64
import binascii
import logging
import re
from typing import List, Optional

from app.core.config import settings
from app.core.exceptions import (
    InvalidProspectDataError,
    ProspectNotFoundError,
)
from app.models.photo import ProspectPhoto
from app.repositories.photo_repository import PhotoRepository
from app.repositories.prospect_repository import ProspectRepository
from app.schemas.photo import PhotoUpload
from app.services.photo_storage import PhotoStorage

logger = logging.getLogger(__name__)

_DATA_URL_PREFIX = re.compile(r"^data:[\w.+/-]+;base64,")


def decode_photo_data(photo_data: str, max_bytes: int) -> bytes:
    """Decode a base64 payload, tolerating a ``data:`` URL prefix."""
    raw = _DATA_URL_PREFIX.sub("", photo_data.strip(), count=1)
    try:
        data = base64.b64decode(raw, validate=True)
    except (binascii.Error, ValueError):
        raise InvalidProspectDataError("photo_data is not valid base64") from None
    if not data:
        raise InvalidProspectDataError("photo_data is empty")
    if len(data) > max_bytes:
        raise InvalidProspectDataError(
            f"Photo exceeds maximum size of {max_bytes} bytes"
        )
    return data


class PhotoService:
    """Photo upload, listing and deletion for a prospect."""

    def __init__(
        self, storage: Optional[PhotoStorage] = None, max_bytes: Optional[int] = None
    ) -> None:
        self._storage = storage or PhotoStorage()
        self._max_bytes = max_bytes or settings.MAX_UPLOAD_BYTES

    async def upload_photo(
        self,
        prospect_id: int,
        upload: PhotoUpload,
        prospect_repo: ProspectRepository,
        photo_repo: PhotoRepository,
    ) -> ProspectPhoto:
        """Store the bytes and record the photo's metadata.

        Raises:
            ProspectNotFoundError: If the prospect does not exist.
            InvalidProspectDataError: If the payload is empty, not
                base64, or too large.
        """
        if await prospect_repo.get_by_id(prospect_id) is None:
            raise ProspectNotFoundError(f"Prospect {prospect_id} not found")

        data = decode_photo_data(upload.photo_data, self._max_bytes)
        stored = await self._storage.save(
            prospect_id, data, upload.original_name, upload.mime_type
        )
        try:
            photo = await photo_repo.create(
                prospect_id=prospect_id,
                filename=stored.filename,
                original_name=upload.original_name,
                mime_type=upload.mime_type,
                file_size=stored.file_size,
                file_path=stored.file_path,
            )
            await photo_repo.commit()
        except Exception:
            await photo_repo.rollback()
            await self._storage.remove(stored.filename)
            raise
        return photo

    async def list_photos(
        self,
        prospect_id: int,
        prospect_repo: ProspectRepository,
        photo_repo: PhotoRepository,
    ) -> List[ProspectPhoto]:
        if await prospect_repo.get_by_id(prospect_id) is None:
            raise ProspectNotFoundError(f"Prospect {prospect_id} not found")
        return await photo_repo.list_for_prospect(prospect_id)

    async def delete_photo(self, photo_id: int, photo_repo: PhotoRepository) -> bool:
        """Delete the photo row and its file; ``False`` if no such photo."""
        photo = await photo_repo.get_by_id(photo_id)
        if photo is None:
            logger.warning("Delete requested for missing photo %d", photo_id)
            return False

        filename = photo.filename
        await photo_repo.delete(photo_id)
        await photo_repo.commit()
        await self._storage.remove(filename)
        logger.info("Deleted photo %d", photo_id)
        return True

