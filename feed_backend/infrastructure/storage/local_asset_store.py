"""Post images stored as files on local disk"""

import asyncio
import logging
import uuid
from pathlib import Path
from typing import Optional, Union

from ...domain.services.asset_store import AssetStore

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg"}


class LocalAssetStore(AssetStore):
    """
    Writes uploaded images under a single directory.

    References have the form ``<upload_dir>/<uuid><ext>``. Deletion only ever
    touches files inside the upload directory, whatever reference it is given.
    """

    def __init__(self, upload_dir: Union[str, Path]) -> None:
        self.upload_dir = Path(upload_dir)

    async def store(self, data: bytes, filename: str) -> str:
        ext = Path(filename or "").suffix.lower()
        if ext not in ALLOWED_IMAGE_EXTENSIONS:
            raise ValueError("Invalid image file. Use: png, jpg, jpeg")

        reference = self.upload_dir / f"{uuid.uuid4().hex}{ext}"
        await asyncio.to_thread(self._write, reference, data)
        logger.info(f"Stored asset {reference} ({len(data)} bytes)")
        return reference.as_posix()

    async def delete(self, reference: str) -> None:
        path = self._resolve_inside_upload_dir(reference)
        if path is None:
            logger.warning(f"Refusing to delete asset outside upload dir: {reference!r}")
            return
        try:
            await asyncio.to_thread(path.unlink)
            logger.info(f"Deleted asset {reference}")
        except OSError as e:
            logger.warning(f"Failed to delete asset {reference}: {e}")

    def _write(self, path: Path, data: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)

    def _resolve_inside_upload_dir(self, reference: Optional[str]) -> Optional[Path]:
        if not reference:
            return None
        base = self.upload_dir.resolve()
        # Relative references resolve against the working dir, like upload_dir itself
        candidate = Path(reference).resolve()
        if candidate.parent != base:
            return None
        return candidate
