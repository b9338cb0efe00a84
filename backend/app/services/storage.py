"""
Local filesystem storage for uploaded profile images.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path, PurePath
from typing import Optional

from app.config import get_settings

logger = logging.getLogger(__name__)


@dataclass
class ImageUpload:
    """An uploaded file as received from the client."""
    filename: str
    content: bytes


class LocalImageStorage:
    """Writes image bytes under a configurable upload directory."""

    def __init__(self, upload_dir: str):
        self.upload_dir = Path(upload_dir)

    def build_path(self, user_id: str, filename: str, now: Optional[datetime] = None) -> Path:
        """Path for an upload: {user_id}_{epoch millis}_{original file name}."""
        now = now or datetime.now(timezone.utc)
        timestamp = int(now.timestamp() * 1000)
        # Keep only the final component of whatever the client sent
        safe_name = PurePath(filename.replace("\\", "/")).name or "upload"
        return self.upload_dir / f"{user_id}_{timestamp}_{safe_name}"

    def save(self, user_id: str, upload: ImageUpload, now: Optional[datetime] = None) -> str:
        """
        Store the uploaded bytes and return the recorded path.

        No deduplication, content-type check or size limit is applied.
        """
        path = self.build_path(user_id, upload.filename, now)
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        path.write_bytes(upload.content)
        logger.info("Stored profile image for user %s at %s (%d bytes)", user_id, path, len(upload.content))
        return str(path)


def get_image_storage() -> LocalImageStorage:
    """Dependency to get the image storage for the configured directory."""
    return LocalImageStorage(get_settings().upload_dir)
