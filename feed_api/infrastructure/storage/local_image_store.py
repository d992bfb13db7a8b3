"""
Local disk image storage.

Images live in `<base_dir>/<upload_dir>/` and are referenced by the relative
path `<upload_dir>/<stored name>`, which is also the public URL path served
by the static mount.
"""

import asyncio
import logging
import re
import uuid
from pathlib import Path
from typing import Optional

from ...domain.ports.image_store import ImageStore
from ...utils.task_tracker import TaskTracker

logger = logging.getLogger(__name__)

ALLOWED_CONTENT_TYPES = {"image/png", "image/jpg", "image/jpeg"}

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def _safe_name(filename: str) -> str:
    name = _UNSAFE_CHARS.sub("_", Path(filename).name).strip("._")
    return name or "image"


class LocalImageStore(ImageStore):
    """Stores uploaded images on the local filesystem"""

    def __init__(self, base_dir: Path, upload_dir: str = "images") -> None:
        self.base_dir = Path(base_dir).resolve()
        self.upload_dir = upload_dir.strip("/") or "images"
        self.tasks = TaskTracker("image-store")

    @property
    def image_dir(self) -> Path:
        return self.base_dir / self.upload_dir

    def ensure_directory(self) -> Path:
        self.image_dir.mkdir(parents=True, exist_ok=True)
        return self.image_dir

    async def save(self, filename: str, content_type: Optional[str], data: bytes) -> Optional[str]:
        """
        Write the image and return its relative path.

        Files whose content type is not in ALLOWED_CONTENT_TYPES are dropped
        without error; the caller sees None.
        """
        if (content_type or "").lower() not in ALLOWED_CONTENT_TYPES:
            logger.info(f"Ignoring upload '{filename}' with content type {content_type}")
            return None

        stored_name = f"{uuid.uuid4().hex}-{_safe_name(filename)}"
        target = self.ensure_directory() / stored_name
        await asyncio.to_thread(target.write_bytes, data)
        return f"{self.upload_dir}/{stored_name}"

    def delete(self, path: str) -> None:
        """Schedule removal of a stored image; failures are only logged"""
        self.tasks.spawn(self._remove(path), f"delete {path}")

    async def _remove(self, path: str) -> None:
        target = self.resolve(path)
        if target is None:
            logger.warning(f"Refusing to delete '{path}': outside of {self.image_dir}")
            return
        try:
            await asyncio.to_thread(target.unlink)
            logger.info(f"Deleted image {path}")
        except FileNotFoundError:
            logger.warning(f"Image {path} was already gone")
        except OSError as e:
            logger.error(f"Failed to delete image {path}: {e}")

    def resolve(self, path: str) -> Optional[Path]:
        """Map a stored relative path to a file inside the image directory"""
        if not path:
            return None
        candidate = (self.base_dir / path.lstrip("/")).resolve()
        image_dir = self.image_dir.resolve()
        if candidate == image_dir or image_dir not in candidate.parents:
            return None
        return candidate

    async def drain(self) -> None:
        await self.tasks.drain()
