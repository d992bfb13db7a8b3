# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.models.auth import AuthResult, require_authenticated
from ....domain.ports.image_store import ImageStore
from ...dto.upload_dto import ImageUpload, ImageUploadResponse

logger = logging.getLogger(__name__)


class UploadImageUseCase:
    """Use case for storing a post image ahead of create/update"""

    def __init__(self, image_store: ImageStore) -> None:
        self.image_store = image_store

    async def execute(
        self,
        auth: AuthResult,
        upload: Optional[ImageUpload],
        old_path: Optional[str] = None,
    ) -> ImageUploadResponse:
        """
        Store an uploaded image and drop the one it replaces

        Args:
            auth: Authentication result of the request
            upload: The uploaded file, if any
            old_path: Path of a previously stored image to delete

        Returns:
            ImageUploadResponse; `file_path` is None when no acceptable file was stored

        Raises:
            AuthError: If the request is anonymous
        """
        require_authenticated(auth)

        file_path = None
        if upload is not None and upload.filename:
            file_path = await self.image_store.save(upload.filename, upload.content_type, upload.data)

        if old_path:
            # Deleted whether or not the new upload was stored
            self.image_store.delete(old_path)

        if file_path is None:
            return ImageUploadResponse(message="No file provided!")

        logger.info(f"Stored image {file_path}")
        return ImageUploadResponse(message="File stored.", file_path=file_path)
