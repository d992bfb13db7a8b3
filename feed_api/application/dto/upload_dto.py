from typing import Optional

from .base import CamelModel


class ImageUpload(CamelModel):
    """An uploaded file as received by the boundary layer"""
    filename: str
    content_type: Optional[str] = None
    data: bytes = b""


class ImageUploadResponse(CamelModel):
    message: str
    file_path: Optional[str] = None

    @property
    def stored(self) -> bool:
        return self.file_path is not None
