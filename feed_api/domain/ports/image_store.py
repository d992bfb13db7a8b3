from abc import ABC, abstractmethod
from typing import Optional


class ImageStore(ABC):
    """File persistence for uploaded images, keyed by generated path"""

    @abstractmethod
    async def save(self, filename: str, content_type: Optional[str], data: bytes) -> Optional[str]:
        """
        Store an image and return its path, or None when the content type
        is not accepted (nothing is stored in that case).
        """
        pass

    @abstractmethod
    def delete(self, path: str) -> None:
        """Schedule deletion of a stored image. Failures are logged, never raised."""
        pass
