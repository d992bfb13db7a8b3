from typing import TYPE_CHECKING
from ...domain.ports.image_store import ImageStore
from ...application.use_cases.upload.upload_image import UploadImageUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UploadProvider:
    """Image upload use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            UploadImageUseCase,
            lambda: UploadImageUseCase(
                image_store=container.get(ImageStore)
            )
        )
