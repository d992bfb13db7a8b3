from .upload_image import UploadImageUseCase

__all__ = ["UploadImageUseCase"]
