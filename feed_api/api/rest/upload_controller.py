# Standard library imports
from typing import Any, Dict, Optional

# External package imports
from fastapi import APIRouter, Depends, File, Form, Response, UploadFile, status

# Local application imports
from ...application.use_cases.upload.upload_image import UploadImageUseCase
from ...di.base_container import BaseContainer
from ...domain.models.auth import AuthResult
from .dependencies import get_auth_result, get_container, read_image_upload


router = APIRouter(tags=["uploads"])


@router.put("/post-image")
async def upload_post_image(
    response: Response,
    image: Optional[UploadFile] = File(None),
    old_path: Optional[str] = Form(None, alias="oldPath"),
    auth: AuthResult = Depends(get_auth_result),
    container: BaseContainer = Depends(get_container),
) -> Dict[str, Any]:
    """
    Store an image for a post that is about to be created or updated

    Args:
        image: Image file (png/jpg/jpeg); other types are ignored
        old_path: Previously stored image to delete

    Returns:
        201 with `filePath` when stored, 200 with a message otherwise
    """
    upload_use_case = container.get(UploadImageUseCase)
    result = await upload_use_case.execute(auth, await read_image_upload(image), old_path)

    if not result.stored:
        return {"message": result.message}

    response.status_code = status.HTTP_201_CREATED
    return result.to_wire()
