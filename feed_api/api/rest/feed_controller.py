# Standard library imports
import logging
from typing import Any, Dict, Optional

# External package imports
from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status

# Local application imports
from ...application.dto.post_dto import PostInput
from ...application.use_cases.post.list_posts import ListPostsUseCase
from ...application.use_cases.post.get_post import GetPostUseCase
from ...application.use_cases.post.create_post import CreatePostUseCase
from ...application.use_cases.post.update_post import UpdatePostUseCase
from ...application.use_cases.post.delete_post import DeletePostUseCase
from ...core.errors import ValidationError
from ...di.base_container import BaseContainer
from ...domain.models.auth import AuthResult, require_authenticated
from ...domain.ports.image_store import ImageStore
from .dependencies import get_auth_result, get_container, read_image_upload

logger = logging.getLogger(__name__)

router = APIRouter(tags=["feed"])


async def _store_upload(container: BaseContainer, image: Optional[UploadFile]) -> Optional[str]:
    upload = await read_image_upload(image)
    if upload is None:
        return None
    image_store: ImageStore = container.get(ImageStore)
    return await image_store.save(upload.filename, upload.content_type, upload.data)


@router.get("/posts")
async def list_posts(
    page: Optional[int] = Query(None, description="1-based page number"),
    auth: AuthResult = Depends(get_auth_result),
    container: BaseContainer = Depends(get_container),
) -> Dict[str, Any]:
    """
    List posts newest first, two per page

    Args:
        page: Page number (missing or < 1 means the first page)

    Returns:
        Message, the page's posts and the total post count
    """
    list_use_case = container.get(ListPostsUseCase)
    result = await list_use_case.execute(auth, page)
    return {"message": "Fetched posts successfully.", **result.to_wire()}


@router.post("/post", status_code=status.HTTP_201_CREATED)
async def create_post(
    title: str = Form(""),
    content: str = Form(""),
    image: Optional[UploadFile] = File(None),
    auth: AuthResult = Depends(get_auth_result),
    container: BaseContainer = Depends(get_container),
) -> Dict[str, Any]:
    """
    Create a post from a multipart form

    Args:
        title: Post title
        content: Post body
        image: Image file (png/jpg/jpeg)

    Returns:
        Message, the created post and its creator

    Raises:
        AuthError: If the request is anonymous
        ValidationError: If no acceptable image was sent or the fields are invalid
    """
    require_authenticated(auth)

    image_url = await _store_upload(container, image)
    if image_url is None:
        raise ValidationError("No image provided.")

    create_use_case = container.get(CreatePostUseCase)
    try:
        post = await create_use_case.execute(
            auth, PostInput(title=title, content=content, image_url=image_url)
        )
    except Exception:
        # The stored file has no post pointing at it
        container.get(ImageStore).delete(image_url)
        raise

    wire = post.to_wire()
    return {"message": "Post created successfully!", "post": wire, "creator": wire["creator"]}


@router.get("/post/{post_id}")
async def get_post(
    post_id: str,
    auth: AuthResult = Depends(get_auth_result),
    container: BaseContainer = Depends(get_container),
) -> Dict[str, Any]:
    """Fetch a single post with its creator"""
    get_use_case = container.get(GetPostUseCase)
    post = await get_use_case.execute(auth, post_id)
    return {"message": "Post fetched.", "post": post.to_wire()}


@router.put("/post/{post_id}")
async def update_post(
    post_id: str,
    title: str = Form(""),
    content: str = Form(""),
    image: Optional[UploadFile] = File(None),
    image_url: Optional[str] = Form(None, alias="imageUrl"),
    auth: AuthResult = Depends(get_auth_result),
    container: BaseContainer = Depends(get_container),
) -> Dict[str, Any]:
    """
    Update a post from a multipart form

    A new image file wins over `imageUrl`; when neither is sent the stored
    image is kept.

    Args:
        post_id: Post identifier
        title: New title
        content: New body
        image: Replacement image file
        image_url: Existing image path to keep or switch to

    Returns:
        Message and the updated post
    """
    require_authenticated(auth)

    stored_path = await _store_upload(container, image)
    update_use_case = container.get(UpdatePostUseCase)
    try:
        post = await update_use_case.execute(
            auth, post_id, PostInput(title=title, content=content, image_url=stored_path or image_url)
        )
    except Exception:
        if stored_path:
            container.get(ImageStore).delete(stored_path)
        raise

    return {"message": "Post updated!", "post": post.to_wire()}


@router.delete("/post/{post_id}")
async def delete_post(
    post_id: str,
    auth: AuthResult = Depends(get_auth_result),
    container: BaseContainer = Depends(get_container),
) -> Dict[str, Any]:
    """Delete a post owned by the current user"""
    delete_use_case = container.get(DeletePostUseCase)
    await delete_use_case.execute(auth, post_id)
    return {"message": "Deleted post."}
