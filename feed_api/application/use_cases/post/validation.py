from typing import List, Optional

from ....core.errors import ValidationError

MIN_TEXT_LENGTH = 5

# Clients send the literal string "undefined" when the image was not changed
UNCHANGED_IMAGE = "undefined"


def _is_valid_text(value: Optional[str]) -> bool:
    return bool(value) and len(value.strip()) >= MIN_TEXT_LENGTH


def validate_post_input(title: Optional[str], content: Optional[str], image_url: Optional[str] = None,
                        require_image: bool = False) -> None:
    """Raise ValidationError listing every violated field rule"""
    errors: List[str] = []
    if not _is_valid_text(title):
        errors.append("Title is invalid.")
    if not _is_valid_text(content):
        errors.append("Content is invalid.")
    if require_image and (not image_url or not image_url.strip() or image_url == UNCHANGED_IMAGE):
        errors.append("Image is invalid.")
    if errors:
        raise ValidationError("Invalid input.", errors)


def is_image_supplied(image_url: Optional[str]) -> bool:
    return bool(image_url) and image_url != UNCHANGED_IMAGE
