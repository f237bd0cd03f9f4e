"""
Image attachment validation utilities
"""
import io
import logging
from typing import Tuple, Optional
from PIL import Image
from hotel_console.config import settings

logger = logging.getLogger(__name__)

VALID_FORMATS = {'JPEG', 'PNG', 'WEBP'}


def validate_image(
    file_content: bytes,
    filename: str,
    content_type: Optional[str] = None
) -> Tuple[bool, Optional[str]]:
    """
    Validate an image file selected for a hotel

    Args:
        file_content: Image file content as bytes
        filename: Original filename
        content_type: MIME type (optional)

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not file_content:
        return False, f"{filename} is empty"

    # Check file size
    max_size_bytes = settings.MAX_IMAGE_SIZE_MB * 1024 * 1024
    if len(file_content) > max_size_bytes:
        return False, f"{filename} exceeds maximum allowed size of {settings.MAX_IMAGE_SIZE_MB}MB"

    # Check file type
    try:
        image = Image.open(io.BytesIO(file_content))
        image_format = image.format
    except Exception as e:
        logger.warning(f"Unreadable image {filename}: {e}")
        return False, f"{filename} is not a valid image file"

    if image_format not in VALID_FORMATS:
        return False, f"{filename} has an invalid image format. Allowed formats: JPEG, PNG, WEBP"

    # Validate content type if provided
    if content_type and content_type not in settings.ALLOWED_IMAGE_TYPES:
        return False, f"{filename} has an invalid content type. Allowed types: {', '.join(settings.ALLOWED_IMAGE_TYPES)}"

    return True, None


def get_image_info(file_content: bytes) -> dict:
    """
    Get image information (dimensions, format, size)

    Args:
        file_content: Image file content as bytes

    Returns:
        Dictionary with image info
    """
    try:
        image = Image.open(io.BytesIO(file_content))
        return {
            "width": image.size[0],
            "height": image.size[1],
            "format": image.format,
            "size_bytes": len(file_content)
        }
    except Exception as e:
        logger.error(f"Error getting image info: {e}")
        return {}
