"""
Image helpers shared by the classifier and the edit orchestrator
"""
import base64
import logging
from io import BytesIO

from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "image/jpeg"


def detect_mime_type(image_bytes: bytes) -> str:
    """Sniff the mime type with Pillow, defaulting to JPEG"""
    try:
        img = Image.open(BytesIO(image_bytes))
        img_format = img.format.lower() if img.format else "jpeg"
        return f"image/{img_format}"
    except (UnidentifiedImageError, OSError, ValueError):
        return DEFAULT_MIME_TYPE


def convert_webp_to_png(image_bytes: bytes) -> bytes:
    img = Image.open(BytesIO(image_bytes))
    if img.mode in ('RGBA', 'LA', 'P'):
        img = img.convert('RGBA')
    else:
        img = img.convert('RGB')
    output = BytesIO()
    img.save(output, format='PNG', optimize=True)
    return output.getvalue()


def normalize_for_edit(image_bytes: bytes) -> bytes:
    """
    Convert WEBP input to PNG; the edit provider only takes PNG/JPEG.

    Raises:
        ValueError: If the bytes are not a readable image
    """
    try:
        img = Image.open(BytesIO(image_bytes))
        img_format = img.format
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError(f"Invalid image data: {e}") from e

    if img_format and img_format.upper() == 'WEBP':
        logger.info("Converting WEBP to PNG")
        return convert_webp_to_png(image_bytes)
    return image_bytes


def to_base64(data: bytes) -> str:
    return base64.b64encode(data).decode('utf-8')


def from_base64(data: str) -> bytes:
    # Accept data URLs as well as bare base64
    if data.startswith('data:'):
        data = data.split(',', 1)[1]
    return base64.b64decode(data)
