import logging
from typing import Optional, Tuple

from folio.errors import NotFoundError

logger = logging.getLogger(__name__)


def get_post_image(
    slug: str, filename: str, *, repo
) -> Tuple[Optional[bytes], Optional[str]]:
    """
    Read an image stored next to a post's index.md
    """
    content_type = get_content_type_from_filename(filename)
    if content_type is None:
        logger.warning(f"Refusing to serve non-image asset: {slug}/{filename}")
        return None, None

    try:
        path = repo.get_asset_path(slug, filename)
        image_data = path.read_bytes()
    except NotFoundError:
        logger.warning(f"Image not found: {slug}/{filename}")
        return None, None
    except OSError as e:
        logger.error(f"Error reading image {slug}/{filename}: {e}")
        return None, None

    if not image_data:
        logger.warning(f"No image data found for: {slug}/{filename}")
        return None, None

    return image_data, content_type


def get_content_type_from_filename(filename: str) -> Optional[str]:
    """
    Determine content type from file extension
    """
    filename = filename.lower()
    if filename.endswith((".jpg", ".jpeg")):
        return "image/jpeg"
    elif filename.endswith(".png"):
        return "image/png"
    elif filename.endswith(".gif"):
        return "image/gif"
    elif filename.endswith(".svg"):
        return "image/svg+xml"
    elif filename.endswith(".webp"):
        return "image/webp"
    elif filename.endswith(".avif"):
        return "image/avif"
    else:
        return None
