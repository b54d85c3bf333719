"""Check for an image extension."""

from ._constants import IMAGE_EXTENSIONS
from .is_ext_in import is_ext_in


def is_image_ext(ext: str, ignore_case: bool = True) -> bool:
    """True for png, jpg, jpeg and gif."""
    return is_ext_in(ext, ignore_case, IMAGE_EXTENSIONS)
