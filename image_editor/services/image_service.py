from pathlib import Path
from typing import Union
import logging

from ..models.image import Image
from ..repositories.image_repository import ImageRepository

logger = logging.getLogger(__name__)


class ImageService:
    """I/O helpers.  No filter logic."""
    def __init__(self):
        self.image_repository = ImageRepository()

    def load(self, path: Union[str, Path]) -> Image:
        """Load a single P3 image from disk into an Image object."""
        image = self.image_repository.load(path)
        logger.info(f"Loaded {image.path} ({image.width}x{image.height})")
        return image

    def save(self, image: Image, path: Union[str, Path, None] = None) -> None:
        """
        Business-level method to save the image, to *path* if given,
        otherwise back to image.path.
        """
        self.image_repository.save(image, path)
        logger.info(f"Saved {image.path} ({image.width}x{image.height})")
