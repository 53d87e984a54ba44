import logging
import numpy as np

from ..models.image import Image, PIXEL_DTYPE

logger = logging.getLogger(__name__)

CHANNEL_MIN = 0
CHANNEL_MAX = 255
EMBOSS_BASE = 128


def clamp_to_byte(values: np.ndarray) -> np.ndarray:
    return np.clip(values, CHANNEL_MIN, CHANNEL_MAX)


class FilterService:
    """
    Spatial filters over an Image.
    Every filter mutates image.pixels in place and returns the same Image.
    """

    @staticmethod
    def grayscale(image: Image) -> Image:
        """All channels <- clamp(floor((r + g + b) / 3))."""
        logger.debug(f"grayscale on {image.width}x{image.height}")
        pixels = image.pixels
        gray = clamp_to_byte(pixels.sum(axis=2) // 3)
        pixels[...] = gray[..., np.newaxis]
        return image

    @staticmethod
    def invert(image: Image) -> Image:
        """Each channel <- 255 - channel."""
        logger.debug(f"invert on {image.width}x{image.height}")
        np.subtract(CHANNEL_MAX, image.pixels, out=image.pixels)
        return image

    @staticmethod
    def emboss(image: Image) -> Image:
        """
        Gray = clamp(128 + diff), where diff is the largest-magnitude signed
        channel difference between a pixel and its up-left neighbour
        (red, then green, then blue; a later channel wins only if strictly
        larger in magnitude). Pixels in row 0 or column 0 get diff = 0.

        Sweeps columns right to left so column x-1 still holds its original
        values while column x is written. Within one column no pixel reads
        another pixel of the same column, so the column is processed at once.
        """
        logger.debug(f"emboss on {image.width}x{image.height}")
        pixels = image.pixels
        width, height = image.width, image.height

        for x in range(width - 1, -1, -1):
            diff = np.zeros(height, dtype=PIXEL_DTYPE)
            if x > 0 and height > 1:
                # rows 1..H-1 of column x against rows 0..H-2 of column x-1
                deltas = pixels[1:, x] - pixels[:-1, x - 1]
                best = np.zeros(height - 1, dtype=PIXEL_DTYPE)
                for channel in range(3):
                    delta = deltas[:, channel]
                    best = np.where(np.abs(delta) > np.abs(best), delta, best)
                diff[1:] = best
            pixels[:, x] = clamp_to_byte(EMBOSS_BASE + diff)[:, np.newaxis]
        return image

    @staticmethod
    def motion_blur(image: Image, length: int) -> Image:
        """
        Average each pixel with up to length-1 pixels to its right in the
        same row (window clipped at the right edge), flooring the result.
        length < 1 leaves the image untouched.

        Sweeps columns left to right, in place: pixel x reads whatever is
        stored in columns x..maxX at the time it is processed.
        """
        if length < 1:
            logger.debug(f"motion_blur length={length}: nothing to do")
            return image

        logger.debug(f"motion_blur length={length} on {image.width}x{image.height}")
        pixels = image.pixels
        width = image.width

        for x in range(width):
            max_x = min(width - 1, x + length - 1)
            window = pixels[:, x:max_x + 1]
            pixels[:, x] = window.sum(axis=1) // (max_x - x + 1)
        return image
