from pathlib import Path
from typing import TextIO, Union, List
import logging
import os
import re
import numpy as np
from dotenv import load_dotenv

from ..models.image import Image, PIXEL_DTYPE
from ..models.errors import InvalidDimension, MalformedInput

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

PPM_MAGIC = "P3"
LINE_END = "\r\n"
HEADER_TOKENS = 4  # magic, width, height, max value
INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")  # ASCII digits only


class ImageRepository:
    """
    Handles plain-text pixel-map (P3) parsing, serialization and file I/O
    for Image entities.
    """
    def __init__(self):
        self.ENCODING = os.getenv("PPM_ENCODING", "ascii")

    # ---------- private helpers ----------
    @staticmethod
    def _to_int(token: str, field: str) -> int:
        if not INTEGER_TOKEN.fullmatch(token):
            raise MalformedInput(f"Expected integer for {field}, got {token!r}")
        return int(token)

    # ---------- text codec ----------
    @classmethod
    def parse(cls, text: str) -> Image:
        """
        Build an Image from P3 text. Tokens are whitespace-separated
        regardless of line breaks; anything after the last triple is ignored.
        """
        tokens = text.split()
        if len(tokens) < HEADER_TOKENS:
            raise MalformedInput(f"Truncated header: {len(tokens)} of {HEADER_TOKENS} tokens")

        # tokens[0] is the magic number; only its presence matters
        width = cls._to_int(tokens[1], "width")
        height = cls._to_int(tokens[2], "height")
        max_value = cls._to_int(tokens[3], "max value")
        if width < 0 or height < 0:
            raise InvalidDimension(f"Invalid image dimensions: {width}x{height}")

        # Check the body before allocating anything sized by the header
        expected = width * height * 3
        available = len(tokens) - HEADER_TOKENS
        if available < expected:
            raise MalformedInput(
                f"Truncated pixel data: expected {expected} channel values, got {available}"
            )

        values = [cls._to_int(tok, "channel value")
                  for tok in tokens[HEADER_TOKENS:HEADER_TOKENS + expected]]
        pixels = np.array(values, dtype=PIXEL_DTYPE).reshape(height, width, 3)
        return Image(pixels=pixels, max_value=max_value)

    @staticmethod
    def serialize(image: Image) -> str:
        """
        One line per row, single spaces between pixels and channels,
        every line terminated by CRLF.
        """
        lines: List[str] = [
            PPM_MAGIC,
            f"{image.width} {image.height}",
            str(image.max_value),
        ]
        for row in image.pixels.tolist():
            lines.append(" ".join(f"{r} {g} {b}" for r, g, b in row))
        return LINE_END.join(lines) + LINE_END

    def read_stream(self, fp: TextIO) -> Image:
        return self.parse(fp.read())

    def write_stream(self, image: Image, fp: TextIO) -> None:
        fp.write(self.serialize(image))

    # ---------- file I/O ----------
    def load(self, path: Union[str, Path]) -> Image:
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Image not found or unreadable: {path}")

        with path.open("r", encoding=self.ENCODING, newline="") as fp:
            image = self.read_stream(fp)
        image.path = path
        logger.debug(f"Parsed {path}: {image.width}x{image.height}, max={image.max_value}")
        return image

    def save(self, image: Image, path: Union[str, Path, None] = None) -> None:
        path = Path(path) if path is not None else image.path
        if path is None:
            raise ValueError("No destination path given and image has no path")

        # newline="" keeps the CRLF terminators byte-exact on every platform
        with path.open("w", encoding=self.ENCODING, newline="") as fp:
            self.write_stream(image, fp)
        image.path = path
