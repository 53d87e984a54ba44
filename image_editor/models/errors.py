class ImageEditorError(Exception):
    """Base class for every error raised by image_editor."""


class InvalidDimension(ImageEditorError, ValueError):
    """A pixel buffer was requested with a negative width or height."""


class OutOfBounds(ImageEditorError, IndexError):
    """get/set addressed a cell outside the grid."""


class MalformedInput(ImageEditorError, ValueError):
    """The pixel-map text is truncated or holds a non-integer token."""


class UsageError(ImageEditorError):
    """The command line does not match any supported filter invocation."""
