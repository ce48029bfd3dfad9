"""
Error types raised by the share-code codec and the crosshair renderer.

Every error is attributable to the input of a single call. The codec and the
renderer raise them to the caller and never log them.
"""


class CrosshairError(Exception):
    """Base exception for crosshair decoding and rendering errors"""
    pass


class DecodeError(CrosshairError, ValueError):
    """Base exception for share code decoding errors"""
    pass


class MalformedCode(DecodeError):
    """The input does not have the textual shape of a share code"""
    pass


class ChecksumMismatch(DecodeError):
    """The decoded payload fails its integrity check"""
    pass


class UnsupportedVersion(DecodeError):
    """The payload carries a format version this package does not understand"""

    def __init__(self, version: int):
        super().__init__(f"Unsupported crosshair format version: {version}")
        self.version = version


class FieldOutOfRange(DecodeError):
    """A crosshair field lies outside its documented range"""

    def __init__(self, field: str, value=None):
        message = f"Field '{field}' is out of range"
        if value is not None:
            message += f": {value!r}"
        super().__init__(message)
        self.field = field
        self.value = value


class RenderError(CrosshairError):
    """Base exception for rendering errors"""
    pass


class InvalidCanvasSize(RenderError, ValueError):
    """The requested canvas size is not positive or exceeds the maximum"""

    def __init__(self, size, maximum: int):
        super().__init__(f"Canvas size must be an integer between 1 and {maximum}, got {size!r}")
        self.size = size
        self.maximum = maximum
