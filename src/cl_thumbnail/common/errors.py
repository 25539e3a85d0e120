"""Exceptions raised by the thumbnail pipeline."""


class ThumbnailError(Exception):
    """Base class for thumbnail-related errors."""


class InvalidImageDataError(ThumbnailError):
    def __init__(self, message: str = "invalid image data"):
        self.message: str = message
        super().__init__(self.message)


class NoTransformSpecifiedError(ThumbnailError):
    def __init__(self, message: str = "no transform data was provided"):
        self.message: str = message
        super().__init__(self.message)


class InvalidMimeTypeError(ThumbnailError):
    """Reserved for content-type validation of source images."""

    def __init__(self, mime_type: str | None = None):
        self.mime_type: str | None = mime_type
        super().__init__(f"invalid mimetype: {mime_type}" if mime_type else "invalid mimetype")


class InvalidScalerError(ThumbnailError):
    """Reserved for unrecognized resampling filters."""

    def __init__(self, scaler: str | None = None):
        self.scaler: str | None = scaler
        super().__init__(f"invalid scaler: {scaler}" if scaler else "invalid scaler")


class ImageDecodeError(ThumbnailError):
    def __init__(self, message: str = "failed to decode image"):
        self.message: str = message
        super().__init__(self.message)


class OutputNameError(ThumbnailError):
    def __init__(self, message: str = "no output filename could be resolved"):
        self.message: str = message
        super().__init__(self.message)


class ProcessingError(ThumbnailError):
    """An unexpected fault inside the resize or encode step.

    The original exception is kept as ``__cause__``.
    """

    def __init__(self, operation: str, reason: object):
        self.operation: str = operation
        super().__init__(f"{operation} failed: {reason}")
