"""Exception and warning types raised by rectclip."""


class RectClipError(Exception):
    """Base class for all rectclip errors."""
    pass


class ValidationError(RectClipError, ValueError):
    """Raised when an argument violates a clipping precondition."""
    pass


class BufferCapacityError(ValidationError):
    """Raised when a scratch or output buffer is too small for a pass."""

    def __init__(self, message: str, capacity: int, required: int):
        super().__init__(message)
        self.capacity = capacity
        self.required = required


class ConfigurationError(RectClipError, ValueError):
    """Raised when a ClipConfig holds an unusable setting."""
    pass


class ClipWarning(UserWarning):
    """Issued for input whose clipped result is undefined but still computed."""
    pass


__all__ = [
    'RectClipError',
    'ValidationError',
    'BufferCapacityError',
    'ConfigurationError',
    'ClipWarning',
]
