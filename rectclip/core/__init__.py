"""Core types and utilities for rectclip.

This module provides type definitions, configuration, exceptions, and the
validation and geometry helpers used throughout the library.
"""

from .types import (
    Vertex,
    ClipAxis,
    ClipRectangle,
)

from .config import (
    ClipConfig,
    DEFAULT_CONFIG,
)

from .errors import (
    RectClipError,
    ValidationError,
    BufferCapacityError,
    ConfigurationError,
    ClipWarning,
)

__all__ = [
    # Value types
    'Vertex',
    'ClipAxis',
    'ClipRectangle',

    # Configuration
    'ClipConfig',
    'DEFAULT_CONFIG',

    # Exceptions
    'RectClipError',
    'ValidationError',
    'BufferCapacityError',
    'ConfigurationError',
    'ClipWarning',
]
