"""Configuration for the clipping entry points."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import ConfigurationError


@dataclass(frozen=True)
class ClipConfig:
    """Settings controlling precondition checks.

    Attributes:
        validate: Check counts, rectangle order and buffer capacity before
            clipping. Disabling it leaves only the bounds checking Python
            performs on buffer writes.
        coordinate_bits: When set, every source coordinate and rectangle
            bound must fit a signed integer of this width (16 reproduces the
            classic fixed-point range). ``None`` accepts any int.
        warn_non_convex: Issue a ``ClipWarning`` when the shapely adapter is
            given a polygon that is not convex.
        canonical_crossings: Interpolate every crossing from the edge
            endpoint lower on the clipped axis instead of the endpoint beyond
            the bound. Windows sharing a bound then produce identical
            crossings, at the cost of differing from the classic output.
    """

    validate: bool = True
    coordinate_bits: Optional[int] = None
    warn_non_convex: bool = True
    canonical_crossings: bool = False

    def validated(self) -> "ClipConfig":
        if self.coordinate_bits is not None and self.coordinate_bits < 2:
            raise ConfigurationError(
                f"coordinate_bits must be at least 2, got {self.coordinate_bits}"
            )
        return self

    @property
    def coordinate_range(self) -> Optional[Tuple[int, int]]:
        """Inclusive ``(min, max)`` of the configured signed range."""
        if self.coordinate_bits is None:
            return None
        half = 1 << (self.coordinate_bits - 1)
        return -half, half - 1


DEFAULT_CONFIG = ClipConfig()


__all__ = [
    "ClipConfig",
    "DEFAULT_CONFIG",
]
