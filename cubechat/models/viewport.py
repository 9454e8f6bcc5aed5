"""Viewport model mirroring the host display surface."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Viewport:
    """Pixel dimensions and device pixel ratio of the drawable region."""

    width: int = 1
    height: int = 1
    pixel_ratio: float = 1.0

    @property
    def aspect(self) -> float:
        """Width over height, as used by the camera projection."""
        return self.width / self.height

    @property
    def is_drawable(self) -> bool:
        """Check if both dimensions are positive."""
        return self.width > 0 and self.height > 0
