"""Rotation, mirroring and scaling stages."""

import cv2
import numpy as np

from ..core.settings import Settings
from ..core.utils import frame_size


CLOCKWISE = 1
COUNTERCLOCKWISE = -1

_ROTATE_CODES = {
    CLOCKWISE: cv2.ROTATE_90_CLOCKWISE,
    COUNTERCLOCKWISE: cv2.ROTATE_90_COUNTERCLOCKWISE,
}

# cv2.flip codes: 1 flips around the vertical axis, 0 around the horizontal.
HORIZONTAL = 1
VERTICAL = 0


def rotate_quarter(frame: np.ndarray, direction: int = CLOCKWISE) -> np.ndarray:
    """Rotate a frame by 90 degrees.

    Args:
        frame: Input frame.
        direction: CLOCKWISE or COUNTERCLOCKWISE.

    Returns:
        Rotated frame with width and height swapped.
    """
    return cv2.rotate(frame, _ROTATE_CODES[direction])


def mirror(frame: np.ndarray, axis: int = HORIZONTAL) -> np.ndarray:
    """Flip a frame; HORIZONTAL mirrors left/right, VERTICAL top/bottom."""
    return cv2.flip(frame, axis)


def downscale(frame: np.ndarray, divisor: int) -> np.ndarray:
    """Shrink a frame by an integer factor in both axes.

    Args:
        frame: Input frame.
        divisor: Scale divisor (>= 1).

    Returns:
        Resized frame, never smaller than 1x1.
    """
    if divisor <= 1:
        return frame
    width, height = frame_size(frame)
    new_size = (max(1, round(width / divisor)), max(1, round(height / divisor)))
    return cv2.resize(frame, new_size, interpolation=cv2.INTER_AREA)


class RotateStage:
    """Quarter turns in one direction.

    The pipeline holds one instance per direction; only the one matching
    the sign of ``settings.rotate`` has a non-zero count. Four turns are the
    identity, so the count is reduced modulo 4.
    """

    def __init__(self, direction: int = CLOCKWISE):
        self.direction = direction
        self.name = "rotate_cw" if direction == CLOCKWISE else "rotate_ccw"

    def count(self, settings: Settings) -> int:
        turns = settings.rotate * self.direction
        if turns <= 0:
            return 0
        return turns % 4

    def apply(self, frame: np.ndarray, settings: Settings) -> np.ndarray:
        return rotate_quarter(frame, self.direction)


class MirrorStage:
    """Mirror around one axis; pairs of flips cancel out."""

    def __init__(self, axis: int = HORIZONTAL):
        self.axis = axis
        self.name = "mirror_horizontal" if axis == HORIZONTAL else "mirror_vertical"

    def count(self, settings: Settings) -> int:
        return getattr(settings, self.name) % 2

    def apply(self, frame: np.ndarray, settings: Settings) -> np.ndarray:
        return mirror(frame, self.axis)


class ScaleStage:
    name = "scale"

    def count(self, settings: Settings) -> int:
        return 1 if settings.scale > 1 else 0

    def apply(self, frame: np.ndarray, settings: Settings) -> np.ndarray:
        return downscale(frame, settings.scale)
