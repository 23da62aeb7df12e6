"""Color and tone stages."""

import cv2
import numpy as np

from ..core.settings import Settings
from ..core.utils import is_single_channel


def grayscale(frame: np.ndarray) -> np.ndarray:
    """Convert a BGR frame to single-channel luma.

    Args:
        frame: Input frame.

    Returns:
        Single-channel frame. Single-channel input is returned unchanged.
    """
    if is_single_channel(frame):
        return frame
    return cv2.cvtColor(frame, cv2.COLOR_BGR2GRAY)


def linear_adjust(frame: np.ndarray, alpha: int, beta: int) -> np.ndarray:
    """Compute ``frame * alpha + beta`` saturated to the uint8 range.

    Args:
        frame: Input uint8 frame.
        alpha: Gain.
        beta: Offset.

    Returns:
        Adjusted uint8 frame of the same shape.
    """
    adjusted = frame.astype(np.int64) * alpha + beta
    return np.clip(adjusted, 0, 255).astype(np.uint8)


class GrayscaleStage:
    name = "grayscale"

    def count(self, settings: Settings) -> int:
        return 1 if settings.grayscale else 0

    def apply(self, frame: np.ndarray, settings: Settings) -> np.ndarray:
        return grayscale(frame)


class ToneStage:
    """Contrast gain and brightness offset, applied in one pass."""

    name = "tone"

    def count(self, settings: Settings) -> int:
        if settings.contrast == 1 and settings.brightness == 0:
            return 0
        return 1

    def apply(self, frame: np.ndarray, settings: Settings) -> np.ndarray:
        return linear_adjust(frame, settings.contrast, settings.brightness)


class NegativeStage:
    name = "negative"

    def count(self, settings: Settings) -> int:
        return 1 if settings.negative else 0

    def apply(self, frame: np.ndarray, settings: Settings) -> np.ndarray:
        return linear_adjust(frame, -1, 255)
