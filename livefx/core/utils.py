"""Frame utility functions."""

import numpy as np
import cv2


def is_single_channel(frame: np.ndarray) -> bool:
    """Check whether a frame has one channel."""
    return frame.ndim == 2 or frame.shape[2] == 1


def ensure_three_channel(frame: np.ndarray) -> np.ndarray:
    """Convert a single-channel frame to three-channel BGR.

    Args:
        frame: Input frame.

    Returns:
        Three-channel frame; already three-channel input is returned as is.
    """
    if is_single_channel(frame):
        return cv2.cvtColor(frame, cv2.COLOR_GRAY2BGR)
    return frame


def frame_size(frame: np.ndarray) -> tuple[int, int]:
    """Get (width, height) of a frame, in the order OpenCV expects."""
    height, width = frame.shape[:2]
    return width, height
