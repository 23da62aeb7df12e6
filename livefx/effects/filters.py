"""Blur, edge and gradient stages."""

import cv2
import numpy as np

from ..core.settings import Settings


CANNY_LOW_THRESHOLD = 100
CANNY_HIGH_THRESHOLD = 200


def gaussian_blur(frame: np.ndarray, kernel_size: int) -> np.ndarray:
    """Blur a frame with a square Gaussian kernel.

    Args:
        frame: Input frame.
        kernel_size: Odd kernel width/height in pixels.

    Returns:
        Blurred frame.
    """
    return cv2.GaussianBlur(frame, (kernel_size, kernel_size), 0)


def canny_edges(frame: np.ndarray) -> np.ndarray:
    """Run the Canny edge detector on a copy of the frame.

    Returns:
        Single-channel edge map.
    """
    return cv2.Canny(frame.copy(), CANNY_LOW_THRESHOLD, CANNY_HIGH_THRESHOLD)


def sobel_gradient(frame: np.ndarray) -> np.ndarray:
    """Combine horizontal and vertical Sobel derivatives.

    Each derivative is taken at 16-bit depth with a 1-pixel aperture,
    converted to absolute 8-bit, and the two are averaged.

    Args:
        frame: Input frame.

    Returns:
        Gradient magnitude frame with the input's channel count.
    """
    grad_x = cv2.Sobel(frame, cv2.CV_16S, 1, 0, ksize=1, scale=1, delta=0)
    grad_y = cv2.Sobel(frame, cv2.CV_16S, 0, 1, ksize=1, scale=1, delta=0)
    abs_grad_x = cv2.convertScaleAbs(grad_x)
    abs_grad_y = cv2.convertScaleAbs(grad_y)
    return cv2.addWeighted(abs_grad_x, 0.5, abs_grad_y, 0.5, 0)


class BlurStage:
    """Gaussian blur sized by the shared intensity.

    Even intensities are bumped to the next odd value on the settings
    before each pass, so the slider shows the kernel actually used.
    """

    name = "blur"

    def count(self, settings: Settings) -> int:
        return settings.blur

    def apply(self, frame: np.ndarray, settings: Settings) -> np.ndarray:
        kernel_size = settings.coerce_odd_intensity()
        return gaussian_blur(frame, kernel_size)


class CannyStage:
    name = "canny"

    def count(self, settings: Settings) -> int:
        return settings.canny

    def apply(self, frame: np.ndarray, settings: Settings) -> np.ndarray:
        return canny_edges(frame)


class SobelStage:
    name = "sobel"

    def count(self, settings: Settings) -> int:
        return settings.sobel

    def apply(self, frame: np.ndarray, settings: Settings) -> np.ndarray:
        return sobel_gradient(frame)
