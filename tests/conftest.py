import numpy as np
import pytest


class FakeSlider:
    """Records every position the settings push to the slider."""

    def __init__(self):
        self.positions = []

    def set_position(self, value: int) -> None:
        self.positions.append(value)


def _make_frame(width=16, height=12):
    """Synthetic BGR frame with distinct pixel values (not symmetric)."""
    frame = np.zeros((height, width, 3), dtype=np.uint8)
    frame[:, :, 0] = np.linspace(0, 255, width, dtype=np.uint8)
    frame[:, :, 1] = np.linspace(0, 255, height, dtype=np.uint8)[:, np.newaxis]
    frame[:, :, 2] = (np.arange(width * height).reshape(height, width) * 7) % 256
    return frame


@pytest.fixture
def make_frame():
    return _make_frame


@pytest.fixture
def frame():
    return _make_frame()


@pytest.fixture
def slider():
    return FakeSlider()
