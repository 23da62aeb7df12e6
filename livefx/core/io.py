"""Capture, recording and display wrappers around OpenCV."""

from pathlib import Path
from typing import Iterator, Optional, Tuple, Union

import cv2
import numpy as np
from PIL import Image

from ..config import DisplayConfig
from .settings import INTENSITY_MAX, INTENSITY_MIN, Settings
from .utils import ensure_three_channel, frame_size


IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".bmp"}


def is_image_file(filename: str) -> bool:
    """Check if filename has a still-image extension.

    Args:
        filename: Path to file.

    Returns:
        True if file has an image extension.
    """
    return Path(filename).suffix.lower() in IMAGE_EXTENSIONS


def parse_source(source: Union[str, int]) -> Union[str, int]:
    """Turn a camera index given as text into an int; leave paths and URLs."""
    if isinstance(source, int):
        return source
    if source.strip().isdigit():
        return int(source)
    return source


class FrameSource:
    """Read BGR frames from a camera, stream, video file or still image."""

    def __init__(self, source: Union[str, int], repeat: Optional[int] = None):
        """Initialize the source.

        Args:
            source: Camera index, stream URL, or path to a video or image.
            repeat: For still images, how many frames to yield
                (None repeats forever).

        Raises:
            IOError: If the source cannot be opened.
        """
        self.source = parse_source(source)
        self.is_image = isinstance(self.source, str) and is_image_file(self.source)
        self._cap = None
        self._image = None
        self._remaining = repeat
        self._fps = 30.0
        self._frame_count = repeat or 0

        if self.is_image:
            try:
                rgb = np.array(Image.open(self.source).convert("RGB"))
            except OSError as exc:
                raise IOError(f"Cannot open image file: {self.source}") from exc
            self._image = cv2.cvtColor(rgb, cv2.COLOR_RGB2BGR)
        else:
            self._cap = cv2.VideoCapture(self.source)
            if not self._cap.isOpened():
                raise IOError(f"Cannot open video source: {self.source}")
            fps = self._cap.get(cv2.CAP_PROP_FPS)
            if fps and fps > 0:
                self._fps = fps
            self._frame_count = max(0, int(self._cap.get(cv2.CAP_PROP_FRAME_COUNT)))

    @property
    def fps(self) -> float:
        """Get frames per second (30 when the source does not report it)."""
        return self._fps

    @property
    def frame_count(self) -> int:
        """Get total frame count (0 when unknown, e.g. for cameras)."""
        return self._frame_count

    def read_frame(self) -> Tuple[bool, Optional[np.ndarray]]:
        """Read the next frame.

        Returns:
            Tuple of (success, frame). Empty frames are reported as
            end-of-stream.
        """
        if self._image is not None:
            if self._remaining is not None:
                if self._remaining <= 0:
                    return False, None
                self._remaining -= 1
            return True, self._image.copy()

        if self._cap is None:
            return False, None
        ret, frame = self._cap.read()
        if not ret or frame is None or frame.size == 0:
            return False, None
        return True, frame

    def __iter__(self) -> Iterator[np.ndarray]:
        """Iterate over frames."""
        while True:
            ret, frame = self.read_frame()
            if not ret:
                break
            yield frame

    def close(self):
        """Release resources."""
        if self._cap is not None:
            self._cap.release()
            self._cap = None
        self._image = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class Recorder:
    """Write frames to a video file, opening the file on the first frame.

    The writer is sized from the first frame it receives. Single-channel
    frames are expanded to three channels and frames of a different size
    are resized to fit, so the writer never rejects a frame.
    """

    def __init__(self, path: str, fps: float = 60.0, codec: str = "MJPG"):
        """Initialize the recorder.

        Args:
            path: Output video path.
            fps: Frames per second.
            codec: Four-character codec code.
        """
        self.path = path
        self.fps = fps
        self.codec = codec
        self.size: Optional[Tuple[int, int]] = None
        self._writer = None

    @property
    def is_open(self) -> bool:
        return self._writer is not None

    def open(self, width: int, height: int):
        """Open the underlying writer.

        Raises:
            IOError: If the writer cannot be created.
        """
        fourcc = cv2.VideoWriter_fourcc(*self.codec)
        writer = cv2.VideoWriter(self.path, fourcc, self.fps, (width, height))
        if not writer.isOpened():
            raise IOError(f"Cannot create video writer: {self.path}")
        self._writer = writer
        self.size = (width, height)

    def write(self, frame: np.ndarray):
        """Write a frame, opening the file if needed.

        Args:
            frame: BGR or single-channel uint8 frame.
        """
        frame = ensure_three_channel(frame)
        if not self.is_open:
            self.open(*frame_size(frame))
        if frame_size(frame) != self.size:
            frame = cv2.resize(frame, self.size, interpolation=cv2.INTER_AREA)
        self._writer.write(frame)

    def close(self):
        """Release the writer if open."""
        if self._writer is not None:
            self._writer.release()
            self._writer = None
            self.size = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class Display:
    """OpenCV windows for the original and processed frames.

    Also owns the intensity trackbar and acts as the settings' slider
    handle, so a settings reset moves the trackbar back to 1.
    """

    def __init__(self, config: DisplayConfig, settings: Settings):
        """Create the windows and the intensity trackbar.

        Args:
            config: Window titles and poll timing.
            settings: Settings the trackbar writes to.

        Raises:
            RuntimeError: If OpenCV has no usable GUI backend.
        """
        self.config = config
        try:
            if config.show_original:
                cv2.namedWindow(config.original_window)
            cv2.namedWindow(config.processed_window)
            cv2.createTrackbar(
                config.trackbar,
                config.processed_window,
                settings.intensity,
                INTENSITY_MAX,
                settings.set_intensity,
            )
            cv2.setTrackbarMin(config.trackbar, config.processed_window, INTENSITY_MIN)
            cv2.setTrackbarPos(config.trackbar, config.processed_window, settings.intensity)
        except cv2.error as exc:
            raise RuntimeError(f"Cannot create preview windows: {exc}") from exc
        settings.slider = self

    def set_position(self, value: int) -> None:
        cv2.setTrackbarPos(self.config.trackbar, self.config.processed_window, value)

    def poll_key(self) -> int:
        """Wait briefly for a key press.

        Returns:
            Key code, or -1 if no key was pressed.
        """
        key = cv2.waitKey(self.config.wait_ms)
        if key == -1:
            return key
        return key & 0xFF

    def show(self, original: np.ndarray, processed: np.ndarray):
        if self.config.show_original:
            cv2.imshow(self.config.original_window, original)
        cv2.imshow(self.config.processed_window, processed)

    def close(self):
        """Tear down all windows."""
        cv2.destroyAllWindows()
