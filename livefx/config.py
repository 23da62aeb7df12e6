"""Configuration dataclasses for livefx."""

from dataclasses import dataclass


@dataclass
class CaptureConfig:
    """Configuration for the frame source."""

    source: str = "0"
    frames: int = 60


@dataclass
class RecordingConfig:
    """Configuration for the recorded output video."""

    path: str = "output.avi"
    fps: float = 60.0
    codec: str = "MJPG"


@dataclass
class DisplayConfig:
    """Configuration for the preview windows."""

    original_window: str = "Original"
    processed_window: str = "Processed"
    trackbar: str = "Intensity"
    wait_ms: int = 1
    show_original: bool = True


@dataclass
class ScriptConfig:
    """Key commands applied before processing starts."""

    keys: str = ""
    intensity: int = 1


@dataclass
class SessionConfig:
    """Combined configuration for a run."""

    capture: CaptureConfig
    recording: RecordingConfig
    display: DisplayConfig
    script: ScriptConfig
    headless: bool = False

    @classmethod
    def from_args(
        cls,
        source: str = "0",
        output_path: str = "output.avi",
        fps: float = 60.0,
        codec: str = "MJPG",
        wait_ms: int = 1,
        show_original: bool = True,
        keys: str = "",
        intensity: int = 1,
        frames: int = 60,
        headless: bool = False,
    ) -> "SessionConfig":
        """Create SessionConfig from CLI arguments."""
        return cls(
            capture=CaptureConfig(source=source, frames=frames),
            recording=RecordingConfig(path=output_path, fps=fps, codec=codec),
            display=DisplayConfig(wait_ms=wait_ms, show_original=show_original),
            script=ScriptConfig(keys=keys, intensity=intensity),
            headless=headless,
        )
