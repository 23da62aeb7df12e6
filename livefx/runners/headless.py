"""Headless batch rendering runner."""

from tqdm import tqdm

from ..config import SessionConfig
from ..core.io import FrameSource, Recorder
from ..effects.pipeline import default_pipeline
from .interactive import build_settings


def run_headless(config: SessionConfig) -> int:
    """Render a file through the effect chain without any windows.

    The key script is applied once before the first frame and every frame
    is written, whatever the recording toggle says. Still images are
    rendered ``config.capture.frames`` times.

    Args:
        config: Session configuration.

    Returns:
        Number of frames written.

    Raises:
        RuntimeError: If the input yields no frames.
    """
    settings = build_settings(config)
    pipeline = default_pipeline()

    active = settings.active_effects()
    if active:
        print(f"Enabled effects: {', '.join(active)}")

    written = 0
    with FrameSource(config.capture.source, repeat=config.capture.frames) as source:
        fps = config.recording.fps if source.is_image else source.fps
        total = source.frame_count or None
        with Recorder(config.recording.path, fps=fps, codec=config.recording.codec) as recorder:
            for frame in tqdm(source, total=total, desc="Processing"):
                recorder.write(pipeline.apply(frame, settings))
                written += 1

    if written == 0:
        raise RuntimeError(f"Cannot read from {config.capture.source}")

    print(f"Output saved to: {config.recording.path}")
    return written
