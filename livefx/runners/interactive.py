"""Interactive live preview runner."""

from typing import Optional

from ..config import SessionConfig
from ..core.commands import HELP_TEXT, apply_key, apply_script
from ..core.io import Display, FrameSource, Recorder
from ..core.settings import Settings
from ..core.utils import ensure_three_channel
from ..effects.pipeline import EffectPipeline, default_pipeline


def build_settings(config: SessionConfig) -> Settings:
    """Create settings seeded from the configured intensity and key script.

    Args:
        config: Session configuration.

    Returns:
        Fresh settings with the script applied.
    """
    settings = Settings()
    settings.set_intensity(config.script.intensity)
    if config.script.keys:
        apply_script(settings, config.script.keys)
    return settings


def run_interactive(
    config: SessionConfig,
    source=None,
    display=None,
    recorder=None,
    settings: Optional[Settings] = None,
    pipeline: Optional[EffectPipeline] = None,
) -> int:
    """Run the capture / command / render / show loop until exit.

    One cycle reads a frame, applies at most one key, renders the settings
    onto a copy of the frame, records it while recording is on and shows
    both frames. End-of-stream and the exit command both end the loop;
    the recorder, source and windows are released either way.

    Args:
        config: Session configuration.
        source: Frame source (defaults to a FrameSource for the configured input).
        display: Display (defaults to OpenCV windows).
        recorder: Recorder (defaults to the configured output file).
        settings: Settings to drive (defaults to build_settings(config)).
        pipeline: Effect pipeline (defaults to default_pipeline()).

    Returns:
        Number of completed cycles.
    """
    if settings is None:
        settings = build_settings(config)
    if pipeline is None:
        pipeline = default_pipeline()
    if recorder is None:
        recorder = Recorder(
            config.recording.path,
            fps=config.recording.fps,
            codec=config.recording.codec,
        )
    if source is None:
        source = FrameSource(config.capture.source)

    print(HELP_TEXT)

    cycles = 0
    try:
        if display is None:
            display = Display(config.display, settings)

        while True:
            ret, original = source.read_frame()
            if not ret or original is None or original.size == 0:
                break

            apply_key(settings, display.poll_key())
            processed = pipeline.apply(original, settings)

            if settings.recording:
                processed = ensure_three_channel(processed)
                if not recorder.is_open:
                    print(f"Recording to {recorder.path}")
                recorder.write(processed)
            elif recorder.is_open:
                recorder.close()
                print("Recording stopped")

            display.show(original, processed)
            cycles += 1

            if settings.exit_requested:
                break
    finally:
        if recorder.is_open:
            recorder.close()
            print(f"Output saved to: {recorder.path}")
        source.close()
        if display is not None:
            display.close()

    return cycles
