import numpy as np

from livefx.config import SessionConfig
from livefx.core.commands import ESCAPE, NO_KEY, SPACE
from livefx.core.settings import Settings
from livefx.runners.interactive import build_settings, run_interactive


class FakeSource:
    def __init__(self, frames):
        self.frames = list(frames)
        self.closed = False

    def read_frame(self):
        if not self.frames:
            return False, None
        frame = self.frames.pop(0)
        return frame is not None, frame

    def close(self):
        self.closed = True


class FakeDisplay:
    def __init__(self, keys=()):
        self.keys = list(keys)
        self.shown = []
        self.closed = False

    def poll_key(self):
        return self.keys.pop(0) if self.keys else NO_KEY

    def show(self, original, processed):
        self.shown.append((original, processed))

    def close(self):
        self.closed = True


class FakeRecorder:
    path = "fake.avi"

    def __init__(self):
        self.frames = []
        self.sessions = 0
        self.is_open = False

    def write(self, frame):
        if not self.is_open:
            self.is_open = True
            self.sessions += 1
        self.frames.append(frame)

    def close(self):
        self.is_open = False


def run(frames, keys=(), settings=None):
    source = FakeSource(frames)
    display = FakeDisplay(keys)
    recorder = FakeRecorder()
    cycles = run_interactive(
        SessionConfig.from_args(),
        source=source,
        display=display,
        recorder=recorder,
        settings=settings,
    )
    return cycles, source, display, recorder


def test_stops_at_end_of_stream(make_frame):
    cycles, source, display, recorder = run([make_frame() for _ in range(3)])
    assert cycles == 3
    assert len(display.shown) == 3
    assert source.closed and display.closed
    assert recorder.frames == []


def test_missing_frame_ends_stream(make_frame):
    cycles, source, _, _ = run([make_frame(), None, make_frame()])
    assert cycles == 1
    assert source.closed


def test_escape_exits_after_finishing_the_cycle(make_frame):
    frames = [make_frame() for _ in range(5)]
    cycles, _, display, _ = run(frames, keys=[NO_KEY, ESCAPE])
    assert cycles == 2
    assert len(display.shown) == 2


def test_one_key_per_cycle(make_frame):
    frames = [make_frame() for _ in range(2)]
    settings = Settings()
    run(frames, keys=[ord("b"), ord("b"), ord("b")], settings=settings)
    assert settings.blur == 2


def test_original_is_shown_unprocessed(make_frame):
    frame = make_frame()
    _, _, display, _ = run([frame], keys=[ord("n")])
    original, processed = display.shown[0]
    assert np.array_equal(original, make_frame())
    assert np.array_equal(processed, 255 - make_frame())


def test_recording_normalizes_grayscale_frames(make_frame):
    frames = [make_frame() for _ in range(5)]
    keys = [ord("g"), SPACE, NO_KEY, SPACE, NO_KEY]
    _, _, _, recorder = run(frames, keys=keys)

    assert len(recorder.frames) == 2
    assert recorder.sessions == 1
    assert not recorder.is_open
    for frame in recorder.frames:
        assert frame.shape == (12, 16, 3)


def test_scale_down_closes_recording(make_frame):
    frames = [make_frame() for _ in range(4)]
    keys = [SPACE, ord(","), SPACE, NO_KEY]
    _, _, _, recorder = run(frames, keys=keys)

    assert recorder.sessions == 2
    assert [f.shape for f in recorder.frames] == [(12, 16, 3), (6, 8, 3), (6, 8, 3)]


def test_build_settings_applies_script():
    config = SessionConfig.from_args(keys="bb;", intensity=6)
    settings = build_settings(config)
    assert settings.blur == 2
    assert settings.contrast == 6
    assert settings.intensity == 6


def test_build_settings_handles_control_tokens():
    settings = build_settings(SessionConfig.from_args(keys="b<bs>g"))
    assert settings.blur == 0
    assert settings.grayscale is True

    settings = build_settings(SessionConfig.from_args(keys="<space>"))
    assert settings.recording is True
