import numpy as np
import pytest

from livefx.core.commands import apply_key
from livefx.core.settings import Settings
from livefx.effects.pipeline import EffectPipeline, default_pipeline


def test_defaults_leave_frame_unchanged(frame):
    pipeline = default_pipeline()
    settings = Settings()
    assert pipeline.plan(settings) == []
    output = pipeline.apply(frame, settings)
    assert output is not frame
    assert np.array_equal(output, frame)


def test_plan_keeps_fixed_order():
    settings = Settings(
        grayscale=True,
        blur=2,
        rotate=-1,
        canny=1,
        sobel=3,
        mirror_horizontal=1,
        mirror_vertical=1,
        scale=2,
        contrast=2,
        negative=True,
    )
    plan = default_pipeline().plan(settings)
    assert [(stage.name, count) for stage, count in plan] == [
        ("grayscale", 1),
        ("blur", 2),
        ("rotate_ccw", 1),
        ("canny", 1),
        ("sobel", 3),
        ("mirror_horizontal", 1),
        ("mirror_vertical", 1),
        ("scale", 1),
        ("tone", 1),
        ("negative", 1),
    ]


def test_input_frame_is_not_modified(frame):
    before = frame.copy()
    settings = Settings(blur=1, intensity=3, mirror_vertical=1, negative=True)
    default_pipeline().apply(frame, settings)
    assert np.array_equal(frame, before)


@pytest.mark.parametrize("passes", [2, 4, 254])
def test_even_mirror_passes_are_identity(frame, passes):
    output = default_pipeline().apply(frame, Settings(mirror_horizontal=passes))
    assert np.array_equal(output, frame)


@pytest.mark.parametrize("passes", [1, 3, 255])
def test_odd_mirror_passes_equal_one_mirror(frame, passes):
    pipeline = default_pipeline()
    once = pipeline.apply(frame, Settings(mirror_horizontal=1))
    output = pipeline.apply(frame, Settings(mirror_horizontal=passes))
    assert np.array_equal(output, once)
    assert np.array_equal(once, frame[:, ::-1])


@pytest.mark.parametrize("turns", [4, -4, 8])
def test_full_turns_are_identity(frame, turns):
    output = default_pipeline().apply(frame, Settings(rotate=turns))
    assert output.shape == frame.shape
    assert np.array_equal(output, frame)


def test_rotation_direction(frame):
    pipeline = default_pipeline()
    right = pipeline.apply(frame, Settings(rotate=1))
    left = pipeline.apply(frame, Settings(rotate=-3))
    assert right.shape == (frame.shape[1], frame.shape[0], 3)
    assert np.array_equal(right, left)


def test_blur_coerces_even_intensity_once(frame, slider):
    pipeline = default_pipeline()
    settings = Settings(blur=2, intensity=4, slider=slider)

    first = pipeline.apply(frame, settings)
    assert settings.intensity == 5
    assert slider.positions == [5]

    second = pipeline.apply(frame, settings)
    assert settings.intensity == 5
    assert np.array_equal(first, second)
    assert not np.array_equal(first, frame)


def test_grayscale_toggle_scenario(frame):
    pipeline = default_pipeline()
    settings = Settings()

    apply_key(settings, ord("g"))
    output = pipeline.apply(frame, settings)
    assert output.ndim == 2

    apply_key(settings, ord("G"))
    output = pipeline.apply(frame, settings)
    assert output.shape == frame.shape
    assert np.array_equal(output, frame)


def test_edge_passes_produce_single_channel(make_frame):
    frame = make_frame(32, 24)
    settings = Settings(grayscale=True, canny=2, sobel=1)
    output = default_pipeline().apply(frame, settings)
    assert output.shape == (24, 32)
    assert output.dtype == np.uint8


def test_scale_then_tone(frame):
    settings = Settings(scale=4, brightness=10)
    output = default_pipeline().apply(frame, settings)
    assert output.shape == (3, 4, 3)
    assert output.min() >= 10


def test_negative_after_tone():
    frame = np.full((4, 4, 3), 100, dtype=np.uint8)
    settings = Settings(contrast=2, brightness=-50, negative=True)
    output = default_pipeline().apply(frame, settings)
    assert (output == 255 - 150).all()


def test_custom_stage_list():
    class Invert:
        name = "invert"

        def count(self, settings):
            return settings.sobel

        def apply(self, frame, settings):
            return 255 - frame

    pipeline = EffectPipeline([Invert()])
    frame = np.zeros((2, 2), dtype=np.uint8)
    assert pipeline.apply(frame, Settings(sobel=3)).max() == 255
    assert pipeline.apply(frame, Settings(sobel=2)).max() == 0
