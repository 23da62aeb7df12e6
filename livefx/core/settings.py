"""Settings store for the effect chain."""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Optional, Protocol


COUNTER_MIN = 0
COUNTER_MAX = 255

INTENSITY_MIN = 1
INTENSITY_MAX = 255


class CounterKind(Enum):
    """How a toggleable setting reacts to increase/decrease commands."""

    TOGGLE = "toggle"
    SATURATING = "saturating"
    UNBOUNDED = "unbounded"


class IntensityControl(Protocol):
    """Protocol for the externally visible intensity slider."""

    def set_position(self, value: int) -> None:
        """Move the control to ``value``."""
        ...


def _counter(kind: CounterKind, default=0):
    return field(default=default, metadata={"kind": kind})


@dataclass
class Settings:
    """Current values of every effect parameter.

    Mutated by the command interpreter and the slider callback, read once
    per cycle by the effect pipeline.
    """

    exit_requested: bool = False
    grayscale: bool = _counter(CounterKind.TOGGLE, False)
    negative: bool = _counter(CounterKind.TOGGLE, False)
    recording: bool = False
    blur: int = _counter(CounterKind.SATURATING)
    rotate: int = _counter(CounterKind.UNBOUNDED)
    mirror_horizontal: int = _counter(CounterKind.SATURATING)
    mirror_vertical: int = _counter(CounterKind.SATURATING)
    canny: int = _counter(CounterKind.SATURATING)
    sobel: int = _counter(CounterKind.SATURATING)
    brightness: int = 0
    scale: int = 1
    contrast: int = 1
    intensity: int = INTENSITY_MIN
    slider: Optional[IntensityControl] = field(
        default=None, repr=False, compare=False, metadata={"handle": True}
    )

    @staticmethod
    def kind_of(name: str) -> Optional[CounterKind]:
        """Get the counter kind of a field, or None if it is not steppable."""
        for f in fields(Settings):
            if f.name == name:
                return f.metadata.get("kind")
        raise AttributeError(f"Settings has no field {name!r}")

    def step(self, name: str, direction: int) -> None:
        """Increase (direction > 0) or decrease (direction < 0) a counter.

        Args:
            name: Field name of a toggle or counter.
            direction: Sign selects increase/enable or decrease/disable.

        Raises:
            ValueError: If the field exists but is not a steppable counter.
            AttributeError: If Settings has no field called ``name``.
        """
        kind = self.kind_of(name)
        if kind is None:
            raise ValueError(f"{name!r} is not a steppable setting")
        if direction == 0:
            return

        value = getattr(self, name)
        if kind is CounterKind.TOGGLE:
            value = direction > 0
        elif kind is CounterKind.SATURATING:
            if direction > 0 and value < COUNTER_MAX:
                value += 1
            elif direction < 0 and value > COUNTER_MIN:
                value -= 1
        else:
            value += 1 if direction > 0 else -1
        setattr(self, name, value)

    def set_intensity(self, value: int) -> None:
        """Store a new intensity, clamped to the slider range.

        Used as the slider's change callback, so it does not push the
        value back to the slider.
        """
        self.intensity = min(max(int(value), INTENSITY_MIN), INTENSITY_MAX)

    def coerce_odd_intensity(self) -> int:
        """Make the intensity odd so it can serve as a blur kernel size.

        Returns:
            The (possibly bumped) intensity.
        """
        if self.intensity % 2 == 0:
            self.intensity += 1
            self._sync_slider()
        return self.intensity

    def double_scale(self) -> None:
        self.scale *= 2

    def reset(self) -> None:
        """Restore every setting to its default and re-centre the slider."""
        for f in fields(self):
            if f.metadata.get("handle"):
                continue
            setattr(self, f.name, f.default)
        self._sync_slider()

    def active_effects(self) -> list[str]:
        """List the non-default effect settings, for status output."""
        active = []
        for f in fields(self):
            if "kind" in f.metadata and getattr(self, f.name) != f.default:
                active.append(f"{f.name}={getattr(self, f.name)}")
        if self.brightness:
            active.append(f"brightness={self.brightness}")
        if self.contrast != 1:
            active.append(f"contrast={self.contrast}")
        if self.scale != 1:
            active.append(f"scale=1/{self.scale}")
        return active

    def _sync_slider(self) -> None:
        if self.slider is not None:
            self.slider.set_position(self.intensity)
