"""Effect composition pipeline."""

from typing import List, Tuple

import numpy as np

from ..core.settings import Settings
from .base import Stage
from .color import GrayscaleStage, NegativeStage, ToneStage
from .filters import BlurStage, CannyStage, SobelStage
from .geometry import (
    CLOCKWISE,
    COUNTERCLOCKWISE,
    HORIZONTAL,
    VERTICAL,
    MirrorStage,
    RotateStage,
    ScaleStage,
)


class EffectPipeline:
    """Run a fixed, ordered chain of stages, each repeated per the settings."""

    def __init__(self, stages: List[Stage]):
        """Initialize pipeline with ordered stages.

        Args:
            stages: Stages to apply in order.
        """
        self.stages = list(stages)

    def plan(self, settings: Settings) -> List[Tuple[Stage, int]]:
        """Derive the (stage, repeat count) pairs for the current settings.

        Args:
            settings: Current settings.

        Returns:
            Stages with a non-zero count, in pipeline order.
        """
        plan = []
        for stage in self.stages:
            count = stage.count(settings)
            if count > 0:
                plan.append((stage, count))
        return plan

    def apply(self, frame: np.ndarray, settings: Settings) -> np.ndarray:
        """Render the settings onto a frame.

        The input frame is left untouched. The blur stage may bump
        ``settings.intensity`` to an odd value.

        Args:
            frame: Input frame.
            settings: Current settings.

        Returns:
            The processed frame.
        """
        output = frame.copy()
        for stage, count in self.plan(settings):
            for _ in range(count):
                output = stage.apply(output, settings)
        return output


def default_pipeline() -> EffectPipeline:
    """Build the pipeline in its fixed stage order."""
    return EffectPipeline(
        [
            GrayscaleStage(),
            BlurStage(),
            RotateStage(CLOCKWISE),
            RotateStage(COUNTERCLOCKWISE),
            CannyStage(),
            SobelStage(),
            MirrorStage(HORIZONTAL),
            MirrorStage(VERTICAL),
            ScaleStage(),
            ToneStage(),
            NegativeStage(),
        ]
    )
