"""Base stage protocol."""

from typing import Protocol

import numpy as np

from ..core.settings import Settings


class Stage(Protocol):
    """Protocol for pipeline stages."""

    name: str

    def count(self, settings: Settings) -> int:
        """Number of times the stage runs for the given settings.

        Args:
            settings: Current settings.

        Returns:
            Repeat count; 0 skips the stage.
        """
        ...

    def apply(self, frame: np.ndarray, settings: Settings) -> np.ndarray:
        """Apply one pass of the stage to a frame.

        Args:
            frame: Input frame (BGR or single-channel).
            settings: Current settings.

        Returns:
            Processed frame.
        """
        ...
