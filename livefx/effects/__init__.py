"""Effects module: stages and the pipeline that chains them."""

from .base import Stage
from .color import GrayscaleStage, NegativeStage, ToneStage
from .filters import BlurStage, CannyStage, SobelStage
from .geometry import MirrorStage, RotateStage, ScaleStage
from .pipeline import EffectPipeline, default_pipeline

__all__ = [
    "Stage",
    "BlurStage",
    "CannyStage",
    "EffectPipeline",
    "GrayscaleStage",
    "MirrorStage",
    "NegativeStage",
    "RotateStage",
    "ScaleStage",
    "SobelStage",
    "ToneStage",
    "default_pipeline",
]
