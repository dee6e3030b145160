from .config import EnsembleConfig
from .detection import DetectionEntry, DetectionProfile, MergedProfile
from .engine import Engine

__all__ = [
    "DetectionEntry",
    "DetectionProfile",
    "EnsembleConfig",
    "Engine",
    "MergedProfile",
]
