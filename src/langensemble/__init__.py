from .core.api import (
    a_detect_all,
    a_detect_mismatches,
    a_detect_with_one_engine,
    configure_ensemble,
    detect_all,
    detect_mismatches,
    detect_with_one_engine,
)
from .core.classifier import is_mismatch
from .core.merge import merge_profiles
from .core.orchestrator import EnsembleDetector
from .detectors import (
    BaseDetector,
    CLDDetector,
    FrancDetector,
    LanguageDetectDetector,
)
from .errors import ConfigurationError, LangEnsembleError, UnknownEngineError
from .evaluation import EvaluationReport, evaluate
from .models import (
    DetectionEntry,
    DetectionProfile,
    EnsembleConfig,
    Engine,
    MergedProfile,
)

__version__ = "0.1.0"

__all__ = [
    "detect_all",
    "detect_mismatches",
    "detect_with_one_engine",
    "a_detect_all",
    "a_detect_mismatches",
    "a_detect_with_one_engine",
    "configure_ensemble",
    "evaluate",
    "EvaluationReport",
    "EnsembleDetector",
    "EnsembleConfig",
    "Engine",
    "BaseDetector",
    "CLDDetector",
    "LanguageDetectDetector",
    "FrancDetector",
    "DetectionEntry",
    "DetectionProfile",
    "MergedProfile",
    "merge_profiles",
    "is_mismatch",
    "LangEnsembleError",
    "ConfigurationError",
    "UnknownEngineError",
]
