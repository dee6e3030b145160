from .base import BaseDetector
from .cld import CLDDetector
from .codes import normalize_language_code
from .franc import FrancDetector
from .ld import LanguageDetectDetector

__all__ = [
    "BaseDetector",
    "CLDDetector",
    "FrancDetector",
    "LanguageDetectDetector",
    "normalize_language_code",
]
