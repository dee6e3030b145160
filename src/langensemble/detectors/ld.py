from collections.abc import Iterable

from langensemble.detectors.base import BaseDetector, RawDetection
from langensemble.errors import ConfigurationError
from langensemble.models.engine import Engine

try:
    from langdetect.detector_factory import PROFILES_DIRECTORY, DetectorFactory

    HAS_LANGDETECT = True
except ImportError:
    DetectorFactory = None
    PROFILES_DIRECTORY = None
    HAS_LANGDETECT = False

# langdetect is randomized; pin the seed so the same text gives the same answer.
LANGDETECT_SEED = 0


class LanguageDetectDetector(BaseDetector):
    """
    Adapter for langdetect.

    langdetect returns every candidate language with a probability in [0, 1]; the
    probabilities are scaled to percent. Text without usable features makes
    langdetect raise, which ends up as an empty profile.

    Each adapter owns a private langdetect factory whose profiles are fully loaded
    in `__init__`. Batches fan out over threads, and langdetect's module-level
    `detect_langs` builds its shared factory lazily on first use, which is not
    safe to race.
    """

    name = Engine.LANGUAGE_DETECT.value

    def __init__(self, max_results: int | None = None):
        """
        Args:
            max_results: Keep only the top N candidates. None keeps all of them.

        Raises:
            ConfigurationError: If langdetect is not installed or max_results < 1.
        """
        if not HAS_LANGDETECT:
            raise ConfigurationError(
                "LanguageDetectDetector requires 'langdetect'. "
                "Install it via: pip install langdetect"
            )
        if max_results is not None and max_results < 1:
            raise ConfigurationError(
                f"max_results must be a positive integer, got {max_results}."
            )
        self.max_results = max_results

        self._factory = DetectorFactory()
        self._factory.load_profile(PROFILES_DIRECTORY)
        self._factory.set_seed(LANGDETECT_SEED)

    def _detect(self, text: str) -> Iterable[RawDetection]:
        # A langdetect Detector holds per-text state; never share one across calls.
        detector = self._factory.create()
        detector.append(text)
        candidates = detector.get_probabilities()
        if self.max_results is not None:
            candidates = candidates[: self.max_results]
        return [(c.lang, c.prob * 100) for c in candidates]
