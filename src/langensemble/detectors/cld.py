from collections.abc import Iterable

from langensemble.detectors.base import BaseDetector, RawDetection
from langensemble.errors import ConfigurationError
from langensemble.models.engine import Engine
from langensemble.utils.logger import get_logger

try:
    import pycld2 as cld2

    HAS_CLD2 = True
except ImportError:
    cld2 = None
    HAS_CLD2 = False

logger = get_logger()


class CLDDetector(BaseDetector):
    """
    Adapter for Google's Compact Language Detector 2 (pycld2).

    CLD2 reports up to three languages with the percentage of the text it
    attributes to each. Filler rows ('Unknown', 0%) are skipped.
    """

    name = Engine.CLD.value

    def __init__(self, best_effort: bool = False):
        """
        Args:
            best_effort: Ask CLD2 for an answer even when the text is too short
                for a reliable one. Useful for chat messages of a few words.

        Raises:
            ConfigurationError: If pycld2 is not installed.
        """
        if not HAS_CLD2:
            raise ConfigurationError(
                "CLDDetector requires 'pycld2'. Install it via: pip install pycld2"
            )
        self.best_effort = best_effort

    def _detect(self, text: str) -> Iterable[RawDetection]:
        _, _, details = cld2.detect(text, bestEffort=self.best_effort)
        for _name, code, percent, _score in details:
            if percent <= 0:
                continue
            yield code, percent
