import asyncio
import math
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

from langensemble.constants import MAX_PERCENT, MIN_PERCENT
from langensemble.detectors.codes import normalize_language_code
from langensemble.models.detection import DetectionEntry, DetectionProfile
from langensemble.utils.logger import get_logger

logger = get_logger()

# What an engine hands back before normalization: (engine code, percent 0-100).
# Engines are not trusted to honour it; `detect` treats anything else as a fault.
RawDetection = tuple[str, float]


class BaseDetector(ABC):
    """
    Abstract Base Class for all detection engine adapters.

    Subclasses only talk to their engine in `_detect`. Everything else is shared:
    input screening, code normalization, percent clamping, and the guarantee that
    an engine failure never leaves the adapter. Short, slang-heavy or mixed-script
    text routinely defeats individual engines, so a failing engine simply
    contributes an empty profile.

    Attributes:
        name: Engine id used for selection and reporting (e.g. 'cld').
    """

    name: str = "detector"

    @abstractmethod
    def _detect(self, text: str) -> Iterable[RawDetection]:
        """
        Runs the underlying engine.

        Args:
            text: Non-blank input text.

        Returns:
            The engine's answers as (code, percent) pairs, best first. Codes may be
            in any code space; percents on a 0-100 scale.
        """
        pass

    def detect(self, text: str) -> DetectionProfile:
        """
        Detects the language of a single text.

        Args:
            text: The text to analyze.

        Returns:
            DetectionProfile: The normalized ranked detections. Empty when the
            engine had no answer or failed.
        """
        if not isinstance(text, str) or not text.strip():
            return self._empty()

        try:
            raw = list(self._detect(text))
            entries = self._normalize(raw)
        except Exception as e:
            logger.debug(f"{self.name}: detection failed, returning empty profile: {e}")
            return self._empty()

        return DetectionProfile(engine=self.name, entries=tuple(entries))

    async def a_detect(self, text: str) -> DetectionProfile:
        """
        Async version of detect. Engines are CPU-bound, so the call is offloaded to
        a worker thread to keep the event loop responsive.
        """
        return await asyncio.to_thread(self.detect, text)

    def _normalize(self, raw: list[RawDetection]) -> list[DetectionEntry]:
        entries = []
        for code, percent in raw:
            normalized = normalize_language_code(code)
            if normalized is None:
                continue
            entries.append(
                DetectionEntry(code=normalized, percent=_clamp_percent(percent))
            )
        return entries

    def _empty(self) -> DetectionProfile:
        return DetectionProfile(engine=self.name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


def _clamp_percent(value: Any) -> float:
    """Coerces an engine confidence to float in [0, 100]. Raises on garbage."""
    if isinstance(value, bool):
        raise TypeError(f"Confidence must be numeric, got {value!r}")
    percent = float(value)
    if math.isnan(percent):
        raise ValueError("Confidence is NaN")
    return min(max(percent, MIN_PERCENT), MAX_PERCENT)
