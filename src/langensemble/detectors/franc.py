from collections.abc import Iterable

from langensemble.constants import RANK_ONLY_PERCENT
from langensemble.detectors.base import BaseDetector, RawDetection
from langensemble.errors import ConfigurationError
from langensemble.models.engine import Engine
from langensemble.utils.logger import get_logger

try:
    from lingua import IsoCode639_1, LanguageDetectorBuilder

    HAS_LINGUA = True
except ImportError:
    IsoCode639_1 = None
    LanguageDetectorBuilder = None
    HAS_LINGUA = False

logger = get_logger()


class FrancDetector(BaseDetector):
    """
    Rank-only adapter: reports the single best language and nothing else.

    Backed by lingua's `detect_language_of`. The winning language is read as an
    ISO 639-3 code and mapped into the two-letter code space. Rank-only engines
    expose no usable confidence, so the winner is always reported at 100%.

    Note: because the ensemble merges by maximum, this engine's answer clears any
    threshold below 100 on its own whenever it names a language.
    """

    name = Engine.FRANC.value

    def __init__(self, languages: list[str] | None = None):
        """
        Args:
            languages: ISO 639-1 codes to restrict detection to (e.g. ['ru', 'en']).
                Loading fewer language models is faster and less error-prone on
                short text. None loads every language lingua supports.

        Raises:
            ConfigurationError: If lingua is not installed, or if `languages` does
                not contain at least two supported codes.
        """
        if not HAS_LINGUA:
            raise ConfigurationError(
                "FrancDetector requires 'lingua-language-detector'. "
                "Install it via: pip install lingua-language-detector"
            )

        if languages:
            iso_codes = []
            for code in languages:
                try:
                    iso_codes.append(getattr(IsoCode639_1, code.strip().upper()))
                except AttributeError:
                    logger.warning(
                        f"Language code '{code}' not supported by Lingua. Skipping."
                    )

            # Lingua refuses to build a detector for a single language.
            if len(iso_codes) < 2:
                raise ConfigurationError(
                    f"No valid languages found in {languages}. "
                    "FrancDetector needs at least two supported ISO 639-1 codes."
                )
            builder = LanguageDetectorBuilder.from_iso_codes_639_1(*iso_codes)
        else:
            builder = LanguageDetectorBuilder.from_all_languages()

        self.languages = languages
        self._detector = builder.build()

    def _detect(self, text: str) -> Iterable[RawDetection]:
        language = self._detector.detect_language_of(text)
        if language is None:
            return []
        return [(language.iso_code_639_3.name, RANK_ONLY_PERCENT)]
