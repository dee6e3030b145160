from collections.abc import Sequence

from langensemble.constants import DEFAULT_THRESHOLD
from langensemble.core.batch import a_run_batch, a_run_batches, run_batch, run_batches
from langensemble.core.classifier import (
    is_mismatch,
    validate_expected_language,
    validate_threshold,
)
from langensemble.core.defaults import get_default_detectors
from langensemble.core.merge import merge_batch
from langensemble.detectors.base import BaseDetector
from langensemble.errors import ConfigurationError, UnknownEngineError
from langensemble.models.config import EnsembleConfig
from langensemble.models.detection import DetectionProfile, MergedProfile
from langensemble.models.engine import Engine
from langensemble.utils.logger import get_logger

logger = get_logger()


class EnsembleDetector:
    """
    Runs a fixed set of detection engines over batches of short texts and merges
    their answers.

    Three views are exposed: the raw per-engine profiles, the merged
    best-confidence profile per text, and a per-text mismatch verdict against an
    expected language. Every view is index-aligned with the input batch.

    Attributes:
        max_workers (int | None): Thread pool size used by the sync methods.

    Examples:
        >>> ensemble = EnsembleDetector()
        >>> ensemble.detect_mismatches(["Челка мешает", "hello there"], "ru")
        [False, True]
    """

    def __init__(
        self,
        detectors: list[BaseDetector] | None = None,
        max_workers: int | None = None,
    ):
        """
        Args:
            detectors: The adapters to ensemble. If None (default), the standard
                three engines are loaded. An explicit list must be non-empty and
                use unique adapter names.
            max_workers: Thread pool size for batch detection.

        Raises:
            ConfigurationError: If the detector list is empty or has duplicate
                names, or a default engine's library is missing.
        """
        if detectors is None:
            detectors = get_default_detectors()

        if not detectors:
            raise ConfigurationError("An ensemble needs at least one detector.")

        names = [d.name for d in detectors]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ConfigurationError(
                f"Detector names must be unique. Duplicates: {', '.join(duplicates)}"
            )

        self._detectors = list(detectors)
        self._by_name = {d.name: d for d in self._detectors}
        self.max_workers = max_workers

    @classmethod
    def from_config(cls, config: EnsembleConfig) -> "EnsembleDetector":
        """Builds an ensemble from the engines and options in `config`."""
        return cls(get_default_detectors(config), max_workers=config.max_workers)

    @property
    def engines(self) -> list[str]:
        """Registered engine ids, in run order."""
        return [d.name for d in self._detectors]

    @property
    def detectors(self) -> list[BaseDetector]:
        return list(self._detectors)

    def get_detector(self, engine: Engine | str) -> BaseDetector:
        """
        Resolves an engine selector to its registered adapter.

        Raises:
            UnknownEngineError: If no adapter is registered under that id.
        """
        key = engine.value if isinstance(engine, Engine) else engine
        try:
            return self._by_name[key]
        except (KeyError, TypeError):
            raise UnknownEngineError(str(key), self.engines) from None

    def detect_with_one_engine(
        self, inputs: Sequence[str], engine: Engine | str
    ) -> list[DetectionProfile]:
        """
        Runs a single registered engine over the batch.

        Args:
            inputs: The texts to analyze.
            engine: Engine member or id (e.g. Engine.CLD or 'cld').

        Returns:
            One DetectionProfile per input, in input order.

        Raises:
            UnknownEngineError: If the engine is not registered.
        """
        detector = self.get_detector(engine)
        return run_batch(detector, as_batch(inputs), self.max_workers)

    def detect_per_engine(
        self, inputs: Sequence[str]
    ) -> dict[str, list[DetectionProfile]]:
        """
        Runs every engine over the batch and returns the raw, unmerged results.

        Returns:
            Mapping of engine id to its per-input profiles.
        """
        batch = as_batch(inputs)
        per_engine = run_batches(self._detectors, batch, self.max_workers)
        return dict(zip(self.engines, per_engine, strict=True))

    def detect_all(self, inputs: Sequence[str]) -> list[MergedProfile]:
        """
        Runs every engine over the batch and merges per input.

        Returns:
            One MergedProfile per input, in input order.
        """
        batch = as_batch(inputs)
        return merge_batch(run_batches(self._detectors, batch, self.max_workers))

    def detect_mismatches(
        self,
        inputs: Sequence[str],
        expected: str,
        threshold: float = DEFAULT_THRESHOLD,
    ) -> list[bool]:
        """
        Flags texts that are likely not written in the expected language.

        Args:
            inputs: The texts to analyze.
            expected: Two-letter code of the expected language (e.g. 'ru').
            threshold: Minimum percent (exclusive) for a detection to count.

        Returns:
            One verdict per input, in input order. True means mismatch.

        Raises:
            ConfigurationError: If `expected` or `threshold` is invalid. Raised
                before any detection runs.
        """
        expected = validate_expected_language(expected)
        threshold = validate_threshold(threshold)
        return [
            is_mismatch(merged, expected, threshold)
            for merged in self.detect_all(inputs)
        ]

    async def a_detect_with_one_engine(
        self, inputs: Sequence[str], engine: Engine | str
    ) -> list[DetectionProfile]:
        """Async version of detect_with_one_engine."""
        detector = self.get_detector(engine)
        return await a_run_batch(detector, as_batch(inputs))

    async def a_detect_per_engine(
        self, inputs: Sequence[str]
    ) -> dict[str, list[DetectionProfile]]:
        """Async version of detect_per_engine."""
        per_engine = await a_run_batches(self._detectors, as_batch(inputs))
        return dict(zip(self.engines, per_engine, strict=True))

    async def a_detect_all(self, inputs: Sequence[str]) -> list[MergedProfile]:
        """Async version of detect_all."""
        return merge_batch(await a_run_batches(self._detectors, as_batch(inputs)))

    async def a_detect_mismatches(
        self,
        inputs: Sequence[str],
        expected: str,
        threshold: float = DEFAULT_THRESHOLD,
    ) -> list[bool]:
        """Async version of detect_mismatches."""
        expected = validate_expected_language(expected)
        threshold = validate_threshold(threshold)
        merged = await self.a_detect_all(inputs)
        return [is_mismatch(m, expected, threshold) for m in merged]

    def __repr__(self) -> str:
        return f"EnsembleDetector(engines={self.engines!r})"


def as_batch(inputs: Sequence[str]) -> list[str]:
    # A bare string is a Sequence too; iterating it would detect single characters.
    if isinstance(inputs, (str, bytes)):
        raise ConfigurationError(
            "inputs must be a sequence of texts, not a single string. "
            "Wrap it in a list: [text]."
        )
    return list(inputs)
