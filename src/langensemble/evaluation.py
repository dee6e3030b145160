from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field

from langensemble.constants import DEFAULT_THRESHOLD
from langensemble.core.classifier import (
    is_mismatch,
    validate_expected_language,
    validate_threshold,
)
from langensemble.core.merge import merge_profiles
from langensemble.core.orchestrator import EnsembleDetector, as_batch
from langensemble.models.detection import DetectionProfile, MergedProfile


class EvaluationItem(BaseModel):
    """
    Per-text outcome of an evaluation run.

    Attributes:
        text: The evaluated text.
        engine_hits: Per engine, whether it found the expected language above the
            threshold.
        ensemble_hit: Whether the merged profile has the expected language above
            the threshold (i.e. any engine hit).
        mismatch: The mismatch verdict for the text.
        merged: The merged profile the verdict was computed from.
    """

    text: str
    engine_hits: dict[str, bool]
    ensemble_hit: bool
    mismatch: bool
    merged: MergedProfile

    model_config = ConfigDict(frozen=True)


class EvaluationReport(BaseModel):
    """
    Acceptance statistics of an ensemble over a batch labelled with one language.

    Attributes:
        expected: The language every text is labelled with.
        threshold: The decision threshold used.
        total: Number of evaluated texts.
        engine_hits: Per engine, how many texts it recognized as `expected`.
        ensemble_hits: How many texts at least one engine recognized.
        mismatches: How many texts were flagged as mismatches.
        items: Per-text details, in input order.
    """

    expected: str
    threshold: float
    total: int
    engine_hits: dict[str, int]
    ensemble_hits: int
    mismatches: int
    items: list[EvaluationItem] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def engine_rates(self) -> dict[str, float]:
        return {name: self._rate(hits) for name, hits in self.engine_hits.items()}

    @property
    def ensemble_rate(self) -> float:
        return self._rate(self.ensemble_hits)

    @property
    def mismatch_rate(self) -> float:
        return self._rate(self.mismatches)

    def _rate(self, count: int) -> float:
        return count / self.total if self.total else 0.0


def evaluate(
    inputs: Sequence[str],
    expected: str,
    threshold: float = DEFAULT_THRESHOLD,
    ensemble: EnsembleDetector | None = None,
) -> EvaluationReport:
    """
    Measures how well each engine, and the ensemble as a whole, recognizes a batch
    of texts known to be written in `expected`.

    Args:
        inputs: Texts labelled with the expected language.
        expected: Two-letter code of that language.
        threshold: Minimum percent (exclusive) for a detection to count.
        ensemble: The ensemble to evaluate. None builds the default one.

    Returns:
        EvaluationReport: Hit counts, rates and per-text details.

    Raises:
        ConfigurationError: If `expected` or `threshold` is invalid.
    """
    expected = validate_expected_language(expected)
    threshold = validate_threshold(threshold)
    ensemble = ensemble or EnsembleDetector()

    texts = as_batch(inputs)
    per_engine = ensemble.detect_per_engine(texts)

    engine_hits = {name: 0 for name in per_engine}
    items = []
    for idx, text in enumerate(texts):
        profiles = [batch[idx] for batch in per_engine.values()]
        hits = {
            name: _recognizes(batch[idx], expected, threshold)
            for name, batch in per_engine.items()
        }
        for name, hit in hits.items():
            engine_hits[name] += int(hit)

        merged = merge_profiles(profiles)
        items.append(
            EvaluationItem(
                text=text,
                engine_hits=hits,
                ensemble_hit=merged.get(expected, 0.0) > threshold,
                mismatch=is_mismatch(merged, expected, threshold),
                merged=merged,
            )
        )

    return EvaluationReport(
        expected=expected,
        threshold=threshold,
        total=len(texts),
        engine_hits=engine_hits,
        ensemble_hits=sum(item.ensemble_hit for item in items),
        mismatches=sum(item.mismatch for item in items),
        items=items,
    )


def _recognizes(profile: DetectionProfile, expected: str, threshold: float) -> bool:
    return any(
        entry.code == expected and entry.percent > threshold
        for entry in profile.entries
    )
