from collections.abc import Iterator, Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from langensemble.constants import MAX_PERCENT, MIN_PERCENT

LANGUAGE_CODE_PATTERN = r"^[a-z]{2}$"


class DetectionEntry(BaseModel):
    """
    One engine's belief that a text is written in a given language.

    Attributes:
        code: Two-letter lowercase language code (e.g. 'ru', 'en').
        percent: Confidence in percent. Each engine defines its own scale, so values
            from different engines are comparable only loosely.
    """

    code: str = Field(
        ..., pattern=LANGUAGE_CODE_PATTERN, description="ISO 639-1 language code."
    )
    percent: float = Field(
        ...,
        ge=MIN_PERCENT,
        le=MAX_PERCENT,
        description="Confidence of the detection (0 - 100).",
    )

    model_config = ConfigDict(frozen=True)


class DetectionProfile(BaseModel):
    """
    Ranked detections for a single text from a single engine.

    The order of `entries` is the engine's own ranking (best first). An empty profile
    means the engine had no usable answer for this text; it is not an error.

    Attributes:
        engine: Id of the engine that produced the profile (e.g. 'cld').
        entries: The detections, best first.
    """

    engine: str = Field(..., description="Engine that produced this profile.")
    entries: tuple[DetectionEntry, ...] = Field(
        default_factory=tuple, description="Detections ordered by engine rank."
    )

    model_config = ConfigDict(frozen=True)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    @property
    def top(self) -> DetectionEntry | None:
        """The engine's best guess, or None if it had none."""
        return self.entries[0] if self.entries else None

    @property
    def codes(self) -> list[str]:
        return [entry.code for entry in self.entries]


class MergedProfile(BaseModel):
    """
    Best confidence per language code for one text, across all engines.

    Every code appears exactly once. Key order carries no meaning; two merged
    profiles compare equal when their scores are equal.

    Attributes:
        scores: Read-only mapping of language code to the highest percent any
            engine reported.
    """

    scores: Mapping[str, float] = Field(default_factory=dict, validate_default=True)

    model_config = ConfigDict(frozen=True)

    @field_validator("scores", mode="after")
    @classmethod
    def freeze_scores(cls, v: Mapping[str, float]) -> Mapping[str, float]:
        # frozen=True only blocks reassignment; the mapping itself must not change.
        return MappingProxyType(dict(v))

    @field_serializer("scores")
    def dump_scores(self, v: Mapping[str, float]) -> dict[str, float]:
        return dict(v)

    def __len__(self) -> int:
        return len(self.scores)

    def __contains__(self, code: object) -> bool:
        return code in self.scores

    def __getitem__(self, code: str) -> float:
        return self.scores[code]

    def get(self, code: str, default: float | None = None) -> float | None:
        return self.scores.get(code, default)

    def items(self) -> Iterator[tuple[str, float]]:
        return iter(self.scores.items())

    @property
    def codes(self) -> list[str]:
        return sorted(self.scores)

    @property
    def best(self) -> str | None:
        """
        The highest scoring code. Ties resolve alphabetically so the answer does
        not depend on engine order. None for an empty profile.
        """
        if not self.scores:
            return None
        return min(self.scores, key=lambda code: (-self.scores[code], code))

    def above(self, threshold: float) -> dict[str, float]:
        """Entries whose confidence is strictly greater than `threshold`."""
        return {code: pct for code, pct in self.scores.items() if pct > threshold}
