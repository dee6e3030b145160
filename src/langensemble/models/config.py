from pydantic import BaseModel, ConfigDict, Field, field_validator

from langensemble.constants import DEFAULT_THRESHOLD, MAX_PERCENT, MIN_PERCENT
from langensemble.models.detection import LANGUAGE_CODE_PATTERN
from langensemble.models.engine import Engine


class EnsembleConfig(BaseModel):
    """
    Declarative configuration of an ensemble.

    Usually loaded from YAML via `ConfigLoader`, but can be built directly.

    Attributes:
        version: Schema version of the configuration file.
        engines: Which built-in engines to run, in order. Must be non-empty and unique.
        expected_language: Default expected language for mismatch checks.
        threshold: Default decision threshold in percent.
        max_workers: Thread pool size for batch detection. None uses the default.
        cld_best_effort: Ask CLD2 for a best-effort answer on very short text.
        ld_max_results: Keep at most this many ranked languages from langdetect.
        franc_languages: Restrict the rank-only engine to these ISO 639-1 codes.
    """

    version: str = "1.0"
    engines: list[Engine] = Field(default_factory=lambda: list(Engine), min_length=1)
    expected_language: str | None = Field(
        None, pattern=LANGUAGE_CODE_PATTERN, description="e.g. 'ru'"
    )
    threshold: float = Field(DEFAULT_THRESHOLD, ge=MIN_PERCENT, le=MAX_PERCENT)
    max_workers: int | None = Field(None, gt=0)

    cld_best_effort: bool = False
    ld_max_results: int | None = Field(None, gt=0)
    franc_languages: list[str] | None = None

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("expected_language", mode="before")
    @classmethod
    def lowercase_language(cls, v: object) -> object:
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("engines")
    @classmethod
    def unique_engines(cls, v: list[Engine]) -> list[Engine]:
        if len(set(v)) != len(v):
            raise ValueError("engines must not contain duplicates")
        return v
