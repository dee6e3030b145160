import os
from collections.abc import Sequence

from langensemble.constants import CONFIG_ENV_VAR, DEFAULT_THRESHOLD
from langensemble.core.config import ConfigLoader
from langensemble.core.orchestrator import EnsembleDetector
from langensemble.models.detection import DetectionProfile, MergedProfile
from langensemble.models.engine import Engine
from langensemble.utils.logger import get_logger

logger = get_logger()

# Process-wide ensemble used by the module-level functions. Built on first use.
_ensemble: EnsembleDetector | None = None


def configure_ensemble(ensemble: EnsembleDetector | None) -> None:
    """
    Replaces the ensemble used by the module-level functions.

    Args:
        ensemble: The ensemble to use, or None to rebuild the default one lazily
            on the next call.
    """
    global _ensemble
    _ensemble = ensemble


def get_ensemble() -> EnsembleDetector:
    """
    Returns the process-wide ensemble, building it on first use.

    If the LANGENSEMBLE_CONFIG environment variable points to a YAML file, the
    ensemble is built from it. Otherwise the standard three engines are loaded.
    """
    global _ensemble
    if _ensemble is None:
        config_path = os.getenv(CONFIG_ENV_VAR)
        if config_path:
            logger.debug(f"Building ensemble from config '{config_path}'")
            _ensemble = EnsembleDetector.from_config(ConfigLoader.load(config_path))
        else:
            _ensemble = EnsembleDetector()
    return _ensemble


def detect_with_one_engine(
    inputs: Sequence[str], engine: Engine | str
) -> list[DetectionProfile]:
    """
    Detects the language of each text with a single engine.

    Args:
        inputs: The texts to analyze.
        engine: Engine member or id ('cld', 'ld', 'franc').

    Returns:
        One DetectionProfile per input, in input order.

    Raises:
        UnknownEngineError: If the engine is not registered.
    """
    return get_ensemble().detect_with_one_engine(inputs, engine)


def detect_all(inputs: Sequence[str]) -> list[MergedProfile]:
    """
    Detects the language of each text with every engine and merges the results.

    Returns:
        One MergedProfile per input, in input order.
    """
    return get_ensemble().detect_all(inputs)


def detect_mismatches(
    inputs: Sequence[str], expected: str, threshold: float = DEFAULT_THRESHOLD
) -> list[bool]:
    """
    Flags texts that are likely not written in `expected`.

    Args:
        inputs: The texts to analyze.
        expected: Two-letter code of the expected language.
        threshold: Minimum percent (exclusive) for a detection to count.

    Returns:
        One verdict per input, in input order. True means mismatch.

    Examples:
        >>> from langensemble import detect_mismatches
        >>> detect_mismatches(["ГДЕ Я?", "Where am I?"], expected="ru")
        [False, True]
    """
    return get_ensemble().detect_mismatches(inputs, expected, threshold)


async def a_detect_with_one_engine(
    inputs: Sequence[str], engine: Engine | str
) -> list[DetectionProfile]:
    """Async version of detect_with_one_engine."""
    return await get_ensemble().a_detect_with_one_engine(inputs, engine)


async def a_detect_all(inputs: Sequence[str]) -> list[MergedProfile]:
    """Async version of detect_all."""
    return await get_ensemble().a_detect_all(inputs)


async def a_detect_mismatches(
    inputs: Sequence[str], expected: str, threshold: float = DEFAULT_THRESHOLD
) -> list[bool]:
    """
    Asynchronously flags texts that are likely not written in `expected`.

    See `detect_mismatches()` for full documentation. Detection calls run in worker
    threads, so the event loop stays responsive.
    """
    return await get_ensemble().a_detect_mismatches(inputs, expected, threshold)
