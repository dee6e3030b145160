from collections.abc import Callable

from langensemble.detectors.base import BaseDetector
from langensemble.detectors.cld import CLDDetector
from langensemble.detectors.franc import FrancDetector
from langensemble.detectors.ld import LanguageDetectDetector
from langensemble.models.config import EnsembleConfig
from langensemble.models.engine import Engine
from langensemble.utils.logger import get_logger

logger = get_logger()

DetectorBuilder = Callable[[EnsembleConfig], BaseDetector]

# Built-in engines. New engines are added here, not in a dispatch switch.
ENGINE_FACTORIES: dict[Engine, DetectorBuilder] = {
    Engine.CLD: lambda cfg: CLDDetector(best_effort=cfg.cld_best_effort),
    Engine.LANGUAGE_DETECT: lambda cfg: LanguageDetectDetector(
        max_results=cfg.ld_max_results
    ),
    Engine.FRANC: lambda cfg: FrancDetector(languages=cfg.franc_languages),
}


def build_detector(engine: Engine, config: EnsembleConfig | None = None) -> BaseDetector:
    """
    Instantiates the adapter for a built-in engine.

    Args:
        engine: The engine to build.
        config: Engine options. None uses the defaults.

    Raises:
        ConfigurationError: If the engine's library is not installed.
    """
    return ENGINE_FACTORIES[engine](config or EnsembleConfig())


def get_default_detectors(config: EnsembleConfig | None = None) -> list[BaseDetector]:
    """
    Returns the standard ensemble: CLD2, langdetect and the rank-only engine,
    or the engines listed in `config`.
    """
    config = config or EnsembleConfig()
    detectors = [build_detector(engine, config) for engine in config.engines]
    logger.debug(f"Loaded default detectors: {[d.name for d in detectors]}")
    return detectors
