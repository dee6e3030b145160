import pytest

from langensemble.core.defaults import build_detector, get_default_detectors
from langensemble.detectors.cld import CLDDetector
from langensemble.detectors.franc import FrancDetector
from langensemble.detectors.ld import LanguageDetectDetector
from langensemble.errors import ConfigurationError
from langensemble.models.config import EnsembleConfig
from langensemble.models.engine import Engine


@pytest.fixture
def engines_available(mocker):
    """Pretend every engine library is installed without loading any of them."""
    mocker.patch("langensemble.detectors.cld.HAS_CLD2", True)
    mocker.patch("langensemble.detectors.ld.HAS_LANGDETECT", True)
    mocker.patch("langensemble.detectors.ld.DetectorFactory")
    mocker.patch("langensemble.detectors.franc.HAS_LINGUA", True)
    return mocker.patch("langensemble.detectors.franc.LanguageDetectorBuilder")


def test_default_detectors_are_the_three_engines(engines_available):
    detectors = get_default_detectors()

    assert [d.name for d in detectors] == ["cld", "ld", "franc"]
    assert isinstance(detectors[0], CLDDetector)
    assert isinstance(detectors[1], LanguageDetectDetector)
    assert isinstance(detectors[2], FrancDetector)


def test_default_detectors_follow_config(engines_available):
    config = EnsembleConfig(
        engines=[Engine.LANGUAGE_DETECT, Engine.CLD],
        cld_best_effort=True,
        ld_max_results=1,
    )

    ld, cld = get_default_detectors(config)

    assert ld.max_results == 1
    assert cld.best_effort is True


def test_build_detector_passes_franc_languages(mocker, engines_available):
    mock_enum = mocker.patch(
        "langensemble.detectors.franc.IsoCode639_1", spec=["RU", "UK"]
    )
    mock_enum.RU = "ENUM_RU"
    mock_enum.UK = "ENUM_UK"

    detector = build_detector(
        Engine.FRANC, EnsembleConfig(franc_languages=["ru", "uk"])
    )

    assert detector.languages == ["ru", "uk"]
    engines_available.from_iso_codes_639_1.assert_called_once_with(
        "ENUM_RU", "ENUM_UK"
    )


def test_missing_engine_library_fails_loudly(mocker, engines_available):
    """A default engine that cannot be loaded is a setup error."""
    mocker.patch("langensemble.detectors.cld.HAS_CLD2", False)

    with pytest.raises(ConfigurationError) as exc:
        get_default_detectors()

    assert "pycld2" in str(exc.value)
