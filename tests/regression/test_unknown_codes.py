"""
Every adapter must treat unknown and unmappable language codes the same way:
they are dropped, never kept as an 'un' entry.
"""

from types import SimpleNamespace

import pytest

from langensemble.constants import UNKNOWN_LANGUAGE
from langensemble.core.orchestrator import EnsembleDetector
from langensemble.detectors.cld import CLDDetector
from langensemble.detectors.franc import FrancDetector
from langensemble.detectors.ld import LanguageDetectDetector


@pytest.fixture
def unknown_everywhere(mocker):
    """All three engines answer with codes that have no two-letter form."""
    mocker.patch("langensemble.detectors.cld.HAS_CLD2", True)
    mocker.patch("langensemble.detectors.ld.HAS_LANGDETECT", True)
    mocker.patch("langensemble.detectors.franc.HAS_LINGUA", True)

    cld2 = mocker.patch("langensemble.detectors.cld.cld2")
    cld2.detect.return_value = (
        False,
        10,
        (("Unknown", "un", 60, 10.0), ("X_Inherited", "xxx", 40, 5.0)),
    )

    mocker.patch("langensemble.detectors.ld.PROFILES_DIRECTORY", "/profiles")
    factory = mocker.patch("langensemble.detectors.ld.DetectorFactory").return_value
    factory.create.return_value.get_probabilities.return_value = [
        SimpleNamespace(lang="und", prob=0.9),
        SimpleNamespace(lang="haw", prob=0.1),
    ]

    builder = mocker.patch("langensemble.detectors.franc.LanguageDetectorBuilder")
    language = mocker.MagicMock()
    language.iso_code_639_3.name = "CEB"
    lingua_detector = builder.from_all_languages.return_value.build.return_value
    lingua_detector.detect_language_of.return_value = language

    return [CLDDetector(), LanguageDetectDetector(), FrancDetector()]


def test_each_adapter_drops_unknown_codes(unknown_everywhere):
    for detector in unknown_everywhere:
        profile = detector.detect("rfhmjкарточку")
        assert profile.is_empty, f"{detector.name} kept an unknown code"


def test_merged_profile_never_contains_unknown_sentinel(unknown_everywhere):
    ensemble = EnsembleDetector(unknown_everywhere)

    merged = ensemble.detect_all(["rfhmjкарточку", "TORONTOTOKYO?"])

    assert all(UNKNOWN_LANGUAGE not in m for m in merged)
    assert all(len(m) == 0 for m in merged)


def test_unknown_only_input_is_not_a_mismatch(unknown_everywhere):
    """Nothing identifiable means nothing contradicts the expected language."""
    ensemble = EnsembleDetector(unknown_everywhere)

    assert ensemble.detect_mismatches(["rfhmjкарточку"], "ru", 75) == [False]
