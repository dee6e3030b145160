from unittest.mock import patch

import pytest

from langensemble import (
    a_detect_all,
    a_detect_mismatches,
    a_detect_with_one_engine,
    configure_ensemble,
    detect_all,
    detect_mismatches,
    detect_with_one_engine,
)
from langensemble.core import api
from langensemble.core.orchestrator import EnsembleDetector
from langensemble.errors import ConfigurationError, UnknownEngineError


@pytest.fixture
def fake_ensemble(make_detector):
    cld = make_detector("cld", {"ru text": [("ru", 95)], "en text": [("en", 92)]})
    ld = make_detector("ld", {"ru text": [("ru", 80), ("uk", 20)]})
    ensemble = EnsembleDetector([cld, ld])
    configure_ensemble(ensemble)
    return ensemble


def test_detect_all_uses_configured_ensemble(fake_ensemble):
    merged = detect_all(["ru text", "en text"])

    assert [m.scores for m in merged] == [{"ru": 95.0, "uk": 20.0}, {"en": 92.0}]


def test_detect_mismatches(fake_ensemble):
    assert detect_mismatches(["ru text", "en text", "???"], "ru", 75) == [
        False,
        True,
        False,
    ]


def test_detect_with_one_engine(fake_ensemble):
    profiles = detect_with_one_engine(["ru text"], "ld")

    assert profiles[0].codes == ["ru", "uk"]


def test_detect_with_one_engine_unknown(fake_ensemble):
    with pytest.raises(UnknownEngineError):
        detect_with_one_engine(["ru text"], "franc")


@pytest.mark.asyncio
async def test_async_functions(fake_ensemble):
    assert await a_detect_mismatches(["ru text", "en text"], "ru") == [False, True]
    assert (await a_detect_all(["en text"]))[0].best == "en"
    assert (await a_detect_with_one_engine(["en text"], "cld"))[0].codes == ["en"]


def test_default_ensemble_is_built_lazily_once(make_detector, monkeypatch):
    """The default ensemble is created on first use and then reused."""
    monkeypatch.delenv("LANGENSEMBLE_CONFIG", raising=False)

    with patch(
        "langensemble.core.orchestrator.get_default_detectors",
        return_value=[make_detector("cld")],
    ) as mock_defaults:
        first = api.get_ensemble()
        second = api.get_ensemble()

    assert first is second
    mock_defaults.assert_called_once_with()


def test_default_ensemble_reads_config_from_env(make_detector, monkeypatch, tmp_path):
    """LANGENSEMBLE_CONFIG points the default ensemble at a YAML file."""
    config_file = tmp_path / "ensemble.yaml"
    config_file.write_text('version: "1.0"\nengines: [ld]\nmax_workers: 4\n')
    monkeypatch.setenv("LANGENSEMBLE_CONFIG", str(config_file))

    with patch(
        "langensemble.core.orchestrator.get_default_detectors",
        return_value=[make_detector("ld")],
    ) as mock_defaults:
        ensemble = api.get_ensemble()

    (config,), _ = mock_defaults.call_args
    assert [e.value for e in config.engines] == ["ld"]
    assert ensemble.max_workers == 4


def test_default_ensemble_with_missing_config_file(monkeypatch, tmp_path):
    monkeypatch.setenv("LANGENSEMBLE_CONFIG", str(tmp_path / "missing.yaml"))

    with pytest.raises(ConfigurationError):
        api.get_ensemble()
