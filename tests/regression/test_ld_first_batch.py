"""
The first threaded batch a fresh langdetect adapter runs must give the same
answers as every later batch. langdetect's profiles are loaded once per adapter
before any worker thread starts.
"""

import importlib.util

import pytest

from langensemble.core.batch import a_run_batch, run_batch
from langensemble.core.orchestrator import EnsembleDetector
from langensemble.detectors.ld import LanguageDetectDetector

HAS_LANGDETECT = importlib.util.find_spec("langdetect") is not None

pytestmark = pytest.mark.skipif(not HAS_LANGDETECT, reason="langdetect not installed")

EN_TEXT = "The quick brown fox jumps over the lazy dog near the river bank"
BATCH = [EN_TEXT] * 32


def test_first_threaded_batch_matches_second():
    detector = LanguageDetectDetector()

    first = run_batch(detector, BATCH, max_workers=32)
    second = run_batch(detector, BATCH, max_workers=32)

    assert {p.top.code for p in first} == {"en"}
    assert first == second


def test_first_threaded_mismatch_verdicts_are_stable():
    ensemble = EnsembleDetector([LanguageDetectDetector()], max_workers=32)

    first = ensemble.detect_mismatches(BATCH, "en", 75)
    second = ensemble.detect_mismatches(BATCH, "en", 75)

    assert first == [False] * 32
    assert second == first


@pytest.mark.asyncio
async def test_first_async_batch_matches_second():
    detector = LanguageDetectDetector()

    first = await a_run_batch(detector, BATCH)
    second = await a_run_batch(detector, BATCH)

    assert {p.top.code for p in first} == {"en"}
    assert first == second
