import time
from collections.abc import Iterable

import pytest

from langensemble.core import api
from langensemble.detectors.base import BaseDetector, RawDetection


class StaticDetector(BaseDetector):
    """A detector with canned answers per text. Texts in `fail_on` make it raise."""

    def __init__(
        self,
        name: str,
        answers: dict[str, list[RawDetection]] | None = None,
        fail_on: Iterable[str] = (),
        delays: dict[str, float] | None = None,
    ):
        self.name = name
        self.answers = answers or {}
        self.fail_on = set(fail_on)
        self.delays = delays or {}
        self.calls: list[str] = []

    def _detect(self, text: str) -> Iterable[RawDetection]:
        self.calls.append(text)
        time.sleep(self.delays.get(text, 0))
        if text in self.fail_on:
            raise RuntimeError(f"engine crashed on {text!r}")
        return self.answers.get(text, [])


@pytest.fixture
def make_detector():
    """Factory for detectors with canned answers."""
    return StaticDetector


@pytest.fixture(autouse=True)
def reset_default_ensemble():
    """Reset the process-wide ensemble before and after each test."""
    api.configure_ensemble(None)
    yield
    api.configure_ensemble(None)
