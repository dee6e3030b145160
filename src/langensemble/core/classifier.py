import math
import re
from numbers import Real

from langensemble.constants import MAX_PERCENT, MIN_PERCENT
from langensemble.errors import ConfigurationError
from langensemble.models.detection import MergedProfile

_EXPECTED_CODE = re.compile(r"^[a-z]{2}$")


def is_mismatch(merged: MergedProfile, expected: str, threshold: float) -> bool:
    """
    Decides whether a text's detected languages contradict the expected language.

    Only detections strictly above `threshold` count. The text is a mismatch when
    some other language clears the threshold AND the expected language does not.
    If both clear it, the text is ambiguous (shared vocabulary, loanwords,
    transliteration) and accepted.

    Args:
        merged: Best confidence per code for the text.
        expected: The two-letter code the text should be written in.
        threshold: Minimum percent (exclusive) for a detection to be decisive.

    Returns:
        True if the text is likely NOT in the expected language.

    Raises:
        ConfigurationError: If `expected` or `threshold` is invalid.
    """
    expected = validate_expected_language(expected)
    threshold = validate_threshold(threshold)

    expected_match = False
    unexpected_match = False
    for code, percent in merged.items():
        if percent > threshold:
            if code == expected:
                expected_match = True
            else:
                unexpected_match = True

    return unexpected_match and not expected_match


def validate_expected_language(code: str) -> str:
    """
    Returns the case-folded expected language code.

    Raises:
        ConfigurationError: If the code is not a two-letter alphabetic string.
    """
    if not isinstance(code, str):
        raise ConfigurationError(
            f"Expected language must be a string, got {type(code).__name__}."
        )
    normalized = code.strip().lower()
    if not _EXPECTED_CODE.match(normalized):
        raise ConfigurationError(
            f"Expected language must be a two-letter code (e.g. 'ru'), got '{code}'."
        )
    return normalized


def validate_threshold(value: float) -> float:
    """
    Returns the threshold as float.

    Raises:
        ConfigurationError: If the value is not a real number in [0, 100].
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ConfigurationError(
            f"Threshold must be a number, got {type(value).__name__}."
        )
    threshold = float(value)
    if math.isnan(threshold) or not MIN_PERCENT <= threshold <= MAX_PERCENT:
        raise ConfigurationError(
            f"Threshold must be between {MIN_PERCENT:g} and {MAX_PERCENT:g}, "
            f"got {value}."
        )
    return threshold
