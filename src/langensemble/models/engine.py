from enum import Enum


class Engine(str, Enum):
    """The built-in detection engines an ensemble can be assembled from."""

    CLD = "cld"  # Compact Language Detector 2 (pycld2)
    LANGUAGE_DETECT = "ld"  # langdetect
    FRANC = "franc"  # Rank-only detection (lingua), single best guess

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]
