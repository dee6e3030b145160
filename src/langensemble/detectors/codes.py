import re

from langcodes import LanguageTagError, standardize_tag

from langensemble.constants import UNKNOWN_CODES
from langensemble.utils.logger import get_logger

logger = get_logger()

_TWO_LETTER = re.compile(r"^[a-z]{2}$")


def normalize_language_code(raw: object) -> str | None:
    """
    Maps an engine's raw language code into the two-letter lowercase code space.

    Accepts ISO 639-1 codes, ISO 639-2/639-3 codes ('rus', 'fre', 'cmn') and
    region or script tagged codes ('zh-Hant', 'zh-cn', 'pt_BR'). Deprecated codes
    are replaced by their current form ('iw' -> 'he') and individual languages
    collapse into their macrolanguage ('cmn' -> 'zh').

    Args:
        raw: The code as reported by the engine.

    Returns:
        The normalized code, or None if the code is an "unknown" sentinel, has no
        two-letter equivalent, or is not a language tag at all. Callers drop None.
    """
    if not isinstance(raw, str):
        return None

    tag = raw.strip().replace("_", "-").lower()
    if not tag or tag.split("-")[0] in UNKNOWN_CODES:
        return None

    try:
        standardized = standardize_tag(tag, macro=True)
    except (LanguageTagError, ValueError):
        logger.debug(f"Dropping malformed language code '{raw}'")
        return None

    primary = standardized.split("-")[0].lower()
    if primary in UNKNOWN_CODES or not _TWO_LETTER.match(primary):
        logger.debug(f"No two-letter mapping for language code '{raw}'. Dropping.")
        return None

    return primary
