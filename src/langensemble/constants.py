# Sentinel for "language could not be identified". Never stored in a profile.
UNKNOWN_LANGUAGE = "un"

# Raw engine codes that mean "no language" rather than a real language.
UNKNOWN_CODES = frozenset({"un", "und", "xx", "xxx", "zxx", "mul"})

DEFAULT_THRESHOLD = 75.0

# Confidence reported by rank-only engines that expose no score.
RANK_ONLY_PERCENT = 100.0

MIN_PERCENT = 0.0
MAX_PERCENT = 100.0

CONFIG_ENV_VAR = "LANGENSEMBLE_CONFIG"
SUPPORTED_CONFIG_VERSIONS = ("1.0",)
