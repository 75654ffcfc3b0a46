"""Shared constants for ARBLexEngine.

This module centralizes the fixed tables and limits used across the resource,
model and syntax packages. Placing them here avoids circular imports and keeps
a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for the template parser
- File conventions: Template file name and ARB file discovery
- Format whitelists: Date and number formatter names a code generator may emit
- Languages: ISO 639-1 codes recognized in file names

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # File conventions
    "DEFAULT_TEMPLATE_ARB_FILE",
    "ARB_FILE_PATTERN",
    "ARB_LOCALE_KEY",
    "ATTRIBUTE_PREFIX",
    # Format whitelists
    "VALID_DATE_FORMATS",
    "VALID_NUMBER_FORMATS",
    "NUMBER_FORMATS_WITH_NAMED_PARAMETERS",
    # Plural categories
    "PLURAL_CATEGORIES",
    "OTHER_CASE",
    # Languages
    "ISO_639_1_LANGUAGES",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting of plural/select expressions inside one message template.
# Real messages nest two or three levels at most; anything deeper is treated
# as malformed input rather than recursed into.
MAX_DEPTH: int = 100

# ============================================================================
# FILE CONVENTIONS
# ============================================================================

DEFAULT_TEMPLATE_ARB_FILE: str = "app_en.arb"

# Matched against the POSIX form of each candidate path in a directory.
ARB_FILE_PATTERN: str = r"(\w+)\.arb$"

# Top-level key declaring a file's locale explicitly.
ARB_LOCALE_KEY: str = "@@locale"

# Keys starting with this prefix hold metadata, not translatable resources.
ATTRIBUTE_PREFIX: str = "@"

# ============================================================================
# FORMAT WHITELISTS
# ============================================================================
#
# Placeholder "format" values name constructors of the target platform's
# DateFormat / NumberFormat classes. Generated code calls those constructors
# directly, so only names that exist are accepted.

VALID_DATE_FORMATS: frozenset[str] = frozenset({
    "d",
    "E",
    "EEEE",
    "LLL",
    "LLLL",
    "M",
    "Md",
    "MEd",
    "MMM",
    "MMMd",
    "MMMEd",
    "MMMM",
    "MMMMd",
    "MMMMEEEEd",
    "QQQ",
    "QQQQ",
    "y",
    "yM",
    "yMd",
    "yMEd",
    "yMMM",
    "yMMMd",
    "yMMMEd",
    "yMMMM",
    "yMMMMd",
    "yMMMMEEEEd",
    "yQQQ",
    "yQQQQ",
    "H",
    "Hm",
    "Hms",
    "j",
    "jm",
    "jms",
    "jmv",
    "jmz",
    "jv",
    "jz",
    "m",
    "ms",
    "s",
})

VALID_NUMBER_FORMATS: frozenset[str] = frozenset({
    "compact",
    "compactCurrency",
    "compactSimpleCurrency",
    "compactLong",
    "currency",
    "decimalPattern",
    "decimalPercentPattern",
    "percentPattern",
    "scientificPattern",
    "simpleCurrency",
})

# Number formatter constructors taking named rather than positional
# arguments (e.g. ``compact(locale: ...)`` vs ``scientificPattern(locale)``).
NUMBER_FORMATS_WITH_NAMED_PARAMETERS: frozenset[str] = frozenset({
    "compact",
    "compactCurrency",
    "compactSimpleCurrency",
    "compactLong",
    "currency",
    "decimalPercentPattern",
    "simpleCurrency",
})

# ============================================================================
# PLURAL CATEGORIES
# ============================================================================

# CLDR plural category keywords accepted as plural case keys (besides =N).
PLURAL_CATEGORIES: frozenset[str] = frozenset({
    "zero", "one", "two", "few", "many", "other",
})

OTHER_CASE: str = "other"

# ============================================================================
# LANGUAGES
# ============================================================================

# ISO 639-1 language codes, plus "fil" and "gsw" which appear in real
# Android/iOS resource sets. A file name suffix only counts as a locale when
# its language is listed here.
ISO_639_1_LANGUAGES: frozenset[str] = frozenset({
    "aa", "ab", "ae", "af", "ak", "am", "an", "ar", "as", "av", "ay", "az",
    "ba", "be", "bg", "bh", "bi", "bm", "bn", "bo", "br", "bs",
    "ca", "ce", "ch", "co", "cr", "cs", "cu", "cv", "cy",
    "da", "de", "dv", "dz",
    "ee", "el", "en", "eo", "es", "et", "eu",
    "fa", "ff", "fi", "fil", "fj", "fo", "fr", "fy",
    "ga", "gd", "gl", "gn", "gsw", "gu", "gv",
    "ha", "he", "hi", "ho", "hr", "ht", "hu", "hy", "hz",
    "ia", "id", "ie", "ig", "ii", "ik", "io", "is", "it", "iu",
    "ja", "jv",
    "ka", "kg", "ki", "kj", "kk", "kl", "km", "kn", "ko", "kr", "ks", "ku",
    "kv", "kw", "ky",
    "la", "lb", "lg", "li", "ln", "lo", "lt", "lu", "lv",
    "mg", "mh", "mi", "mk", "ml", "mn", "mr", "ms", "mt", "my",
    "na", "nb", "nd", "ne", "ng", "nl", "nn", "no", "nr", "nv", "ny",
    "oc", "oj", "om", "or", "os",
    "pa", "pi", "pl", "ps", "pt",
    "qu",
    "rm", "rn", "ro", "ru", "rw",
    "sa", "sc", "sd", "se", "sg", "si", "sk", "sl", "sm", "sn", "so", "sq",
    "sr", "ss", "st", "su", "sv", "sw",
    "ta", "te", "tg", "th", "ti", "tk", "tl", "tn", "to", "tr", "ts", "tt",
    "tw", "ty",
    "ug", "uk", "ur", "uz",
    "ve", "vi", "vo",
    "wa", "wo",
    "xh",
    "yi", "yo",
    "za", "zh", "zu",
})
