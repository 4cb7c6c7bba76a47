"""API endpoint, query keys and supported option values."""

from __future__ import annotations

from typing import Final

# API endpoint
SCHEME: Final = "https"
HOST: Final = "api.darksky.net"
BASE_PATH: Final = "forecast"

# Query parameter keys
LANGUAGE_KEY: Final = "lang"
EXCLUDE_KEY: Final = "exclude"
EXTEND_KEY: Final = "extend"
EXTEND_VALUE: Final = "hourly"
UNITS_KEY: Final = "units"

# Request headers sent with every query
DEFAULT_HEADERS: Final = {
    "Accept-Encoding": "gzip",
    "Accept": "application/json",
}

DEFAULT_TIMEOUT: Final = 10.0

# ── Exclude sections ────────────────────────────────────────────────────────
EX_CURRENTLY: Final = "currently"
EX_MINUTELY: Final = "minutely"
EX_HOURLY: Final = "hourly"
EX_DAILY: Final = "daily"
EX_ALERTS: Final = "alerts"
EX_FLAGS: Final = "flags"

SUPPORTED_EXCLUDES: Final[frozenset[str]] = frozenset(
    {EX_CURRENTLY, EX_MINUTELY, EX_HOURLY, EX_DAILY, EX_ALERTS, EX_FLAGS}
)

# ── Languages ───────────────────────────────────────────────────────────────
# Summaries are returned in the requested language; units inside the
# summary follow the units parameter.
LANG_AR: Final = "ar"  # Arabic
LANG_AZ: Final = "az"  # Azerbaijani
LANG_BE: Final = "be"  # Belarusian
LANG_BG: Final = "bg"  # Bulgarian
LANG_BS: Final = "bs"  # Bosnian
LANG_CA: Final = "ca"  # Catalan
LANG_CS: Final = "cs"  # Czech
LANG_DA: Final = "da"  # Danish
LANG_DE: Final = "de"  # German
LANG_EL: Final = "el"  # Greek
LANG_EN: Final = "en"  # English (default)
LANG_ES: Final = "es"  # Spanish
LANG_ET: Final = "et"  # Estonian
LANG_FI: Final = "fi"  # Finnish
LANG_FR: Final = "fr"  # French
LANG_HE: Final = "he"  # Hebrew
LANG_HR: Final = "hr"  # Croatian
LANG_HU: Final = "hu"  # Hungarian
LANG_ID: Final = "id"  # Indonesian
LANG_IS: Final = "is"  # Icelandic
LANG_IT: Final = "it"  # Italian
LANG_JA: Final = "ja"  # Japanese
LANG_KA: Final = "ka"  # Georgian
LANG_KO: Final = "ko"  # Korean
LANG_KW: Final = "kw"  # Cornish
LANG_LV: Final = "lv"  # Latvian
LANG_NB: Final = "nb"  # Norwegian Bokmål
LANG_NL: Final = "nl"  # Dutch
LANG_NO: Final = "no"  # Norwegian Bokmål (alias for nb)
LANG_PL: Final = "pl"  # Polish
LANG_PT: Final = "pt"  # Portuguese
LANG_RO: Final = "ro"  # Romanian
LANG_RU: Final = "ru"  # Russian
LANG_SK: Final = "sk"  # Slovak
LANG_SL: Final = "sl"  # Slovenian
LANG_SR: Final = "sr"  # Serbian
LANG_SV: Final = "sv"  # Swedish
LANG_TE: Final = "te"  # Tetum
LANG_TR: Final = "tr"  # Turkish
LANG_UK: Final = "uk"  # Ukrainian
LANG_X_PIG_LATIN: Final = "x-pig-latin"  # Igpay Atinlay
LANG_ZH: Final = "zh"  # simplified Chinese
LANG_ZH_TW: Final = "zh-tw"  # traditional Chinese

SUPPORTED_LANGUAGES: Final[frozenset[str]] = frozenset(
    {
        LANG_AR,
        LANG_AZ,
        LANG_BE,
        LANG_BG,
        LANG_BS,
        LANG_CA,
        LANG_CS,
        LANG_DA,
        LANG_DE,
        LANG_EL,
        LANG_EN,
        LANG_ES,
        LANG_ET,
        LANG_FI,
        LANG_FR,
        LANG_HE,
        LANG_HR,
        LANG_HU,
        LANG_ID,
        LANG_IS,
        LANG_IT,
        LANG_JA,
        LANG_KA,
        LANG_KO,
        LANG_KW,
        LANG_LV,
        LANG_NB,
        LANG_NL,
        LANG_NO,
        LANG_PL,
        LANG_PT,
        LANG_RO,
        LANG_RU,
        LANG_SK,
        LANG_SL,
        LANG_SR,
        LANG_SV,
        LANG_TE,
        LANG_TR,
        LANG_UK,
        LANG_X_PIG_LATIN,
        LANG_ZH,
        LANG_ZH_TW,
    }
)

# ── Units ───────────────────────────────────────────────────────────────────
UNIT_AUTO: Final = "auto"  # selected from the geographic location
UNIT_CA: Final = "ca"  # si, but wind speed and gust in km/h
UNIT_UK2: Final = "uk2"  # si, but storm distance and visibility in miles, wind in mph
UNIT_US: Final = "us"  # imperial (default)
UNIT_SI: Final = "si"

SUPPORTED_UNITS: Final[frozenset[str]] = frozenset(
    {UNIT_AUTO, UNIT_CA, UNIT_UK2, UNIT_US, UNIT_SI}
)
