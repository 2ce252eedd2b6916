"""Display formatters and lenient parsers for form input."""

import re
from typing import Optional, Union

# ──────────────────────────────────────────────────────────────────────
# LOCALES
# ──────────────────────────────────────────────────────────────────────

LOCALE_CONFIGS: dict[str, dict] = {
    "en": {
        "name": "English",
        "native_name": "English",
        "currency": "USD",
        "decimal": ".",
        "thousands": ",",
    },
    "zh": {
        "name": "Chinese",
        "native_name": "中文",
        "currency": "CNY",
        "decimal": ".",
        "thousands": ",",
    },
}

DEFAULT_LOCALE = "en"

CURRENCY_SYMBOLS: dict[str, str] = {
    "USD": "$",
    "CNY": "¥",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "HKD": "HK$",
}

_US_PHONE_RE = re.compile(r"([0-9]{3})([0-9]{3})([0-9]{4})")
_NUMBER_RE = re.compile(r"-?[0-9]*\.?[0-9]*")


def get_locale_config(locale: Optional[str]) -> dict:
    """Look up a locale, accepting region tags like 'en-US' or 'zh_CN'."""
    if locale:
        language = re.split(r"[-_]", locale, maxsplit=1)[0].lower()
        if language in LOCALE_CONFIGS:
            return LOCALE_CONFIGS[language]
    return LOCALE_CONFIGS[DEFAULT_LOCALE]


def format_phone_number(value: str) -> str:
    """Render a 10-digit number as (XXX) XXX-XXXX; anything else is returned as-is."""
    cleaned = re.sub(r"[^0-9]", "", value)
    match = _US_PHONE_RE.fullmatch(cleaned)
    if match:
        return f"({match.group(1)}) {match.group(2)}-{match.group(3)}"
    return value


def format_currency(
    value: Union[int, float],
    locale: Optional[str] = DEFAULT_LOCALE,
    currency: Optional[str] = None,
) -> str:
    """Format an amount with two decimals and locale grouping.

    Args:
        value: Amount to format
        locale: Locale code; unknown locales fall back to English
        currency: ISO 4217 code; defaults to the locale's currency

    Returns:
        e.g. "$1,234.56" for en/USD, "¥1,234.56" for zh/CNY
    """
    config = get_locale_config(locale)
    code = (currency or config["currency"]).upper()

    grouped = f"{abs(value):,.2f}"
    if config["thousands"] != "," or config["decimal"] != ".":
        grouped = (
            grouped.replace(",", "\0")
            .replace(".", config["decimal"])
            .replace("\0", config["thousands"])
        )

    symbol = CURRENCY_SYMBOLS.get(code)
    amount = f"{symbol}{grouped}" if symbol else f"{code} {grouped}"

    return f"-{amount}" if value < 0 else amount


def parse_number(value: str) -> Optional[float]:
    """Parse an optionally signed decimal string.

    Returns None (never raises) for anything else, including "", "-" and ".".
    """
    text = value.strip()
    if not text or text == "-" or not _NUMBER_RE.fullmatch(text):
        return None

    try:
        return float(text)
    except ValueError:
        # "." and "-." satisfy the grammar but carry no digits
        return None
