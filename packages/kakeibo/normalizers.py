"""Row and field normalization for Rakuten e-NAVI card statement rows.

Helpers here are total: they never raise on odd input. Key cleanup strips the
byte-order mark some exports leave on the first header, amount parsing turns
anything unparseable into zero, and the usage-date check is purely syntactic.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

# ---------------------------------------------------------------------------
# Column names (as exported by e-NAVI)
# ---------------------------------------------------------------------------

USAGE_DATE_COLUMN = "利用日"
MERCHANT_COLUMN = "利用店名・商品名"
AMOUNT_COLUMN = "利用金額"

# The catch-all total reads the column at this header position. Its name
# changes with the billing month ("8月支払金額", "9月支払金額", ...).
PAYMENT_COLUMN_INDEX = 8
DEFAULT_PAYMENT_COLUMN = "8月支払金額"

_BOM = "\ufeff"
_USAGE_DATE_RE = re.compile(r"[0-9]{4}/[0-9]{2}/[0-9]{2}")
_LEADING_INT_RE = re.compile(r"\s*([+-]?[0-9]+)")


def normalize_key(key: str) -> str:
    return key.replace(_BOM, "").strip()


def normalize_row(row: Mapping[str, str | None]) -> dict[str, str | None]:
    """Return a copy of ``row`` with BOM characters and padding removed from keys.

    Values are passed through untouched and key order is preserved. When two
    raw keys collapse to the same cleaned key, the later column wins.
    """

    return {normalize_key(k): v for k, v in row.items()}


def clean_amount(raw: str | None) -> int:
    """Parse a yen amount such as ``"1,500"`` into an ``int``.

    Thousands separators are removed and the leading signed digit run is
    parsed, so trailing text is ignored (``"1500円"`` → 1500, ``"12.5"`` → 12).
    Missing or non-numeric input yields ``0``.
    """

    s = (raw if raw is not None else "0").replace(",", "")
    m = _LEADING_INT_RE.match(s)
    if m is None:
        return 0
    return int(m.group(1))


def is_usage_date(value: str | None) -> bool:
    """True when ``value`` is exactly ``YYYY/MM/DD`` (no calendar validation)."""

    if not value:
        return False
    return _USAGE_DATE_RE.fullmatch(value) is not None


def payment_column(row: Mapping[str, str | None]) -> str | None:
    """Return the cleaned name of the 9th key of ``row``, if it has one."""

    keys = list(row.keys())
    if len(keys) <= PAYMENT_COLUMN_INDEX:
        return None
    return normalize_key(keys[PAYMENT_COLUMN_INDEX])


__all__ = [
    "USAGE_DATE_COLUMN",
    "MERCHANT_COLUMN",
    "AMOUNT_COLUMN",
    "PAYMENT_COLUMN_INDEX",
    "DEFAULT_PAYMENT_COLUMN",
    "normalize_key",
    "normalize_row",
    "clean_amount",
    "is_usage_date",
    "payment_column",
]
