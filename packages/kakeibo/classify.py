"""Classification and aggregation of card statement rows.

``classify_transactions`` is a pure function over one input's rows:

1. Each row's keys are normalized (BOM and padding stripped).
2. Rows failing the validity gate are dropped without trace.
3. Valid rows go through the ordered rule chain in :mod:`kakeibo.rules`.
4. Matched rows add their own cleaned ``利用金額`` to the category total.
   Catch-all rows add the cleaned value of the payment column instead: the
   9th header key of the first row, resolved once before the loop.

The result is a read-only mapping holding only non-empty categories, in the
fixed declaration order. Running the pass twice on the same rows gives
identical totals and item order.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from itertools import chain
from types import MappingProxyType

from .logging_setup import get_logger
from .models import Categories, Category, Row
from .normalizers import (
    AMOUNT_COLUMN,
    MERCHANT_COLUMN,
    USAGE_DATE_COLUMN,
    clean_amount,
    is_usage_date,
    normalize_row,
    payment_column,
)
from .rules import CATCH_ALL, CATEGORY_ORDER, match_rule

_logger = get_logger("kakeibo.classify")


@dataclass(slots=True)
class _Bucket:
    total: int = 0
    items: list[Row] = field(default_factory=list)

    def add(self, row: Row, amount: int) -> None:
        self.items.append(row)
        self.total += amount


def is_valid_row(row: Mapping[str, str | None]) -> bool:
    """Validity gate for a key-normalized row.

    Requires a ``YYYY/MM/DD`` usage date and a non-empty merchant name. The
    usage amount never disqualifies a row: an unparseable amount counts as 0.
    """

    if not is_usage_date(row.get(USAGE_DATE_COLUMN)):
        return False
    if not row.get(MERCHANT_COLUMN):
        return False
    return True


def classify_transactions(rows: Iterable[Mapping[str, str | None]]) -> Categories:
    """Classify ``rows`` into the fixed categories and total them.

    Parameters
    ----------
    rows:
        Parsed CSV records in input order, keyed by header name. Any iterable
        works; it is consumed once.

    Returns
    -------
    Categories
        Read-only mapping of category name → :class:`~kakeibo.models.Category`
        for categories with at least one row.
    """

    it = iter(rows)
    first = next(it, None)
    if first is None:
        return MappingProxyType({})
    fallback_column = payment_column(first)
    _logger.debug("payment column for catch-all totals: %r", fallback_column)

    buckets: dict[str, _Bucket] = {name: _Bucket() for name in CATEGORY_ORDER}
    seen = 0
    skipped = 0
    for idx, raw in enumerate(chain([first], it)):
        seen += 1

        row = normalize_row(raw)
        if not is_valid_row(row):
            skipped += 1
            _logger.debug("skipping row %d: missing or malformed date/merchant", idx)
            continue

        merchant = row[MERCHANT_COLUMN] or ""
        amount = clean_amount(row.get(AMOUNT_COLUMN))
        frozen = MappingProxyType(row)

        rule = match_rule(merchant, amount)
        if rule is not None:
            buckets[rule.category].add(frozen, amount)
            continue

        other_amount = clean_amount(row.get(fallback_column)) if fallback_column else 0
        buckets[CATCH_ALL].add(frozen, other_amount)

    result = {
        name: Category(name=name, total=bucket.total, items=tuple(bucket.items))
        for name, bucket in buckets.items()
        if bucket.items
    }
    _logger.debug(
        "classified %d of %d rows into %d categories (%d skipped)",
        seen - skipped,
        seen,
        len(result),
        skipped,
    )
    return MappingProxyType(result)


__all__ = ["classify_transactions", "is_valid_row"]
