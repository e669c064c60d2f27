"""Data models and type aliases for ``kakeibo``.

A classification pass consumes :data:`Row` mappings (header name → raw cell
string, exactly as the CSV parser produced them) and returns an immutable
:data:`Categories` mapping. The pydantic DTOs at the bottom of this module are
the serialized shape used by the CLI's JSON output; the core never builds them.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypeAlias
from dataclasses import dataclass
from os import PathLike

from pydantic import BaseModel, ConfigDict, field_validator

# ---------------------------------------------------------------------------
# Core record and result types
# ---------------------------------------------------------------------------

Row: TypeAlias = Mapping[str, str | None]
"""A single CSV record keyed by header name.

Keys follow the header declaration order. Values are raw strings; ``None``
stands for a cell the parser did not supply and is treated like an absent
column.
"""


@dataclass(frozen=True, slots=True)
class Category:
    """A spending category with its running total and member rows.

    ``items`` keeps input order. ``total`` is in whole yen. For the catch-all
    category the total is built from the positional payment column rather than
    each row's usage amount, so it need not equal the sum of ``利用金額``.
    """

    name: str
    total: int
    items: tuple[Row, ...]

    def __len__(self) -> int:
        return len(self.items)


Categories: TypeAlias = Mapping[str, Category]
"""Read-only mapping of category name → :class:`Category`.

Only non-empty categories are present, in the fixed declaration order.
"""


# ---------------------------------------------------------------------------
# DTOs for JSON output
# ---------------------------------------------------------------------------


class CategorySummary(BaseModel):
    model_config = ConfigDict(strict=True, extra="forbid")

    name: str
    total: int
    count: int
    items: list[dict[str, str | None]]

    @field_validator("count")
    @classmethod
    def _count_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("count must be >= 0")
        return v


class ClassificationReport(BaseModel):
    """Top-level JSON document written by ``kakeibo summarize --format json``."""

    model_config = ConfigDict(strict=True, extra="forbid")

    source: str | None = None
    grand_total: int
    categories: list[CategorySummary]


def build_report(
    categories: Categories, *, source: str | PathLike[str] | None = None
) -> ClassificationReport:
    """Convert a classification result into its serializable report form."""

    summaries = [
        CategorySummary(
            name=cat.name,
            total=cat.total,
            count=len(cat.items),
            items=[dict(item) for item in cat.items],
        )
        for cat in categories.values()
    ]
    return ClassificationReport(
        source=str(source) if source is not None else None,
        grand_total=sum(s.total for s in summaries),
        categories=summaries,
    )


__all__ = [
    "Row",
    "Category",
    "Categories",
    "CategorySummary",
    "ClassificationReport",
    "build_report",
]
