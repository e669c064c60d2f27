"""Terminal rendering of a classification result with ``rich``."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .models import Categories
from .normalizers import (
    AMOUNT_COLUMN,
    DEFAULT_PAYMENT_COLUMN,
    MERCHANT_COLUMN,
    USAGE_DATE_COLUMN,
    clean_amount,
    payment_column,
)
from .rules import CATCH_ALL, CATCH_ALL_DESCRIPTION, RULES


def format_yen(amount: int) -> str:
    return f"{amount:,} 円"


def payment_column_label(categories: Categories) -> str:
    """Name of the column the catch-all total was read from.

    Taken from the 9th key of the first item of the first category, falling
    back to ``8月支払金額`` when there is no such key.
    """

    for cat in categories.values():
        if cat.items:
            return payment_column(cat.items[0]) or DEFAULT_PAYMENT_COLUMN
        break
    return DEFAULT_PAYMENT_COLUMN


def build_table(name: str, total: int, items, *, extra_column: str | None = None) -> Table:
    table = Table(title=f"{name}  {format_yen(total)}", title_justify="left", expand=False)
    table.add_column(USAGE_DATE_COLUMN, no_wrap=True)
    table.add_column(MERCHANT_COLUMN)
    table.add_column(AMOUNT_COLUMN, justify="right", no_wrap=True)
    if extra_column is not None:
        table.add_column(Text(extra_column), justify="right", no_wrap=True)

    for item in items:
        cells = [
            item.get(USAGE_DATE_COLUMN) or "",
            item.get(MERCHANT_COLUMN) or "",
            format_yen(clean_amount(item.get(AMOUNT_COLUMN))),
        ]
        if extra_column is not None:
            cells.append(format_yen(clean_amount(item.get(extra_column))))
        # Merchant names may contain "[" so cells are plain Text, not markup.
        table.add_row(*(Text(c) for c in cells))
    return table


def render_categories(
    categories: Categories, console: Console, *, show_items: bool = True
) -> None:
    """Print one section per category: a summary line or a full item table."""

    if not categories:
        console.print("[yellow]No transactions matched.[/yellow]")
        return

    label = payment_column_label(categories)
    for name, cat in categories.items():
        if not show_items:
            console.print(f"{name}  {format_yen(cat.total)}  ({len(cat.items)}件)")
            continue
        extra = label if name == CATCH_ALL else None
        console.print(build_table(name, cat.total, cat.items, extra_column=extra))


def render_rules(console: Console) -> None:
    """Print how each category is decided, in evaluation order."""

    table = Table(title="計算方法について", title_justify="left")
    table.add_column("カテゴリ", no_wrap=True)
    table.add_column("判定条件")
    for rule in RULES:
        table.add_row(Text(rule.category), Text(rule.description))
    table.add_row(Text(CATCH_ALL), Text(CATCH_ALL_DESCRIPTION))
    console.print(table)
    console.print(
        "計算はすべてお使いのコンピュータ内で完結し、外部にデータが送信されることはありません。",
        highlight=False,
    )


__all__ = [
    "format_yen",
    "payment_column_label",
    "build_table",
    "render_categories",
    "render_rules",
]
