"""Public API for the ``kakeibo`` package.

The pure classifier lives in :mod:`kakeibo.classify` and is re-exported here.
:func:`categorize_csv_file` composes the ingest collaborator with it and is
what interface layers call for a selected file.
"""

from __future__ import annotations

from os import PathLike

from .classify import classify_transactions
from .ingest.utils import load_rows_from_csv
from .logging_setup import get_logger
from .models import Categories

_logger = get_logger("kakeibo.api")


def categorize_csv_file(
    csv_path: str | PathLike[str], *, content_type: str | None = None
) -> Categories:
    """Load an e-NAVI CSV export and classify its transactions.

    Parameters
    ----------
    csv_path:
        Filesystem path to the exported statement.
    content_type:
        Optional MIME type declared for the file. When omitted it is guessed
        from the file name.

    Returns
    -------
    Categories
        The non-empty categories with totals and member rows.

    Raises
    ------
    kakeibo.errors.UnsupportedFileTypeError
        The file is neither ``text/csv`` nor named ``*.csv``.
    kakeibo.errors.CsvReadError
        The file could not be read or decoded.
    kakeibo.errors.CsvParseError
        The CSV parser reported a structural error.
    """

    rows = load_rows_from_csv(csv_path, content_type=content_type)
    categories = classify_transactions(rows)
    _logger.debug(
        "categorized %s: %s",
        csv_path,
        ", ".join(f"{name}={cat.total}" for name, cat in categories.items()) or "no rows",
    )
    return categories


__all__ = ["categorize_csv_file", "classify_transactions"]
