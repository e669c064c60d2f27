"""Adapter turning decoded e-NAVI statement text into header-keyed rows.

Contract
--------
- The first CSV record is the header. Its names are kept exactly as written,
  including any byte-order mark; key cleanup belongs to the classifier.
- Every following record becomes a ``dict`` from header name to cell string.
  Cells missing from a short record become ``""``; surplus cells beyond the
  header are dropped.
- Fully empty lines are skipped. No type coercion is performed.

Failure mode
------------
Structural problems reported by :mod:`csv` propagate as ``csv.Error``.
"""

from __future__ import annotations

import csv
import io
from collections.abc import Iterator
from typing import TextIO


def iter_rows(file: TextIO) -> Iterator[dict[str, str]]:
    """Yield one ``dict`` per data record of an open text stream."""

    reader = csv.DictReader(file)
    for row in reader:
        # DictReader collects surplus cells under a ``None`` key and fills
        # short records with ``None``; keep the ``dict[str, str]`` shape.
        yield {k: (v if v is not None else "") for k, v in row.items() if k is not None}


def read_rows(text: str) -> list[dict[str, str]]:
    """Parse decoded CSV ``text`` into a list of header-keyed rows."""

    with io.StringIO(text, newline="") as f:
        return list(iter_rows(f))


__all__ = ["iter_rows", "read_rows"]
