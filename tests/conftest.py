"""Pytest configuration and shared statement fixtures.

Tests import ``kakeibo`` straight from the workspace ``packages/`` directory,
so the package does not need to be installed for a local run. Statement CSVs
are written as cp932 bytes, the way e-NAVI serves them.
"""

from __future__ import annotations

import csv
import io
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

_ROOT = Path(__file__).resolve().parents[1]
_PKG_DIR = _ROOT / "packages"
sys.path[:0] = [p for p in [str(_PKG_DIR)] if p not in sys.path]

# e-NAVI statement header; the 9th column carries the billing month's payment.
HEADER: tuple[str, ...] = (
    "利用日",
    "利用店名・商品名",
    "利用者",
    "支払方法",
    "利用金額",
    "支払手数料",
    "支払総額",
    "支払月",
    "8月支払金額",
    "9月繰越残高",
    "新規サイン",
)


def make_row(
    date: str | None = "2024/05/10",
    merchant: str | None = "ﾏﾂﾓﾄｷﾖｼ",
    amount: str | None = "1,000",
    payment: str | None = None,
    **extra: str,
) -> dict[str, str]:
    """Build a header-keyed row; ``None`` drops the column entirely."""

    row = dict.fromkeys(HEADER, "")
    row.update({"利用者": "本人", "支払方法": "1回払い", "新規サイン": "*"})
    for key, value in (("利用日", date), ("利用店名・商品名", merchant), ("利用金額", amount)):
        if value is None:
            del row[key]
        else:
            row[key] = value
    row["8月支払金額"] = payment if payment is not None else (amount or "")
    row.update(extra)
    return row


def to_csv_text(rows: Sequence[Sequence[str]], header: Sequence[str] = HEADER) -> str:
    buf = io.StringIO(newline="")
    writer = csv.writer(buf, lineterminator="\r\n")
    writer.writerow(header)
    writer.writerows(rows)
    return buf.getvalue()


@pytest.fixture
def write_statement(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes CSV text as cp932 and returns its path."""

    def _write(text: str, name: str = "enavi202408.csv", encoding: str = "cp932") -> Path:
        path = tmp_path / name
        path.write_bytes(text.encode(encoding))
        return path

    return _write


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's shell settings from leaking into CLI tests."""

    monkeypatch.delenv("KAKEIBO_LOG_LEVEL", raising=False)
    monkeypatch.delenv("KAKEIBO_OUTPUT_FORMAT", raising=False)
