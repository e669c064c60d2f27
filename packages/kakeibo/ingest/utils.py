"""Ingest utilities shared by the API, the session, and the CLI.

The e-NAVI export is Shift_JIS text. Browsers decode the ``Shift_JIS`` label
as Windows-31J, so ``cp932`` is used here to accept the same vendor
extensions. Decoding is strict: a byte sequence that is not valid cp932 is a
read failure rather than silently replaced text.
"""

from __future__ import annotations

import csv
import mimetypes
from os import PathLike, fspath
from pathlib import Path

from ..errors import CsvParseError, CsvReadError, UnsupportedFileTypeError
from ..logging_setup import get_logger
from .adapters.rakuten_card_csv import read_rows

CSV_CHARSET = "cp932"
CSV_MIME_TYPE = "text/csv"
CSV_SUFFIX = ".csv"

_logger = get_logger("kakeibo.ingest")


def is_csv_file(path: str | PathLike[str], content_type: str | None = None) -> bool:
    """True when ``path`` is a CSV by declared/guessed MIME type or by suffix.

    ``content_type`` is the type declared by the caller (e.g., an upload's
    ``Content-Type``). When omitted it is guessed from the file name.
    """

    name = Path(fspath(path)).name
    if content_type is None:
        content_type, _ = mimetypes.guess_type(name)
    return content_type == CSV_MIME_TYPE or name.endswith(CSV_SUFFIX)


def decode_csv_bytes(raw: bytes) -> str:
    """Decode raw export bytes with the fixed statement charset.

    Raises ``CsvReadError`` when the bytes are not valid for that charset.
    """

    try:
        return raw.decode(CSV_CHARSET)
    except UnicodeDecodeError as e:
        _logger.warning("failed to decode CSV bytes as %s: %s", CSV_CHARSET, e)
        raise CsvReadError(str(e)) from e


def load_rows_from_csv(
    csv_path: str | PathLike[str], *, content_type: str | None = None
) -> list[dict[str, str]]:
    """Read an e-NAVI CSV export from disk and return its data rows.

    Steps
    -----
    - Reject files that are not CSV (``UnsupportedFileTypeError``) before
      touching the filesystem.
    - Read the whole file as bytes (``CsvReadError`` on I/O failure).
    - Decode with :data:`CSV_CHARSET` (``CsvReadError`` on invalid bytes).
    - Parse with the header-first adapter (``CsvParseError`` on ``csv.Error``).
    """

    p = Path(fspath(csv_path))
    if not is_csv_file(p, content_type):
        raise UnsupportedFileTypeError(p.name)

    try:
        raw = p.read_bytes()
    except (OSError, ValueError) as e:
        _logger.warning("failed to read %s: %s", p, e)
        raise CsvReadError(str(e)) from e

    text = decode_csv_bytes(raw)

    try:
        rows = read_rows(text)
    except csv.Error as e:
        _logger.warning("failed to parse %s: %s", p, e)
        raise CsvParseError(str(e)) from e

    _logger.debug("read %d bytes, %d rows from %s", len(raw), len(rows), p)
    return rows


__all__ = [
    "CSV_CHARSET",
    "CSV_MIME_TYPE",
    "CSV_SUFFIX",
    "is_csv_file",
    "decode_csv_bytes",
    "load_rows_from_csv",
]
