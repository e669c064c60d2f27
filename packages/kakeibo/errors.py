"""Error types surfaced to callers of the ``kakeibo`` package.

Every failure that aborts a classification pass is a :class:`KakeiboError`
carrying a single human-readable ``message``. Interface layers (the session
state machine and the CLI) display that message verbatim and clear any prior
result. Individual malformed rows are never errors; the classifier drops them
silently.
"""

from __future__ import annotations

READ_FAILURE_PREFIX = "ファイルの読み込みに失敗しました: "
PARSE_FAILURE_PREFIX = "CSVの解析に失敗しました: "
WRONG_FILE_TYPE_MESSAGE = "CSVファイルを選択してください。"


class KakeiboError(Exception):
    """Base class for pass-level failures with a display message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnsupportedFileTypeError(KakeiboError):
    """The selected file is not a CSV by name or declared type."""

    def __init__(self, name: str | None = None) -> None:
        super().__init__(WRONG_FILE_TYPE_MESSAGE)
        self.name = name


class CsvReadError(KakeiboError):
    """The file could not be read from disk or decoded with the fixed charset."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"{READ_FAILURE_PREFIX}{detail}")
        self.detail = detail


class CsvParseError(KakeiboError):
    """The CSV parser reported a structural error."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"{PARSE_FAILURE_PREFIX}{detail}")
        self.detail = detail


__all__ = [
    "KakeiboError",
    "UnsupportedFileTypeError",
    "CsvReadError",
    "CsvParseError",
    "READ_FAILURE_PREFIX",
    "PARSE_FAILURE_PREFIX",
    "WRONG_FILE_TYPE_MESSAGE",
]
