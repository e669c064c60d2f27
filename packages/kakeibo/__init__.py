"""Public interface for the ``kakeibo`` package.

Classifies Rakuten e-NAVI credit-card statement CSVs into a fixed set of
spending categories with a running total per category. This module only
re-exports the stable import surface.
"""

from .api import categorize_csv_file
from .classify import classify_transactions, is_valid_row
from .errors import CsvParseError, CsvReadError, KakeiboError, UnsupportedFileTypeError
from .models import Categories, Category, ClassificationReport, Row, build_report
from .normalizers import clean_amount, normalize_row
from .rules import CATEGORY_ORDER, RULES, Rule, match_rule
from .session import KakeiboSession, SessionState, Status

__all__ = [
    # API
    "categorize_csv_file",
    "classify_transactions",
    "is_valid_row",
    "clean_amount",
    "normalize_row",
    "match_rule",
    # Models / types
    "Row",
    "Category",
    "Categories",
    "ClassificationReport",
    "build_report",
    "Rule",
    "RULES",
    "CATEGORY_ORDER",
    # Session
    "KakeiboSession",
    "SessionState",
    "Status",
    # Errors
    "KakeiboError",
    "UnsupportedFileTypeError",
    "CsvReadError",
    "CsvParseError",
]
