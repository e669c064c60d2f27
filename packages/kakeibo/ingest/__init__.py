"""CSV ingest for Rakuten e-NAVI card statement exports."""

from .utils import CSV_CHARSET, decode_csv_bytes, is_csv_file, load_rows_from_csv

__all__ = ["CSV_CHARSET", "decode_csv_bytes", "is_csv_file", "load_rows_from_csv"]
