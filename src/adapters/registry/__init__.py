"""Registry adapters - Scheme data sources."""

from .csv_file import CsvSchemeSource

__all__ = ["CsvSchemeSource"]
