"""
CSV scheme source adapter - Implements SchemeSource protocol.

This module reads the registry from the CSV export IANA publishes
alongside the uri-schemes page (uri-schemes-1.csv), or any cached copy
of it using the same header row.
"""

import csv
import logging
from pathlib import Path

from src.domain.exceptions import InvalidSchemeRecord
from src.domain.ports import SchemeRecord, SchemeStatus
from src.domain.registry import clean_scheme_name

logger = logging.getLogger(__name__)

# IANA renders empty cells as a lone dash
NULL_CELL = "-"


def _cell(row: dict[str, str | None], column: str) -> str:
    value = (row.get(column) or "").strip()
    return "" if value == NULL_CELL else value


class CsvSchemeSource:
    """
    Implements SchemeSource protocol over an IANA-format CSV file.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> list[SchemeRecord]:
        """
        Read and clean every row of the CSV file.

        Returns:
            One SchemeRecord per row, in file order

        Raises:
            InvalidSchemeRecord: If a scheme cell or status is malformed
        """
        logger.info("Loading scheme registry from %s", self.path)

        records = []
        with self.path.open(newline="", encoding="utf-8") as handle:
            reader = csv.DictReader(handle)
            for row in reader:
                # Quoted cells may span lines; line_num is the row's last physical line
                records.append(self._to_record(row, reader.line_num))

        logger.info("Loaded %d schemes from %s", len(records), self.path)
        return records

    def _to_record(self, row: dict[str, str | None], line: int) -> SchemeRecord:
        try:
            name, scheme_notes = clean_scheme_name(_cell(row, "URI Scheme"))
        except InvalidSchemeRecord as exc:
            raise InvalidSchemeRecord(f"{self.path}:{line}: {exc}") from None

        status = _cell(row, "Status")
        try:
            status = SchemeStatus(status)
        except ValueError:
            raise InvalidSchemeRecord(
                f"{self.path}:{line}: unknown status {status!r} for scheme {name!r}"
            ) from None

        return SchemeRecord(
            name=name,
            status=status,
            template=_cell(row, "Template"),
            description=_cell(row, "Description"),
            well_known_uri_support=_cell(row, "Well-Known URI Support"),
            reference=_cell(row, "Reference"),
            notes=_cell(row, "Notes") or scheme_notes,
        )
