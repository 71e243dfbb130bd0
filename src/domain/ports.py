"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the record types the domain consumes and the
interfaces (ports) it requires from infrastructure. Adapters implement
these protocols.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .verification import VerificationReport


class SchemeStatus(str, Enum):
    """
    Standardization status of a registered URI scheme.

    Values match the IANA "Status" column verbatim so rows can be
    parsed with SchemeStatus(cell).
    """

    PERMANENT = "Permanent"
    PROVISIONAL = "Provisional"
    HISTORICAL = "Historical"


@dataclass(frozen=True)
class SchemeRecord:
    """
    One row of the scheme registry.

    Only name and status take part in defanging; the remaining fields
    mirror the IANA table and are carried through untouched.
    """

    name: str
    status: SchemeStatus
    template: str = ""
    description: str = ""
    well_known_uri_support: str = ""
    reference: str = ""
    notes: str = ""


class SchemeSource(Protocol):
    """Port interface for loading registry records."""

    def load(self) -> list[SchemeRecord]:
        """
        Load every scheme record from the backing data source.

        Returns:
            Records with cleaned, lowercase names

        Raises:
            InvalidSchemeRecord: If a row cannot be turned into a record
        """
        ...


class ReportSink(Protocol):
    """Port interface for publishing verification outcomes."""

    def emit(self, report: "VerificationReport") -> None:
        """
        Publish a verification report.

        Args:
            report: Outcome of a verification pass
        """
        ...
