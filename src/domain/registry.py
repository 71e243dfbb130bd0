"""
Scheme registry - Immutable, explicitly constructed set of known schemes.

The registry is plain data: callers build it once (at startup or in a
test fixture) and pass it by reference. There is no module-level table.
It also provides the reverse lookup that makes defanging recoverable.
"""

import re
from collections.abc import Iterable, Iterator
from types import MappingProxyType

from .defang import RESERVED_SCHEME_CHARS, defang
from .exceptions import (
    AmbiguousScheme,
    DuplicateScheme,
    InvalidSchemeRecord,
    UnknownScheme,
)
from .ports import SchemeRecord, SchemeStatus

# IANA sometimes annotates the scheme cell, e.g. "shttp (OBSOLETE)"
_SCHEME_CELL = re.compile(
    rf"^([\w{re.escape(''.join(RESERVED_SCHEME_CHARS))}]+)(?:\s+\((.*)\))?$"
)


def clean_scheme_name(raw: str) -> tuple[str, str]:
    """
    Split a registry scheme cell into its lowercase name and notes.

    Args:
        raw: Scheme cell as published, e.g. "shttp (OBSOLETE)"

    Returns:
        Tuple of (name, notes), e.g. ("shttp", "OBSOLETE")

    Raises:
        InvalidSchemeRecord: If the cell does not hold a scheme token
    """
    match = _SCHEME_CELL.match(raw.strip())
    if match is None:
        raise InvalidSchemeRecord(f"Invalid scheme {raw!r}")
    return match.group(1).lower(), match.group(2) or ""


class SchemeRegistry:
    """
    Read-only mapping of scheme name to SchemeRecord.

    Iteration yields records sorted by name.
    """

    def __init__(self, records: Iterable[SchemeRecord]) -> None:
        by_name: dict[str, SchemeRecord] = {}
        for record in records:
            if record.name in by_name:
                raise DuplicateScheme(record.name)
            by_name[record.name] = record

        self._records = MappingProxyType(dict(sorted(by_name.items())))

        defanged: dict[str, list[str]] = {}
        for name in self._records:
            defanged.setdefault(defang(name), []).append(name)
        self._by_defanged = MappingProxyType(defanged)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[SchemeRecord]:
        return iter(self._records.values())

    def __contains__(self, name: object) -> bool:
        return name in self._records

    def get(self, name: str) -> SchemeRecord | None:
        return self._records.get(name)

    def names(self) -> list[str]:
        return list(self._records)

    def with_status(self, *statuses: SchemeStatus) -> list[SchemeRecord]:
        """Records whose status is one of the given statuses."""
        return [record for record in self if record.status in statuses]

    def refang(self, defanged: str) -> SchemeRecord:
        """
        Recover the registered scheme a defanged string came from.

        A scheme that defangs to itself (hxxp) is only a fallback: when
        another scheme (http) also produces the string, that one wins.

        Args:
            defanged: Defanged scheme, e.g. "hxxps"

        Returns:
            The matching SchemeRecord

        Raises:
            UnknownScheme: If no registered scheme defangs to the string
            AmbiguousScheme: If several registered schemes still match
        """
        candidates = self._by_defanged.get(defanged, [])
        if len(candidates) > 1:
            candidates = [name for name in candidates if name != defanged]
        if not candidates:
            raise UnknownScheme(defanged)
        if len(candidates) > 1:
            raise AmbiguousScheme(defanged, candidates)
        return self._records[candidates[0]]
