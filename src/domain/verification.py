"""
Registry verifier - Global safety checks over a scheme registry.

Two invariants must hold for the defanged table to be safe to publish:

1. No collision: a defanged scheme must never equal a registered
   scheme name (including the scheme's own name).
2. One-to-one: no two distinct schemes may defang to the same string,
   otherwise refanging through the registry would be ambiguous.

HTTP/HTTPS exception
====================

http and https defang into hxxp and hxxps, which are themselves
registered (provisional) schemes that defang to themselves. This is the
common community convention, so violations confined to those four
schemes are reported as a single warning instead of failing.

Every other violation is fatal. All violations are collected before the
report is returned.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from .defang import DefangResult, defang_result
from .exceptions import RegistryVerificationFailed
from .ports import SchemeRecord

HTTP_EXCEPTION_SCHEMES = frozenset({"http", "https", "hxxp", "hxxps"})

HTTP_EXCEPTION_WARNING = (
    "HTTP[S] defangs into HXXP[S], which are valid (albeit provisional) schemes; "
    "allowing this common convention"
)


@dataclass(frozen=True)
class RegistryCollision:
    """A scheme whose defanged form is itself a registered scheme."""

    scheme: str
    defanged: str

    def __str__(self) -> str:
        return f'Defanged scheme "{self.defanged}" (from "{self.scheme}") is still a valid scheme'


@dataclass(frozen=True)
class RegistryAmbiguity:
    """Several schemes sharing one defanged form."""

    defanged: str
    offenders: tuple[str, ...]

    def __str__(self) -> str:
        return (
            f'Defanged scheme "{self.defanged}" is duplicated, refanging would be '
            f"ambiguous between: {', '.join(self.offenders)}"
        )


@dataclass
class VerificationReport:
    """Outcome of a single verification pass."""

    results: list[DefangResult] = field(default_factory=list)
    collisions: list[RegistryCollision] = field(default_factory=list)
    ambiguities: list[RegistryAmbiguity] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def violations(self) -> list[RegistryCollision | RegistryAmbiguity]:
        return [*self.collisions, *self.ambiguities]

    @property
    def passed(self) -> bool:
        return not self.collisions and not self.ambiguities

    def raise_for_violations(self) -> None:
        """
        Raise if any fatal violation was found.

        Raises:
            RegistryVerificationFailed: Carrying every violation
        """
        if not self.passed:
            raise RegistryVerificationFailed(self.violations)


def _is_exempt(*schemes: str) -> bool:
    return all(scheme in HTTP_EXCEPTION_SCHEMES for scheme in schemes)


def verify(records: Iterable[SchemeRecord]) -> VerificationReport:
    """
    Check the no-collision and one-to-one invariants over records.

    Record order only decides the order in which offenders are listed.
    Sort by name beforehand for deterministic diagnostics. A name repeated
    in the input is listed once among the offenders.

    Args:
        records: Registry records to check, each name unique

    Returns:
        VerificationReport holding every defanged pair and violation
    """
    report = VerificationReport()
    exempted = False

    report.results = [defang_result(record.name) for record in records]
    names = {result.original for result in report.results}

    # Check 1: defanged output must not be a registered scheme
    for result in report.results:
        if result.defanged not in names:
            continue
        if _is_exempt(result.original, result.defanged):
            exempted = True
        else:
            report.collisions.append(RegistryCollision(result.original, result.defanged))

    # Check 2: defanged output must identify a single scheme
    seen: dict[str, str] = {}
    reported: set[str] = set()
    for result in report.results:
        first = seen.setdefault(result.defanged, result.original)
        if first == result.original or result.defanged in reported:
            continue
        reported.add(result.defanged)
        offenders = tuple(
            dict.fromkeys(r.original for r in report.results if r.defanged == result.defanged)
        )
        if _is_exempt(*offenders):
            exempted = True
        else:
            report.ambiguities.append(RegistryAmbiguity(result.defanged, offenders))

    if exempted:
        report.warnings.append(HTTP_EXCEPTION_WARNING)

    return report
