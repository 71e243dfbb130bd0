"""
Defang check service - Registry verification as a build-time check.

Loads the registry through a SchemeSource, narrows it to the statuses
under check, runs the verifier and publishes the report through a
ReportSink. Only permanent schemes are checked by default; provisional
and historical entries are too volatile to gate a release on.
"""

from dataclasses import dataclass

from .ports import ReportSink, SchemeSource, SchemeStatus
from .registry import SchemeRegistry
from .verification import VerificationReport, verify


@dataclass
class DefangCheckService:
    """
    Domain service for checking the defang rule set against a registry.

    Returns the report without raising; callers that must fail on a
    violation call report.raise_for_violations().
    """

    source: SchemeSource
    sink: ReportSink
    permanent_only: bool = True

    def load_registry(self) -> SchemeRegistry:
        """Build a registry from the configured source."""
        return SchemeRegistry(self.source.load())

    def check(self, registry: SchemeRegistry | None = None) -> VerificationReport:
        """
        Verify the registry and publish the outcome.

        Args:
            registry: Registry to check; loaded from the source when omitted

        Returns:
            VerificationReport for the checked records
        """
        if registry is None:
            registry = self.load_registry()

        if self.permanent_only:
            records = registry.with_status(SchemeStatus.PERMANENT)
        else:
            records = list(registry)

        report = verify(records)
        self.sink.emit(report)
        return report
