"""
Logging report sink adapter - Implements ReportSink protocol.

This module publishes verification reports through the standard
logging module, so CI runs and the API startup log share one format.
"""

import logging

from src.domain.verification import VerificationReport

logger = logging.getLogger(__name__)


class LoggingReportSink:
    """
    Implements ReportSink protocol via logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def emit(self, report: VerificationReport) -> None:
        """
        Log a verification report.

        Warnings are logged at WARNING, each violation at ERROR and the
        summary at INFO (passed) or ERROR (failed).

        Args:
            report: Outcome of a verification pass
        """
        for warning in report.warnings:
            logger.warning("[DEFANG] %s", warning)

        for violation in report.violations:
            logger.error("[DEFANG] %s", violation)

        if report.passed:
            logger.info("[DEFANG] Checked %d schemes: no collisions, one-to-one", len(report.results))
        else:
            logger.error(
                "[DEFANG] Checked %d schemes: %d collision(s), %d ambiguity(ies)",
                len(report.results),
                len(report.collisions),
                len(report.ambiguities),
            )
