"""
Unit tests for DefangCheckService.

Tests orchestration with mocked ports to verify:
- Registry loading from the source
- Permanent-only filtering
- Report publication through the sink
"""

from unittest.mock import Mock

from src.domain.checks import DefangCheckService
from src.domain.ports import SchemeStatus
from src.domain.registry import SchemeRegistry
from src.domain.verification import HTTP_EXCEPTION_WARNING, VerificationReport
from tests.conftest import make_records


def make_service(*records, permanent_only: bool = True) -> tuple[DefangCheckService, Mock, Mock]:
    source = Mock()
    source.load.return_value = list(records)
    sink = Mock()
    service = DefangCheckService(source=source, sink=sink, permanent_only=permanent_only)
    return service, source, sink


class TestLoadRegistry:
    """Tests for load_registry."""

    def test_builds_registry_from_source(self) -> None:
        service, source, _ = make_service(*make_records("ftp", "ws"))

        registry = service.load_registry()

        source.load.assert_called_once_with()
        assert isinstance(registry, SchemeRegistry)
        assert registry.names() == ["ftp", "ws"]


class TestCheck:
    """Tests for check."""

    def test_loads_when_no_registry_given(self) -> None:
        service, source, _ = make_service(*make_records("ftp"))

        report = service.check()

        source.load.assert_called_once_with()
        assert report.passed

    def test_uses_given_registry(self) -> None:
        service, source, _ = make_service()

        report = service.check(SchemeRegistry(make_records("ftp", "ws")))

        source.load.assert_not_called()
        assert len(report.results) == 2

    def test_emits_report_to_sink(self) -> None:
        service, _, sink = make_service(*make_records("abc", "adc"))

        report = service.check()

        sink.emit.assert_called_once_with(report)
        assert isinstance(report, VerificationReport)
        assert not report.passed

    def test_does_not_raise_on_violation(self) -> None:
        """Violations are returned in the report, callers decide to fail."""
        service, _, _ = make_service(*make_records("abc", "adc"))
        report = service.check()
        assert len(report.ambiguities) == 1

    def test_permanent_only_skips_provisional(self) -> None:
        """Provisional hxxp[s] are not checked by default."""
        records = [
            *make_records("http", "https"),
            *make_records("hxxp", "hxxps", status=SchemeStatus.PROVISIONAL),
        ]
        service, _, _ = make_service(*records)

        report = service.check()

        assert [r.original for r in report.results] == ["http", "https"]
        assert report.warnings == []

    def test_all_statuses_when_not_permanent_only(self) -> None:
        records = [
            *make_records("http", "https"),
            *make_records("hxxp", "hxxps", status=SchemeStatus.PROVISIONAL),
        ]
        service, _, _ = make_service(*records, permanent_only=False)

        report = service.check()

        assert len(report.results) == 4
        assert report.passed
        assert report.warnings == [HTTP_EXCEPTION_WARNING]
