"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
the scheme registry and domain services into routes.
"""

from fastapi import Request

from src.adapters.registry import CsvSchemeSource
from src.adapters.reporting.logging_sink import LoggingReportSink
from src.config.settings import get_settings
from src.domain.checks import DefangCheckService
from src.domain.registry import SchemeRegistry

# Module-level singleton - LoggingReportSink is stateless
_report_sink = LoggingReportSink()


def get_report_sink() -> LoggingReportSink:
    """Get logging report sink (singleton)."""
    return _report_sink


def get_registry(request: Request) -> SchemeRegistry:
    """
    Get scheme registry from app state.

    The registry is loaded once during app lifespan startup and stored in app.state.
    """
    return request.app.state.registry


def get_check_service() -> DefangCheckService:
    """
    Create defang check service with injected dependencies.

    Wires together the configured CSV source and the logging sink.
    """
    settings = get_settings()
    return DefangCheckService(
        source=CsvSchemeSource(settings.registry_path),
        sink=get_report_sink(),
        permanent_only=settings.permanent_only,
    )
