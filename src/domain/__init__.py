"""
Domain layer - Pure defanging logic with zero framework imports.

This package contains the scheme defanger, the registry verifier and
the registry value they operate on. It defines its own port interfaces
for infrastructure abstraction, keeping adapters and the API decoupled.
"""

from .checks import DefangCheckService
from .defang import DEFANG_RULES, DefangResult, defang, defang_result
from .exceptions import (
    AmbiguousScheme,
    DefangError,
    DuplicateScheme,
    InvalidScheme,
    InvalidSchemeRecord,
    RegistryVerificationFailed,
    UnknownScheme,
)
from .ports import ReportSink, SchemeRecord, SchemeSource, SchemeStatus
from .registry import SchemeRegistry, clean_scheme_name
from .verification import (
    RegistryAmbiguity,
    RegistryCollision,
    VerificationReport,
    verify,
)

__all__ = [
    "AmbiguousScheme",
    "DEFANG_RULES",
    "DefangCheckService",
    "DefangError",
    "DefangResult",
    "DuplicateScheme",
    "InvalidScheme",
    "InvalidSchemeRecord",
    "RegistryAmbiguity",
    "RegistryCollision",
    "RegistryVerificationFailed",
    "ReportSink",
    "SchemeRecord",
    "SchemeRegistry",
    "SchemeSource",
    "SchemeStatus",
    "UnknownScheme",
    "VerificationReport",
    "clean_scheme_name",
    "defang",
    "defang_result",
    "verify",
]
