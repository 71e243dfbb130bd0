"""
Domain exceptions - Semantic error types for defanging and verification.

This module defines domain-specific exceptions that communicate
rule-set and registry problems without leaking adapter details.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .verification import RegistryAmbiguity, RegistryCollision


class DefangError(Exception):
    """Base class for defang domain errors."""

    pass


class InvalidScheme(DefangError):
    """Scheme token is too short to defang (fewer than 2 characters)."""

    pass


class InvalidSchemeRecord(DefangError):
    """Registry row is malformed (bad scheme cell or unknown status)."""

    pass


class DuplicateScheme(DefangError):
    """Scheme name appears more than once in a registry."""

    pass


class UnknownScheme(DefangError):
    """No registered scheme defangs to the given string."""

    pass


class AmbiguousScheme(DefangError):
    """More than one registered scheme defangs to the given string."""

    def __init__(self, defanged: str, candidates: list[str]) -> None:
        super().__init__(f"{defanged!r} could be any of: {', '.join(candidates)}")
        self.defanged = defanged
        self.candidates = candidates


class RegistryVerificationFailed(DefangError):
    """
    Registry violates the no-collision or one-to-one invariant.

    Carries every violation found, not only the first.
    """

    def __init__(self, violations: list["RegistryCollision | RegistryAmbiguity"]) -> None:
        super().__init__(f"{len(violations)} defang violation(s) found")
        self.violations = violations
