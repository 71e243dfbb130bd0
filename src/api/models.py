"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from pydantic import BaseModel, Field

from src.domain.ports import SchemeStatus
from src.domain.verification import VerificationReport


class DefangResponse(BaseModel):
    """Response model for a defanged scheme."""

    scheme: str
    defanged: str


class RefangResponse(BaseModel):
    """Response model for a scheme recovered from its defanged form."""

    defanged: str
    scheme: str
    status: SchemeStatus


class CollisionModel(BaseModel):
    """A defanged scheme that is still a registered scheme."""

    scheme: str
    defanged: str


class AmbiguityModel(BaseModel):
    """A defanged scheme produced by several registered schemes."""

    defanged: str
    offenders: list[str]


class VerifyResponse(BaseModel):
    """Response model for a registry verification pass."""

    passed: bool
    checked: int = Field(..., description="Number of schemes checked")
    warnings: list[str]
    collisions: list[CollisionModel]
    ambiguities: list[AmbiguityModel]

    @classmethod
    def from_report(cls, report: VerificationReport) -> "VerifyResponse":
        return cls(
            passed=report.passed,
            checked=len(report.results),
            warnings=report.warnings,
            collisions=[
                CollisionModel(scheme=c.scheme, defanged=c.defanged) for c in report.collisions
            ],
            ambiguities=[
                AmbiguityModel(defanged=a.defanged, offenders=list(a.offenders))
                for a in report.ambiguities
            ],
        )


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
