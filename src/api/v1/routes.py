"""
API v1 routes.

Defines REST endpoints for defanging, refanging and registry verification.
"""

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status

from src.api.dependencies import get_check_service, get_registry
from src.api.models import DefangResponse, ErrorResponse, RefangResponse, VerifyResponse
from src.domain.checks import DefangCheckService
from src.domain.defang import defang
from src.domain.exceptions import AmbiguousScheme, InvalidScheme, UnknownScheme
from src.domain.registry import SchemeRegistry

router = APIRouter(tags=["v1"])

SCHEME_PATTERN = r"^[A-Za-z0-9+.\-]+$"
DEFANGED_PATTERN = r"^[A-Za-z0-9+.\-\[\]]+$"


@router.get(
    "/defang/{scheme}",
    response_model=DefangResponse,
    responses={400: {"model": ErrorResponse, "description": "Scheme cannot be defanged"}},
    summary="Defang a URI scheme",
    description="Return the defanged rendering of a single scheme token. "
    "The scheme does not need to be registered.",
)
async def defang_scheme(
    scheme: str = Path(..., pattern=SCHEME_PATTERN, description="URI scheme token"),
) -> DefangResponse:
    """
    Defang a URI scheme.

    - **scheme**: Scheme token, e.g. `https` (case-insensitive)
    """
    scheme = scheme.lower()
    try:
        defanged = defang(scheme)
    except InvalidScheme as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from None
    return DefangResponse(scheme=scheme, defanged=defanged)


@router.get(
    "/refang/{defanged}",
    response_model=RefangResponse,
    responses={
        404: {"model": ErrorResponse, "description": "No registered scheme matches"},
        409: {"model": ErrorResponse, "description": "Several registered schemes match"},
    },
    summary="Refang a defanged URI scheme",
    description="Look up the registered scheme that defangs to the given string.",
)
async def refang_scheme(
    defanged: str = Path(..., pattern=DEFANGED_PATTERN, description="Defanged scheme"),
    registry: SchemeRegistry = Depends(get_registry),
) -> RefangResponse:
    """
    Recover a scheme from its defanged form.

    - **defanged**: Defanged scheme, e.g. `hxxps` or `svn[+]ssh`
    """
    defanged = defanged.lower()
    try:
        record = registry.refang(defanged)
    except UnknownScheme:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Unknown defanged scheme",
        ) from None
    except AmbiguousScheme as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(exc),
        ) from None
    return RefangResponse(defanged=defanged, scheme=record.name, status=record.status)


@router.get(
    "/verify",
    response_model=VerifyResponse,
    responses={409: {"model": VerifyResponse, "description": "Registry violates a defang invariant"}},
    summary="Verify the defang rule set against the registry",
    description="Check that no defanged scheme is a registered scheme and that "
    "defanging is one-to-one over the loaded registry.",
)
async def verify_registry(
    response: Response,
    registry: SchemeRegistry = Depends(get_registry),
    service: DefangCheckService = Depends(get_check_service),
) -> VerifyResponse:
    """
    Run the registry verification pass.

    Returns 200 when the registry passes and 409 with the full list of
    violations when it does not.
    """
    report = service.check(registry)
    if not report.passed:
        response.status_code = status.HTTP_409_CONFLICT
    return VerifyResponse.from_report(report)
