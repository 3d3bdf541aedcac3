"""Password tools endpoints.

Public endpoints for password scoring. Passwords are scored in memory and
never stored or logged.
"""

from typing import Optional

from fastapi import APIRouter, Request

from api.limiter import limiter
from api.models import (
    EvaluateRequest,
    ErrorResponse,
    EvaluateResponse,
    PasswordCheckResponse,
    VariantInfo,
    VariantsResponse,
)
from core import RULE_SETS, log_evaluation
from core.config import DEFAULT_RULE_VARIANT, RATE_LIMIT_DEFAULT
from password_checker import analyze_password, check_password_strength


router = APIRouter(tags=["Password Tools"])


def _variant_or_default(variant: Optional[str]) -> str:
    return variant if variant is not None else DEFAULT_RULE_VARIANT


@router.get("/variants", response_model=VariantsResponse)
async def list_variants():
    """List rule variants and their criteria in evaluation order."""
    return VariantsResponse(
        default=DEFAULT_RULE_VARIANT,
        variants=[
            VariantInfo(
                name=variant.value,
                max_score=rules.max_score,
                criteria=[criterion_id.value for criterion_id in rules.criterion_ids],
            )
            for variant, rules in RULE_SETS.items()
        ],
    )


@router.post(
    "/evaluate",
    response_model=EvaluateResponse,
    responses={422: {"model": ErrorResponse}},
)
@limiter.limit(RATE_LIMIT_DEFAULT)
async def evaluate_password(request: Request, body: EvaluateRequest):
    """Score a password and return per-criterion feedback."""
    result = analyze_password(body.password, _variant_or_default(body.variant))
    log_evaluation(
        result["variant"],
        result["score"],
        result["label"],
        sum(1 for criterion in result["criteria"] if criterion["met"]),
        source="api",
    )
    return EvaluateResponse(**result)


@router.post(
    "/check",
    response_model=PasswordCheckResponse,
    responses={422: {"model": ErrorResponse}},
)
@limiter.limit(RATE_LIMIT_DEFAULT)
async def check_password(request: Request, body: EvaluateRequest):
    """Return the strength label and suggestions for unmet criteria."""
    strength, feedback = check_password_strength(
        body.password, _variant_or_default(body.variant)
    )
    return PasswordCheckResponse(strength=strength, feedback=feedback)
