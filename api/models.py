"""Pydantic models for API request/response validation.

Defines data structures for all API endpoints.
"""

from typing import Optional, Union

from pydantic import BaseModel, Field

from core.config import MAX_PASSWORD_INPUT_LENGTH


class EvaluateRequest(BaseModel):
    """Request model for password scoring.

    An empty password is valid input and scores zero.
    """
    password: str = Field(
        ..., max_length=MAX_PASSWORD_INPUT_LENGTH, description="Password to score"
    )
    variant: Optional[str] = Field(
        default=None, description="Rule variant ('standard' or 'extended')"
    )


class CriterionResultModel(BaseModel):
    """Outcome of a single criterion."""
    id: str
    met: bool
    message: str


class EvaluateResponse(BaseModel):
    """Response model for a scored password."""
    score: int
    max_score: int
    variant: str
    label: str
    color: str
    percent: int = Field(..., ge=0, le=100)
    criteria: list[CriterionResultModel]


class PasswordCheckResponse(BaseModel):
    """Response model for the label-and-suggestions check."""
    strength: str
    feedback: list[str]


class VariantInfo(BaseModel):
    """Description of one rule variant."""
    name: str
    max_score: int
    criteria: list[str]


class VariantsResponse(BaseModel):
    """Available rule variants."""
    default: str
    variants: list[VariantInfo]


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: str
    version: str


class ErrorDetail(BaseModel):
    """Location and message of one validation error."""
    loc: list[str]
    msg: str


class ErrorResponse(BaseModel):
    """Error body for rejected requests."""
    detail: Union[str, list[ErrorDetail]]
    error: str
