# access_tokens/application/dtos/token_dto.py

"""
Schemas for access token requests and responses.

The request schemas are the declarative rule set for input validation;
fields are read only under their camelCase wire names (the aliases).
"""

from typing import Annotated, List
from pydantic import BaseModel, Field, StringConstraints, field_validator

# One year
MAX_EXPIRES_IN_MINUTES = 525600

NonEmptyStr = Annotated[str, StringConstraints(strict=True, min_length=1)]


class CreateTokenRequest(BaseModel):
    """Body of POST /api/tokens."""

    user_id: NonEmptyStr = Field(..., alias="userId", description="Owning user identifier")
    scopes: List[NonEmptyStr] = Field(..., min_length=1, description="Granted scopes, at least one")
    expires_in_minutes: int = Field(
        ...,
        alias="expiresInMinutes",
        strict=True,
        gt=0,
        le=MAX_EXPIRES_IN_MINUTES,
        description="Token lifetime in minutes (1 to 525600)",
    )

    @field_validator("expires_in_minutes", mode="before")
    @classmethod
    def integral_float_to_int(cls, value):
        # JSON has one number type: 60.0 is the integer 60, 60.5 is not
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value


class ListTokensRequest(BaseModel):
    """Query of GET /api/tokens."""

    user_id: NonEmptyStr = Field(..., alias="userId", description="Owning user identifier")


class TokenOutput(BaseModel):
    """
    Wire form of a token record.

    Timestamps are ISO-8601 UTC strings with millisecond precision.
    """
    id: str
    token: str
    userId: str
    scopes: List[str]
    createdAt: str = Field(..., examples=["2025-01-01T10:00:00.000Z"])
    expiresAt: str = Field(..., examples=["2025-01-01T11:00:00.000Z"])


class ErrorOutput(BaseModel):
    error: str


class FieldErrorOutput(BaseModel):
    field: str
    message: str


class ValidationErrorOutput(ErrorOutput):
    details: List[FieldErrorOutput]
