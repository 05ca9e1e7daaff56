# access_tokens/adapters/inbound/api/endpoints/token_endpoint.py (async version)

import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Request, status

from access_tokens.application.use_cases.token_use_cases import AsyncAccessTokenService
from access_tokens.adapters.inbound.api.deps import get_token_service, require_api_key
from access_tokens.application.dtos.token_dto import (
    CreateTokenRequest,
    ErrorOutput,
    TokenOutput,
    ValidationErrorOutput,
)
from access_tokens.domain.exceptions import FieldError, InvalidInputException
from access_tokens.domain.services.token_service import AccessTokenService
from access_tokens.shared.utils.request_validation import (
    validate_create_token_request,
    validate_list_tokens_request,
)

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_api_key)])

ERROR_RESPONSES = {
    400: {"model": ValidationErrorOutput, "description": "Validation failed"},
    401: {"model": ErrorOutput, "description": "Missing or invalid X-API-Key header"},
    500: {"model": ErrorOutput, "description": "Internal server error"},
}


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=TokenOutput,
    summary="Create Token - Issue a new access token",
    description="Issues an opaque bearer token for a user with the given scopes and lifetime.",
    responses=ERROR_RESPONSES,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {
                    "schema": CreateTokenRequest.model_json_schema(by_alias=True),
                    "example": {"userId": "123", "scopes": ["read", "write"], "expiresInMinutes": 60},
                }
            },
        }
    },
)
async def create_token(
        request: Request,
        service: AsyncAccessTokenService = Depends(get_token_service),
):
    # Parsed only once require_api_key has passed
    try:
        payload = await request.json()
    except ValueError:
        raise InvalidInputException(details=[FieldError(field="body", message="Body must be valid JSON")])

    data = validate_create_token_request(payload)
    token = await service.create_token(data)
    return AccessTokenService.serialize(token)


@router.get(
    "",
    response_model=List[TokenOutput],
    summary="List Tokens - Active tokens of a user",
    description="Returns the user's unexpired tokens, most recently created first.",
    responses=ERROR_RESPONSES,
)
async def list_tokens(
        user_id: Optional[str] = Query(None, alias="userId", description="User identifier"),
        service: AsyncAccessTokenService = Depends(get_token_service),
):
    data = validate_list_tokens_request(user_id)
    tokens = await service.list_active_tokens(data.user_id)
    return [AccessTokenService.serialize(token) for token in tokens]
