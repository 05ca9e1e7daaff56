# access_tokens/adapters/inbound/api/deps.py (async version)

"""
Dependencies for injection into API endpoints.

This module defines functions that provide dependencies via
FastAPI Depends() for API key authorization, database access and
the token service.
"""

import logging
from typing import Optional
from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from access_tokens.adapters.configuration.config import settings
from access_tokens.adapters.outbound.persistence.database import get_db
from access_tokens.adapters.outbound.security.api_key_gate import api_key_gate
from access_tokens.application.use_cases.token_use_cases import AsyncAccessTokenService, Clock
from access_tokens.domain.exceptions import InvalidCredentialsException
from access_tokens.domain.services.token_service import utc_now

# Configure logger
logger = logging.getLogger(__name__)

########################################################################
# Database Session Management
########################################################################

get_db_session = get_db


def get_clock() -> Clock:
    return utc_now


########################################################################
# API Key Authorization
########################################################################

async def require_api_key(
        x_api_key: Optional[str] = Header(None, alias="X-API-Key"),
) -> None:
    """
    Check the X-API-Key header against the configured key.

    Raises:
        InvalidCredentialsException: If a key is configured and the header is missing or differs
    """
    if not api_key_gate.authorize(x_api_key, settings.API_KEY):
        logger.warning("Request rejected: missing or invalid X-API-Key header")
        raise InvalidCredentialsException()


########################################################################
# Services
########################################################################

async def get_token_service(
        db: AsyncSession = Depends(get_db_session),
        clock: Clock = Depends(get_clock),
) -> AsyncAccessTokenService:
    return AsyncAccessTokenService(db, clock=clock)
