# access_tokens/application/use_cases/token_use_cases.py (async version)

"""
Service for the access token lifecycle.

This module implements issuing tokens, listing the active ones of a user
and sweeping expired ones.
"""

import logging
from datetime import datetime
from typing import Callable, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from access_tokens.application.dtos.token_dto import CreateTokenRequest
from access_tokens.application.ports.inbound import IAccessTokenUseCase
from access_tokens.application.ports.outbound import IAccessTokenRepository
from access_tokens.adapters.outbound.persistence.repositories.token_repository import token_repository
from access_tokens.domain.models.access_token_domain_model import AccessToken
from access_tokens.domain.services.token_service import AccessTokenService, utc_now

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class AsyncAccessTokenService(IAccessTokenUseCase):
    """
    Service for access token management.

    Orchestrates the token generator, the expiry calculator and the
    repository. Inputs are expected to be validated and the caller
    authorized already.
    """

    def __init__(
            self,
            db_session: AsyncSession,
            clock: Clock = utc_now,
            repository: Optional[IAccessTokenRepository] = None,
    ):
        self.db_session = db_session
        self.clock = clock
        self.repository = repository or token_repository

    async def create_token(self, request: CreateTokenRequest) -> AccessToken:
        """
        Issue a new token.

        Either the whole record is persisted and returned or nothing is.
        """
        created_at = AccessTokenService.truncate_to_millis(self.clock())
        expires_at = AccessTokenService.compute_expiry(created_at, request.expires_in_minutes)

        token = await self.repository.create(
            self.db_session,
            token=AccessTokenService.generate_token(),
            user_id=request.user_id,
            scopes=request.scopes,
            created_at=created_at,
            expires_at=expires_at,
        )
        logger.info(
            f"Issued token {token.id} ({len(request.scopes)} scopes, {request.expires_in_minutes} min)"
        )
        return token

    async def list_active_tokens(self, user_id: str) -> List[AccessToken]:
        tokens = await self.repository.list_active(self.db_session, user_id, self.clock())
        logger.debug(f"Found {len(tokens)} active tokens")
        return tokens

    async def purge_expired_tokens(self) -> int:
        deleted = await self.repository.delete_expired(self.db_session, self.clock())
        logger.info(f"Cleaned up {deleted} expired tokens")
        return deleted
