# access_tokens/application/ports/inbound.py

from abc import ABC, abstractmethod
from typing import List

from access_tokens.application.dtos.token_dto import CreateTokenRequest
from access_tokens.domain.models.access_token_domain_model import AccessToken


class IAccessTokenUseCase(ABC):
    """Interface for access token use cases."""

    @abstractmethod
    async def create_token(self, request: CreateTokenRequest) -> AccessToken:
        """Issue a new token for a user."""
        pass

    @abstractmethod
    async def list_active_tokens(self, user_id: str) -> List[AccessToken]:
        """List a user's unexpired tokens, newest first."""
        pass

    @abstractmethod
    async def purge_expired_tokens(self) -> int:
        """Delete expired tokens and return how many were removed."""
        pass
