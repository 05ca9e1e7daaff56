# access_tokens/application/ports/outbound.py

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, List, Sequence

from access_tokens.domain.models.access_token_domain_model import AccessToken


class IAccessTokenRepository(ABC):
    """Interface for access token persistence."""

    @abstractmethod
    async def create(
            self,
            db: Any,
            token: str,
            user_id: str,
            scopes: Sequence[str],
            created_at: datetime,
            expires_at: datetime,
    ) -> AccessToken:
        """Persist a new token record."""

    @abstractmethod
    async def list_active(self, db: Any, user_id: str, now: datetime) -> List[AccessToken]:
        """List a user's tokens that expire after `now`, newest first."""

    @abstractmethod
    async def delete_expired(self, db: Any, now: datetime) -> int:
        """Delete tokens that expired at or before `now`."""
