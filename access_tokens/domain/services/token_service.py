# access_tokens/domain/services/token_service.py

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from access_tokens.domain.models.access_token_domain_model import AccessToken

TOKEN_PREFIX = "token_"


def utc_now() -> datetime:
    """Current UTC time truncated to millisecond precision."""
    return AccessTokenService.truncate_to_millis(datetime.now(timezone.utc))


class AccessTokenService:
    """
    Domain service for the token lifecycle rules.
    """

    @staticmethod
    def generate_token() -> str:
        """
        Generate an unguessable token string.

        uuid4 draws its 122 random bits from os.urandom. Uniqueness is
        enforced by the store, not checked here.

        Returns:
            "token_" followed by the canonical 36 character UUID text
        """
        return f"{TOKEN_PREFIX}{uuid.uuid4()}"

    @staticmethod
    def compute_expiry(now_utc: datetime, minutes: int) -> datetime:
        """
        Advance a timestamp by a number of minutes.

        Range checks belong to request validation.

        Args:
            now_utc: Starting instant (aware, UTC)
            minutes: Token lifetime in minutes

        Returns:
            The absolute expiry instant
        """
        return now_utc + timedelta(minutes=minutes)

    @staticmethod
    def is_expired(expires_at: datetime, now_utc: datetime) -> bool:
        """A token expiring exactly at now_utc is still valid."""
        return AccessTokenService.as_utc(now_utc) > AccessTokenService.as_utc(expires_at)

    @staticmethod
    def as_utc(value: datetime) -> datetime:
        # Some stores (SQLite) hand back naive datetimes; they hold UTC.
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    @staticmethod
    def truncate_to_millis(value: datetime) -> datetime:
        return value.replace(microsecond=value.microsecond // 1000 * 1000)

    @staticmethod
    def format_timestamp(value: datetime) -> str:
        """Render as ISO-8601 UTC with milliseconds, e.g. 2025-01-01T10:00:00.000Z."""
        utc = AccessTokenService.as_utc(value)
        return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"

    @staticmethod
    def serialize(token: AccessToken) -> Dict[str, Any]:
        """
        Map a token record to its wire form.

        Args:
            token: The token record

        Returns:
            Dict with camelCase keys and ISO-8601 timestamps
        """
        return {
            "id": token.id,
            "token": token.token,
            "userId": token.user_id,
            "scopes": list(token.scopes),
            "createdAt": AccessTokenService.format_timestamp(token.created_at),
            "expiresAt": AccessTokenService.format_timestamp(token.expires_at),
        }
