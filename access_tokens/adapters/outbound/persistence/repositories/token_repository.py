# access_tokens/adapters/outbound/persistence/repositories/token_repository.py (async version)

import logging
from datetime import datetime
from typing import List, Sequence
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from access_tokens.adapters.outbound.persistence.models import AccessTokenModel
from access_tokens.application.ports.outbound import IAccessTokenRepository
from access_tokens.domain.models.access_token_domain_model import AccessToken
from access_tokens.domain.exceptions import DatabaseOperationException, ResourceAlreadyExistsException

logger = logging.getLogger(__name__)


class AsyncTokenRepository(IAccessTokenRepository):
    """Repository for issued access tokens."""

    @staticmethod
    def _to_domain(model: AccessTokenModel) -> AccessToken:
        return AccessToken(
            id=model.id,
            token=model.token,
            user_id=model.user_id,
            scopes=tuple(model.scopes),
            created_at=model.created_at,
            expires_at=model.expires_at,
        )

    async def create(
            self,
            db: AsyncSession,
            token: str,
            user_id: str,
            scopes: Sequence[str],
            created_at: datetime,
            expires_at: datetime,
    ) -> AccessToken:
        """
        Insert a token record.

        Args:
            db: Async database session
            token: Bearer secret
            user_id: Owning user
            scopes: Granted scopes, stored in order
            created_at: Creation instant
            expires_at: Expiry instant

        Returns:
            The persisted record, including its assigned id

        Raises:
            ResourceAlreadyExistsException: The token string already exists
            DatabaseOperationException: Any other store failure
        """
        try:
            record = AccessTokenModel(
                token=token,
                user_id=user_id,
                scopes=list(scopes),
                created_at=created_at,
                expires_at=expires_at,
            )
            db.add(record)
            await db.commit()
            await db.refresh(record)
            logger.info(f"Token created: {record.id}")
            return self._to_domain(record)
        except IntegrityError as e:
            await db.rollback()
            raise ResourceAlreadyExistsException(
                detail="Token string already exists",
                original_error=e
            )
        except (SQLAlchemyError, OSError) as e:
            await db.rollback()
            raise DatabaseOperationException(
                detail="Error creating token",
                original_error=e
            )

    async def list_active(self, db: AsyncSession, user_id: str, now: datetime) -> List[AccessToken]:
        """
        List unexpired tokens of a user, most recently created first.

        Args:
            db: Async database session
            user_id: Exact user identifier
            now: Instant the expiry filter is evaluated at

        Returns:
            Records with expires_at strictly after `now`
        """
        try:
            query = (
                select(AccessTokenModel)
                .where(AccessTokenModel.user_id == user_id, AccessTokenModel.expires_at > now)
                .order_by(AccessTokenModel.created_at.desc())
            )
            result = await db.execute(query)
            return [self._to_domain(row) for row in result.scalars().all()]
        except (SQLAlchemyError, OSError) as e:
            raise DatabaseOperationException(
                detail="Error listing active tokens",
                original_error=e
            )

    async def delete_expired(self, db: AsyncSession, now: datetime) -> int:
        """
        Remove expired tokens to keep the table size manageable.

        Args:
            db: Async database session
            now: Tokens with expires_at at or before this instant are deleted

        Returns:
            Number of records deleted
        """
        try:
            result = await db.execute(
                delete(AccessTokenModel).where(AccessTokenModel.expires_at <= now)
            )
            await db.commit()
            return result.rowcount or 0
        except (SQLAlchemyError, OSError) as e:
            await db.rollback()
            raise DatabaseOperationException(
                detail="Error cleaning up expired tokens",
                original_error=e
            )


# Create instance
token_repository = AsyncTokenRepository()
