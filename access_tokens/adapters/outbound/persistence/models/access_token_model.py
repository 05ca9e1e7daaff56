# access_tokens/adapters/outbound/persistence/models/access_token_model.py

"""
Model for issued access tokens.

Column names keep the camelCase names of the existing ``tokens`` table
while the Python attributes are snake_case.
"""

import uuid
from sqlalchemy import Column, String, DateTime, JSON, func
from sqlalchemy.dialects.postgresql import ARRAY
from access_tokens.adapters.outbound.persistence.database import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


class AccessTokenModel(Base):
    """
    Model that stores one issued bearer token.

    Attributes:
        id: Opaque identifier assigned at insert
        token: Bearer secret, unique across the table
        user_id: Owning user, plain string (no users table)
        scopes: Ordered list of granted scopes
        created_at: Insert time
        expires_at: Absolute expiry, indexed for the active filter
    """
    __tablename__ = "tokens"

    id = Column(String, primary_key=True, default=generate_uuid)
    token = Column(String, unique=True, nullable=False)
    user_id = Column("userId", String, nullable=False, index=True)
    scopes = Column(ARRAY(String).with_variant(JSON(), "sqlite"), nullable=False)
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())
    expires_at = Column("expiresAt", DateTime(timezone=True), nullable=False, index=True)

    def __repr__(self) -> str:
        # The secret itself is never rendered
        return f"<AccessToken(id={self.id}, user_id={self.user_id}, expires_at={self.expires_at})>"
