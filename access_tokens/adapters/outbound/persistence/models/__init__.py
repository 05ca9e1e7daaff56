# access_tokens/adapters/outbound/persistence/models/__init__.py

"""
Data models module.

Exports every SQLAlchemy model so that importing this package registers
them on ``Base.metadata``.
"""

from access_tokens.adapters.outbound.persistence.database import Base
from access_tokens.adapters.outbound.persistence.models.access_token_model import AccessTokenModel

__all__ = [
    "Base",
    "AccessTokenModel",
]
