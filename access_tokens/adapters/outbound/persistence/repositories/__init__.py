# access_tokens/adapters/outbound/persistence/repositories/__init__.py (async version)

"""
Repository module.

Exports the repository classes and their singleton instances.
"""

from access_tokens.adapters.outbound.persistence.repositories.token_repository import (
    AsyncTokenRepository,
    token_repository,
)

__all__ = [
    "AsyncTokenRepository",
    "token_repository",
]
