# access_tokens/application/use_cases/__init__.py (async version)

"""
Application service module.

This package contains the application services that implement the
token lifecycle use cases.
"""

from access_tokens.application.use_cases.token_use_cases import AsyncAccessTokenService

__all__ = [
    "AsyncAccessTokenService",
]
