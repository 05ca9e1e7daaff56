# access_tokens/domain/__init__.py

"""
Main module for the application domain components.

This module exports the domain exceptions, models and services.
"""

from access_tokens.domain.exceptions import (
    DomainException,
    FieldError,
    InvalidInputException,
    InvalidCredentialsException,
    ResourceAlreadyExistsException,
    DatabaseOperationException,
)
from access_tokens.domain.models.access_token_domain_model import AccessToken
from access_tokens.domain.services.token_service import AccessTokenService, utc_now

__all__ = [
    "DomainException",
    "FieldError",
    "InvalidInputException",
    "InvalidCredentialsException",
    "ResourceAlreadyExistsException",
    "DatabaseOperationException",
    "AccessToken",
    "AccessTokenService",
    "utc_now",
]
