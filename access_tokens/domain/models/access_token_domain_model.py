# access_tokens/domain/models/access_token_domain_model.py

from dataclasses import dataclass
from datetime import datetime
from typing import Tuple


@dataclass(frozen=True)
class AccessToken:
    """Domain model for an issued access token. Never mutated after creation."""
    id: str
    token: str  # Bearer secret, returned as-is
    user_id: str
    scopes: Tuple[str, ...]
    created_at: datetime
    expires_at: datetime
