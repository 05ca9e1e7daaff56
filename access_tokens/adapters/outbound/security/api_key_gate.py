# access_tokens/adapters/outbound/security/api_key_gate.py

import logging
import secrets
from typing import Optional

logger = logging.getLogger(__name__)


class ApiKeyGate:
    """
    Shared-secret check for the X-API-Key header.

    Without a configured key every request is let through (local
    development only) and a warning is logged the first time.
    """

    OPEN_MODE_WARNING = "API_KEY not configured. Authentication is disabled."

    def __init__(self):
        self._open_mode_warned = False

    def warn_open_mode(self) -> None:
        if not self._open_mode_warned:
            logger.warning(self.OPEN_MODE_WARNING)
            self._open_mode_warned = True

    def authorize(self, presented_key: Optional[str], configured_key: Optional[str]) -> bool:
        """
        Args:
            presented_key: Value of the X-API-Key header, if any
            configured_key: Key configured for the process, if any

        Returns:
            True if the request may proceed
        """
        if not configured_key:
            self.warn_open_mode()
            return True

        if presented_key is None:
            return False

        return secrets.compare_digest(presented_key.encode("utf-8"), configured_key.encode("utf-8"))


api_key_gate = ApiKeyGate()
