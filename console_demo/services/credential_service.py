"""
Console Demo API - Credential Service
======================================

What:  Optional shared-key check for write endpoints.
Why:   Lets an operator close POST /save without touching handler code.
How:   When settings.api_key is non-empty, requests must send the same
       value in the x-api-key header. Comparison is constant-time.
       When settings.api_key is empty, every request passes.

Usage in a route:
    @router.post("/save", dependencies=[Depends(require_api_key)])
"""

import hmac
import logging
from typing import Optional

from fastapi import Header

from console_demo.config import settings
from console_demo.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

API_KEY_HEADER = "x-api-key"


class CredentialService:
    """Validates presented API keys against a configured secret."""

    def __init__(self, api_key: Optional[str] = None):
        # None means "read from settings on every call" so tests and
        # operators can change settings.api_key at runtime.
        self._api_key = api_key

    @property
    def expected_key(self) -> str:
        return self._api_key if self._api_key is not None else settings.api_key

    @property
    def enabled(self) -> bool:
        return bool(self.expected_key)

    def is_valid(self, presented: Optional[str]) -> bool:
        if not self.enabled:
            return True
        if not presented:
            return False
        return hmac.compare_digest(presented.encode("utf-8"), self.expected_key.encode("utf-8"))

    def verify(self, presented: Optional[str]) -> None:
        """
        Raise AuthenticationError unless the presented key is acceptable.

        The context records whether a key was sent at all; the key
        itself is never logged.
        """
        if self.is_valid(presented):
            return
        logger.warning("Rejected request: %s header %s", API_KEY_HEADER,
                       "invalid" if presented else "missing")
        raise AuthenticationError(
            message="Missing or invalid API key",
            context={"header": API_KEY_HEADER, "present": bool(presented)},
        )


credential_service = CredentialService()


async def require_api_key(
    x_api_key: Optional[str] = Header(default=None, alias=API_KEY_HEADER),
) -> None:
    """FastAPI dependency wrapping credential_service.verify()."""
    credential_service.verify(x_api_key)
