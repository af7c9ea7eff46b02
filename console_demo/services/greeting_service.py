"""
Console Demo API - Greeting Service
====================================

What:  Logic behind GET / and POST /save.
How:   Stateless; the route passes in what it read from the request.
"""

import logging
from typing import Mapping

from console_demo.schemas.common import SaveEnvelope

logger = logging.getLogger(__name__)

GREETING = "Hello Java"
SAVE_MESSAGE = "Data saved successfully"


class GreetingService:
    """
    Responsibilities:
        - greet(): fixed greeting for the root path
        - save_text(): log the submitted text and hand it back unchanged
    """

    def greet(self) -> str:
        return GREETING

    def save_text(self, headers: Mapping[str, str], body: str) -> str:
        """
        Log the request body and return it verbatim.

        Args:
            headers: Request headers. Accepted for parity with the HTTP
                     surface; credential checks happen in CredentialService.
            body:    Raw request body, decoded as text.

        Returns:
            The body, unchanged.
        """
        logger.info("Save request body: %s", body)

        envelope = SaveEnvelope(message=SAVE_MESSAGE)
        logger.info("Save envelope: %s", envelope.model_dump())

        return body


# ── Singleton Instance ────────────────────────────────────────────────────
greeting_service = GreetingService()
