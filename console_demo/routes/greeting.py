"""
Console Demo API - Greeting Route Handlers
===========================================

What:  GET / (fixed greeting) and POST /save (echo the body back).
Who:   Any HTTP client; no other component calls these.

POST /save is the one route that handles its own failures: any exception
while processing the body is logged with its traceback and answered with
a plain-text 500 carrying the exception message.
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from console_demo.schemas.common import ErrorResponse
from console_demo.services.credential_service import require_api_key
from console_demo.services.greeting_service import greeting_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Greeting"])


@router.get(
    "/",
    response_class=PlainTextResponse,
    summary="Fixed greeting",
)
async def hello() -> str:
    return greeting_service.greet()


@router.post(
    "/save",
    response_class=PlainTextResponse,
    dependencies=[Depends(require_api_key)],
    responses={
        200: {"description": "The request body, echoed verbatim"},
        401: {"description": "API key required and missing/invalid", "model": ErrorResponse},
        500: {"description": "Processing failed; body carries the error text"},
    },
    summary="Echo request body",
    description=(
        "Logs the raw request body and returns it unchanged. When API_KEY is "
        "configured the x-api-key header must match it."
    ),
)
async def save_user_data(request: Request) -> PlainTextResponse:
    """
    Echo the request body.

    What:    Reads the body as UTF-8 text, hands it to GreetingService,
             and returns the result with status 200.
    Errors:  Caught here, not by the global handlers, so the client
             always gets the plain-text "Error processing request: ..." form.
    """
    try:
        raw = await request.body()
        body = greeting_service.save_text(dict(request.headers), raw.decode("utf-8"))
        return PlainTextResponse(body)
    except Exception as e:
        logger.error("Save request failed: %s", str(e), exc_info=True)
        return PlainTextResponse(
            f"Error processing request: {e}",
            status_code=500,
        )
