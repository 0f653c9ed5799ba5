"""
Relay endpoints forwarding prompts to the completion oracle.

Each request is handled independently with a single oracle call. The relay
holds no state: no caching, retries or rate limiting.
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from . import oracle
from .core import create_fallback_title
from .prompts import SIMPLIFY_SYSTEM_MESSAGE, title_prompt


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["relay"])


class PromptRequest(BaseModel):
    prompt: str


class SimplifyResponse(BaseModel):
    simplified: str


class SimplifyError(BaseModel):
    error: str
    details: str


class TitleResponse(BaseModel):
    title: str


@router.post(
    "/simplify",
    response_model=SimplifyResponse,
    responses={500: {"model": SimplifyError}},
)
def simplify(payload: PromptRequest):
    """Return a 1-2 sentence simpler restatement of the problem."""
    try:
        simplified = oracle.complete(payload.prompt, SIMPLIFY_SYSTEM_MESSAGE)
    except oracle.OracleError as exc:
        logger.exception("Error simplifying question")
        return JSONResponse(
            status_code=500,
            content=SimplifyError(error="Failed to simplify question", details=str(exc)).model_dump(),
        )
    return SimplifyResponse(simplified=simplified)


@router.post("/generate-title", response_model=TitleResponse)
def generate_title(payload: PromptRequest) -> TitleResponse:
    """
    Ask the oracle for a 2-3 word title.

    Never fails: when the oracle is unavailable the deterministic fallback
    title is returned instead.
    """
    try:
        title = oracle.complete(title_prompt(payload.prompt))
    except oracle.OracleError:
        logger.exception("Error generating title")
        return TitleResponse(title=create_fallback_title(payload.prompt))
    return TitleResponse(title=title.strip())
