"""
Thin client for the external completion oracle.

The oracle is any OpenAI-compatible chat-completions endpoint (Groq by
default). Each call is a single attempt: no retry, caching or rate limiting.
"""

import logging
from typing import Dict, List, Optional

import requests

from .config import settings


logger = logging.getLogger(__name__)


class OracleError(Exception):
    """Raised when the oracle cannot produce a completion."""


def build_messages(prompt: str, system_message: Optional[str] = None) -> List[Dict[str, str]]:
    messages: List[Dict[str, str]] = []
    if system_message:
        messages.append({"role": "system", "content": system_message})
    messages.append({"role": "user", "content": prompt})
    return messages


def complete(prompt: str, system_message: Optional[str] = None) -> str:
    """
    Send one system/user message pair to the oracle and return its text.

    Raises
    ------
    OracleError
        On transport errors, non-success status codes, or a response body
        without a completion.
    """
    try:
        resp = requests.post(
            settings.groq_api_url,
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {settings.groq_api_key}",
            },
            json={
                "model": settings.groq_model,
                "messages": build_messages(prompt, system_message),
                "temperature": settings.oracle_temperature,
                "max_tokens": settings.oracle_max_tokens,
            },
            timeout=settings.oracle_timeout,
        )
        resp.raise_for_status()
        data = resp.json()
    except requests.RequestException as exc:
        raise OracleError(f"Oracle request failed: {exc}") from exc

    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as exc:
        logger.warning("Unexpected oracle response: %r", data)
        raise OracleError(f"Unexpected oracle response: {data}") from exc

    if not isinstance(content, str):
        logger.warning("Oracle returned no text: %r", data)
        raise OracleError(f"Oracle returned no text: {data}")
    return content
