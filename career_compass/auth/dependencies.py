"""
FastAPI dependency functions for the Gemini credential and the advisor.

The credential is an opaque Gemini API key. Clients that have their own key
send it in the X-Gemini-Api-Key header on each request; otherwise the
server-side GEMINI_API_KEY default is used by the advisor. Keys are never
validated here beyond being non-blank, and never logged.
"""

import logging
from typing import Annotated, Optional

from fastapi import Header, Request

from career_compass.services.career_advisor import CareerAdvisor

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-Gemini-Api-Key"


async def get_request_api_key(
    x_gemini_api_key: Annotated[Optional[str], Header(alias=API_KEY_HEADER)] = None,
) -> Optional[str]:
    """
    Read the caller-supplied Gemini key.

    Returns:
        The trimmed key, or None when the header is missing or blank.
    """
    if x_gemini_api_key is None:
        return None

    api_key = x_gemini_api_key.strip()
    if not api_key:
        logger.debug(f"Blank {API_KEY_HEADER} header ignored")
        return None

    return api_key


def get_career_advisor(request: Request) -> CareerAdvisor:
    """Return the advisor built at application start-up."""
    return request.app.state.career_advisor
