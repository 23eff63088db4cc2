"""Fake Gemini replies and clients shared by the test modules."""
from typing import Any, Dict, Optional
from unittest.mock import AsyncMock, MagicMock

from google.genai import types

TEST_API_KEY = "test-gemini-api-key"


def make_gemini_response(body: Dict[str, Any]) -> types.GenerateContentResponse:
    """Build an SDK response object from a raw generateContent JSON body."""
    return types.GenerateContentResponse.model_validate(body)


def make_text_response(text: str) -> types.GenerateContentResponse:
    return make_gemini_response({"candidates": [{"content": {"parts": [{"text": text}]}}]})


def make_recommendation(index: int) -> Dict[str, Any]:
    return {
        "title": f"Career {index}",
        "description": f"Description {index}",
        "matchReason": f"Reason {index}",
        "growthPotential": f"Growth {index}",
        "requiredSkills": [f"Skill {index}a", f"Skill {index}b", f"Skill {index}c"],
    }


def make_mock_client(response: Any = None, error: Optional[Exception] = None) -> MagicMock:
    """Mock genai.Client whose aio.models.generate_content returns or raises.

    aio.aclose is awaitable so callers can release the client afterwards.
    """
    client = MagicMock()
    if error is not None:
        client.aio.models.generate_content = AsyncMock(side_effect=error)
    else:
        client.aio.models.generate_content = AsyncMock(return_value=response)
    client.aio.aclose = AsyncMock()
    return client
