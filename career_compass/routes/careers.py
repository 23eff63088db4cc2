"""
FastAPI routes for career analysis and career chat.

Every endpoint is public. A Gemini key may be supplied per request in the
X-Gemini-Api-Key header; without one the server default is used, and without
that the advisor answers with its static fallbacks. Advisor failures never
surface as HTTP errors: the response always has the documented shape.

Endpoints:
- POST /careers/analyze: Recommend careers for interests and skills
- POST /careers/chat/start: Open a chat about one career
- POST /careers/chat: Ask a follow-up question about one career
- GET /careers/credential: Report whether a credential is available
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends

from career_compass.auth.dependencies import get_career_advisor, get_request_api_key
from career_compass.schemas.careers import (
    AnalysisResult,
    CareerProfile,
    ChatRequest,
    ChatStartRequest,
    ChatTranscript,
    CredentialStatus,
)
from career_compass.services.career_advisor import CareerAdvisor
from career_compass.services.chat_service import ask_career_question, start_chat

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(
    prefix="/careers",
    tags=["careers"]
)


# ============================================================================
# ENDPOINTS
# ============================================================================

@router.post(
    "/analyze",
    response_model=AnalysisResult,
    status_code=200,
    summary="Recommend careers for a profile",
    description="""
    Matches the user's interests and skills to careers using Gemini.

    **Credential:** Optional `X-Gemini-Api-Key` header.

    **Frontend Flow:**
    1. User adds interests and skills (duplicates and blanks are dropped)
    2. User clicks "Analyze"
    3. POST /careers/analyze, show the loading screen until it returns
    4. Render `summary` and `recommendations`

    `source` is `fallback` when no credential was available or the model
    reply could not be used.
    """
)
async def analyze_profile_endpoint(
    profile: CareerProfile,
    api_key: Optional[str] = Depends(get_request_api_key),
    advisor: CareerAdvisor = Depends(get_career_advisor),
) -> AnalysisResult:
    logger.info(
        f"POST /careers/analyze called with {len(profile.interests)} interest(s), "
        f"{len(profile.skills)} skill(s)"
    )

    result = await advisor.analyze(profile, api_key)

    logger.info(f"Returning analysis with source={result.source}")
    return result


@router.post(
    "/chat/start",
    response_model=ChatTranscript,
    status_code=200,
    summary="Open a chat about one career",
)
async def start_chat_endpoint(request: ChatStartRequest) -> ChatTranscript:
    """Greeting message plus suggested questions; no model call."""
    return start_chat(request.career_title)


@router.post(
    "/chat",
    response_model=ChatTranscript,
    status_code=200,
    summary="Ask a question about one career",
    description="""
    Sends one question to the career counselor and returns the transcript.

    **Credential:** Optional `X-Gemini-Api-Key` header.

    The response holds the submitted `messages` unchanged, followed by the
    user's question and the assistant's answer. The answer is never empty.
    """
)
async def chat_endpoint(
    request: ChatRequest,
    api_key: Optional[str] = Depends(get_request_api_key),
    advisor: CareerAdvisor = Depends(get_career_advisor),
) -> ChatTranscript:
    logger.info(f"POST /careers/chat called for career_title='{request.career_title[:50]}'")

    return await ask_career_question(
        advisor=advisor,
        career_title=request.career_title,
        question=request.question,
        history=request.messages,
        api_key=api_key,
    )


@router.get(
    "/credential",
    response_model=CredentialStatus,
    status_code=200,
    summary="Report credential availability",
    description=(
        "Lets the client decide whether to ask the user for a Gemini key. "
        "Never echoes any key."
    ),
)
async def credential_status_endpoint(
    api_key: Optional[str] = Depends(get_request_api_key),
    advisor: CareerAdvisor = Depends(get_career_advisor),
) -> CredentialStatus:
    return CredentialStatus(
        default_configured=advisor.has_default_credential,
        header_supplied=api_key is not None,
    )
