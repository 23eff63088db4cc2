"""
Career Advisor Service - Gemini prompt/response adapter

This service turns a user's interests and skills into career recommendations
and answers follow-up questions about one career, using Google's Gemini model.

Architecture:
- Pattern: Single-shot LLM (one generate_content call per operation, no retries)
- API: Google Gen AI Python SDK (google-genai), async client
- Temperature: 0.7 for both operations
- Output: JSON parsed from the reply text for analysis, free text for questions

Failure policy:
- No credential: return the static fallback without touching the network
- Transport error, non-2xx status, timeout: log and return the static fallback
- Reply without usable JSON or not matching AnalysisResult: static fallback
- Neither operation ever raises to its caller

IMPORTANT: a parsed AnalysisResult is returned as the model produced it. The
number of recommendations and the titles are not checked against the
reference catalog.
"""

import json
import logging
from dataclasses import dataclass
from typing import Optional

from google import genai
from google.genai import errors, types
from pydantic import ValidationError

from career_compass.agents.career.prompts import (
    build_analysis_prompt,
    build_question_prompt,
)
from career_compass.schemas.careers import (
    AnalysisResult,
    CareerProfile,
    CareerRecommendation,
)
from career_compass.utils.logging import preview

logger = logging.getLogger(__name__)

TEMPERATURE = 0.7
ANALYSIS_MAX_OUTPUT_TOKENS = 2048
QUESTION_MAX_OUTPUT_TOKENS = 1024

NO_ANSWER_TEXT = "I apologize, but I couldn't generate a response. Please try again."


# =============================================================================
# CONFIGURATION
# =============================================================================

@dataclass(frozen=True)
class AdvisorConfig:
    """Connection settings for the Gemini API, fixed for the life of the app."""
    default_api_key: str = ""
    model: str = "gemini-2.5-flash"
    base_url: Optional[str] = None
    api_version: str = "v1beta"
    timeout_ms: int = 30000
    # 0 disables thinking so it cannot eat the output token budget; None omits the setting
    thinking_budget: Optional[int] = 0


# =============================================================================
# STATIC FALLBACKS
# =============================================================================

FALLBACK_RECOMMENDATIONS = (
    CareerRecommendation(
        title="UX/UI Designer",
        description="Create intuitive and engaging user experiences for digital products.",
        match_reason="Your creative interests align perfectly with design thinking and user-centered approaches.",
        growth_potential="High demand with 15% projected growth. Remote opportunities abundant.",
        required_skills=["Figma", "User Research", "Prototyping", "Design Systems"],
    ),
    CareerRecommendation(
        title="Product Manager",
        description="Lead product strategy and coordinate cross-functional teams to deliver impactful solutions.",
        match_reason="Your analytical and communication skills are essential for product leadership.",
        growth_potential="Excellent growth trajectory with median salaries exceeding $120k.",
        required_skills=["Product Strategy", "Stakeholder Management", "Data Analysis", "Agile"],
    ),
    CareerRecommendation(
        title="Data Analyst",
        description="Transform raw data into actionable insights that drive business decisions.",
        match_reason="Strong analytical capabilities make you well-suited for data-driven roles.",
        growth_potential="Rapidly growing field with 25% projected growth over the next decade.",
        required_skills=["SQL", "Python", "Tableau", "Statistical Analysis"],
    ),
    CareerRecommendation(
        title="Content Strategist",
        description="Develop and execute content strategies that engage audiences and achieve business goals.",
        match_reason="Your communication skills and creative thinking are perfect for strategic content roles.",
        growth_potential="Growing demand in digital marketing with diverse industry opportunities.",
        required_skills=["SEO", "Content Planning", "Analytics", "Copywriting"],
    ),
    CareerRecommendation(
        title="Software Engineer",
        description="Build scalable applications and solve complex technical challenges.",
        match_reason="Your problem-solving abilities and technical aptitude suit engineering roles.",
        growth_potential="Exceptional demand with competitive salaries and continuous learning opportunities.",
        required_skills=["JavaScript", "React", "Node.js", "System Design"],
    ),
)


def build_fallback_analysis(profile: CareerProfile) -> AnalysisResult:
    """Static analysis result; the summary quotes every interest and skill."""
    summary = (
        f"Based on your unique combination of interests ({', '.join(profile.interests)}) "
        f"and skills ({', '.join(profile.skills)}), we've identified career paths that "
        f"leverage your strengths while offering strong growth potential and market demand."
    )
    return AnalysisResult(
        summary=summary,
        recommendations=[item.model_copy(deep=True) for item in FALLBACK_RECOMMENDATIONS],
        source="fallback",
    )


def build_fallback_answer(question: str) -> str:
    return (
        f'Based on your question about "{question}", I recommend researching specific '
        f"educational requirements, certification exams, and skill development paths for "
        f"this career. Industry associations and professional organizations typically "
        f"provide detailed guidance on entry requirements and career progression."
    )


# =============================================================================
# REPLY REDUCTION
# =============================================================================

def extract_reply_text(response: Optional[types.GenerateContentResponse]) -> str:
    """
    Walk candidates[0].content.parts[0].text, treating any missing step as "".

    Every field of the SDK response type is optional, so each level is
    checked before it is used.
    """
    if response is None or not response.candidates:
        return ""

    candidate = response.candidates[0]
    if candidate is None or candidate.content is None or not candidate.content.parts:
        return ""

    part = candidate.content.parts[0]
    if part is None or not part.text:
        return ""

    return part.text


def _balanced_span(text: str, start: int) -> Optional[str]:
    """Return the balanced {...} span opening at text[start], or None."""
    depth = 0
    in_string = False
    escaped = False
    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue

        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return text[start:index + 1]

    return None


def extract_json_object(text: str) -> Optional[str]:
    """
    Return the first balanced top-level {...} span in text, or None.

    A stray "{" in leading commentary that never closes is skipped and the
    scan resumes at the next "{". Braces inside JSON string literals are
    ignored. No attempt is made to repair an object that never closes.
    """
    start = text.find("{")
    while start >= 0:
        span = _balanced_span(text, start)
        if span is not None:
            return span
        start = text.find("{", start + 1)

    return None


def parse_analysis(text: str) -> Optional[AnalysisResult]:
    """
    Decode and validate an AnalysisResult from raw model text.

    Returns None when no object is found, the JSON is malformed, or any
    required field is missing or has the wrong type.
    """
    json_content = extract_json_object(text)
    if json_content is None:
        logger.warning(f"No JSON object found in model reply: {preview(text)!r}")
        return None

    try:
        response_data = json.loads(json_content)
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse JSON from model reply: {e}")
        logger.error(f"Raw content: {preview(json_content)!r}")
        return None

    if not isinstance(response_data, dict):
        logger.error("Model reply JSON is not an object")
        return None

    try:
        result = AnalysisResult.model_validate(response_data)
    except ValidationError as e:
        logger.error(f"Model reply does not match AnalysisResult: {e.error_count()} error(s)")
        return None

    return result.model_copy(update={"source": "model"})


# =============================================================================
# ADVISOR
# =============================================================================

class CareerAdvisor:
    """
    Prompt/response adapter for the Gemini API.

    Build one instance at start-up and pass it to whoever needs it. The
    instance holds configuration only, so concurrent calls share nothing.
    """

    def __init__(self, config: AdvisorConfig):
        self.config = config

    def resolve_credential(self, api_key: Optional[str] = None) -> Optional[str]:
        """Explicit key if non-blank, else the configured default, else None."""
        for candidate in (api_key, self.config.default_api_key):
            if candidate and candidate.strip():
                return candidate.strip()
        return None

    @property
    def has_default_credential(self) -> bool:
        return bool(self.config.default_api_key and self.config.default_api_key.strip())

    def _build_client(self, api_key: str) -> genai.Client:
        http_options = types.HttpOptions(
            api_version=self.config.api_version,
            base_url=self.config.base_url,
            timeout=self.config.timeout_ms,
        )
        return genai.Client(api_key=api_key, http_options=http_options)

    async def _generate(
        self, api_key: str, prompt: str, max_output_tokens: int
    ) -> types.GenerateContentResponse:
        config = types.GenerateContentConfig(
            temperature=TEMPERATURE,
            max_output_tokens=max_output_tokens,
        )
        if self.config.thinking_budget is not None:
            config.thinking_config = types.ThinkingConfig(
                thinking_budget=self.config.thinking_budget
            )

        # One client per call (the key may differ per request); always release its pool
        client = self._build_client(api_key)
        try:
            return await client.aio.models.generate_content(
                model=self.config.model,
                contents=prompt,
                config=config,
            )
        finally:
            await client.aio.aclose()

    async def analyze(
        self, profile: CareerProfile, api_key: Optional[str] = None
    ) -> AnalysisResult:
        """
        Recommend careers for a profile.

        Args:
            profile: Normalised interests and skills, each non-empty
            api_key: Credential supplied by the caller (optional)

        Returns:
            AnalysisResult parsed from the model reply, or the static
            fallback. Never raises.
        """
        logger.info(
            f"analyze called with {len(profile.interests)} interest(s) "
            f"and {len(profile.skills)} skill(s)"
        )

        key = self.resolve_credential(api_key)
        if key is None:
            logger.info("No Gemini credential available, returning static analysis")
            return build_fallback_analysis(profile)

        prompt = build_analysis_prompt(profile.interests, profile.skills)

        try:
            response = await self._generate(key, prompt, ANALYSIS_MAX_OUTPUT_TOKENS)
            text = extract_reply_text(response)
        except errors.APIError as e:
            logger.error(f"Gemini API error during analysis: code={e.code} status={e.status}")
            return build_fallback_analysis(profile)
        except Exception as e:
            logger.error(f"Error calling Gemini API during analysis: {type(e).__name__}: {e}")
            return build_fallback_analysis(profile)

        if not text:
            logger.error("Empty text in Gemini analysis response")
            return build_fallback_analysis(profile)

        result = parse_analysis(text)
        if result is None:
            logger.error("Invalid analysis reply from Gemini, returning static analysis")
            return build_fallback_analysis(profile)

        logger.info(f"Returning {len(result.recommendations)} model recommendation(s)")
        return result

    async def answer_question(
        self, question: str, career_title: str, api_key: Optional[str] = None
    ) -> str:
        """
        Answer a follow-up question about one career.

        Returns the model's text untouched, the apology text when the reply
        carries no text, or the templated fallback. Never raises and never
        returns an empty string.
        """
        logger.info(f"answer_question called for career_title='{career_title[:50]}'")

        key = self.resolve_credential(api_key)
        if key is None:
            logger.info("No Gemini credential available, returning templated answer")
            return build_fallback_answer(question)

        prompt = build_question_prompt(question, career_title)

        try:
            response = await self._generate(key, prompt, QUESTION_MAX_OUTPUT_TOKENS)
            text = extract_reply_text(response)
        except errors.APIError as e:
            logger.error(f"Gemini API error during question: code={e.code} status={e.status}")
            return build_fallback_answer(question)
        except Exception as e:
            logger.error(f"Error calling Gemini API during question: {type(e).__name__}: {e}")
            return build_fallback_answer(question)

        if not text.strip():
            logger.warning("Gemini returned no answer text")
            return NO_ANSWER_TEXT

        return text
