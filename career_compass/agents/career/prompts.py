"""
Career Advisor Prompt Templates

Contains the prompt builders for the two Career Advisor operations.

Architecture:
- Pattern: Single-shot LLM (one generate_content call per user action)
- Model: Gemini (configured via GEMINI_MODEL)
- Temperature: 0.7 (moderate variety in recommendations and answers)
- Output: JSON object for analysis (parsed from text), free text for questions

Both builders are pure: the same inputs always produce the same prompt.
"""

from typing import Sequence

from career_compass.agents.career.catalog import render_catalog

# =============================================================================
# ROLE
# =============================================================================

CAREER_COUNSELOR_ROLE = (
    "You are an expert career counselor with deep knowledge of hidden, "
    "high-paying careers."
)

RECOMMENDATION_COUNT = 5


# =============================================================================
# ANALYSIS PROMPT
# =============================================================================

_ANALYSIS_TEMPLATE = """{role} Analyze the following user profile and match them to careers from the comprehensive database below.

User Interests: {interests}
User Skills: {skills}

{catalog}

MATCHING CRITERIA:
1. Match user interests and skills to careers that align with their temperament
2. Consider both direct matches and transferable skills
3. If no perfect match exists, recommend high-paying careers that utilize their core strengths
4. Prioritize careers with hidden pay factors (danger pay, stress pay, scarcity premiums, etc.)

Provide exactly {count} career recommendations in JSON format:
{{
  "summary": "A 2-3 sentence analysis explaining the career direction based on their profile",
  "recommendations": [
    {{
      "title": "Exact Career Title from Database",
      "description": "What the job involves (from the database)",
      "matchReason": "Specific explanation of why their interests/skills align",
      "growthPotential": "Include the hidden pay factor if mentioned in database",
      "requiredSkills": ["3-5 specific skills needed"]
    }}
  ]
}}

Return ONLY valid JSON, no additional text."""


def build_analysis_prompt(interests: Sequence[str], skills: Sequence[str]) -> str:
    """
    Build the prompt for the profile analysis call.

    Args:
        interests: Normalised user interests, in entry order
        skills: Normalised user skills, in entry order

    Returns:
        Prompt text embedding the profile, the reference catalog and the
        expected JSON output shape.
    """
    return _ANALYSIS_TEMPLATE.format(
        role=CAREER_COUNSELOR_ROLE,
        interests=", ".join(interests),
        skills=", ".join(skills),
        catalog=render_catalog(),
        count=RECOMMENDATION_COUNT,
    )


# =============================================================================
# FOLLOW-UP QUESTION PROMPT
# =============================================================================

QUESTION_TOPICS = (
    "Required tests/examinations",
    "Educational qualifications needed",
    "Key subjects to focus on",
    "Skills development path",
    "Industry insights",
    "Salary expectations",
    "Career progression",
)


def build_question_prompt(question: str, career_title: str) -> str:
    """Build the prompt for a follow-up question about one career."""
    topics = "\n".join(f"- {topic}" for topic in QUESTION_TOPICS)
    return (
        f"You are an expert career counselor. Answer this question about the career: {career_title}\n"
        f"\n"
        f"Question: {question}\n"
        f"\n"
        f"Provide a clear, detailed answer covering relevant information like:\n"
        f"{topics}\n"
        f"\n"
        f"Be specific and actionable in your response."
    )
