"""
Pydantic schemas for the career recommendation and chat endpoints.

These models are both the HTTP contracts and the shape the model reply is
validated against. Field names that the browser client and the model prompt
use in camelCase (matchReason, growthPotential, requiredSkills) are exposed
through aliases; Python code uses snake_case.
"""

import uuid
from datetime import datetime, timezone
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, computed_field, field_validator


def _normalize_entries(values: List[str]) -> List[str]:
    """Trim entries, drop blanks, and remove exact duplicates keeping order."""
    normalized: List[str] = []
    for value in values:
        entry = value.strip()
        if entry and entry not in normalized:
            normalized.append(entry)
    return normalized


def _strip_required(value: str, name: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError(f"{name} must not be blank")
    return value


# ============================================================================
# REQUEST MODELS
# ============================================================================

class CareerProfile(BaseModel):
    """
    Self-reported interests and skills submitted for career analysis.

    Both lists must contain at least one entry after normalisation. The
    advisor is never called with an empty list.
    """
    model_config = ConfigDict(frozen=True)

    interests: List[str] = Field(
        ...,
        description="Things the user enjoys, in the order they were entered",
        examples=[["music", "puzzles", "engines"]]
    )
    skills: List[str] = Field(
        ...,
        description="Things the user is good at, in the order they were entered",
        examples=[["math", "communication"]]
    )

    @field_validator("interests", "skills")
    @classmethod
    def _require_entries(cls, values: List[str]) -> List[str]:
        normalized = _normalize_entries(values)
        if not normalized:
            raise ValueError("at least one non-blank entry is required")
        return normalized


class ChatStartRequest(BaseModel):
    """Request to open a chat about one recommended career."""
    career_title: str = Field(
        ...,
        description="Title of the career the chat is about",
        min_length=1,
        max_length=200,
        examples=["Actuary"]
    )

    @field_validator("career_title")
    @classmethod
    def _strip_title(cls, value: str) -> str:
        return _strip_required(value, "career_title")


# ============================================================================
# RESPONSE MODELS
# ============================================================================

class CareerRecommendation(BaseModel):
    """A single career recommendation, model-derived or static."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    title: str = Field(..., examples=["Actuary"])
    description: str = Field(..., examples=["Risk calculation for insurers and pension funds."])
    match_reason: str = Field(
        ...,
        alias="matchReason",
        examples=["Your love of probability puzzles maps directly onto risk modelling."]
    )
    growth_potential: str = Field(
        ...,
        alias="growthPotential",
        examples=["Exam premiums: each passed exam raises base salary."]
    )
    required_skills: List[str] = Field(
        ...,
        alias="requiredSkills",
        examples=[["Statistics", "Excel", "Financial mathematics"]]
    )


class AnalysisResult(BaseModel):
    """
    Career analysis for one submitted profile.

    `source` reports which path produced the result. A result is never a mix
    of model output and fallback data.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    summary: str
    recommendations: List[CareerRecommendation]
    source: Literal["model", "fallback"] = Field(
        default="model",
        description="'model' when parsed from the Gemini reply, 'fallback' for the static result"
    )


class ChatMessage(BaseModel):
    """One entry of a chat transcript."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    role: Literal["user", "assistant"]
    content: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ChatRequest(BaseModel):
    """
    A follow-up question about one career.

    The client owns the transcript; it sends the messages it already has and
    receives them back with the new question and answer appended.
    """
    career_title: str = Field(..., min_length=1, max_length=200)
    question: str = Field(..., max_length=2000, examples=["What tests or exams are required?"])
    messages: List[ChatMessage] = Field(
        default_factory=list,
        description="Transcript so far, oldest first"
    )

    @field_validator("career_title", "question")
    @classmethod
    def _strip_text(cls, value: str, info: ValidationInfo) -> str:
        return _strip_required(value, info.field_name)


class ChatTranscript(BaseModel):
    """Transcript for one career, oldest message first."""
    career_title: str
    messages: List[ChatMessage]
    suggested_questions: List[str] = Field(default_factory=list)


class CredentialStatus(BaseModel):
    """Whether a Gemini credential is available for the current request."""
    default_configured: bool = Field(
        ...,
        description="True when the server has a GEMINI_API_KEY default"
    )
    header_supplied: bool = Field(
        ...,
        description="True when the request carried a non-blank X-Gemini-Api-Key header"
    )

    @computed_field
    @property
    def available(self) -> bool:
        return self.default_configured or self.header_supplied
