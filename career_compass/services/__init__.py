"""
Service layer for the Career Compass backend.

Services sit between routes (HTTP layer) and Gemini: they build prompts,
call the model, and map replies into Pydantic response models.
"""

from .career_advisor import AdvisorConfig, CareerAdvisor
from .chat_service import ask_career_question, start_chat

__all__ = [
    "AdvisorConfig",
    "CareerAdvisor",
    "ask_career_question",
    "start_chat",
]
