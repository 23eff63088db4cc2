"""
Career Advisor - prompt templates and reference catalog.

The service layer is in:
- career_compass/services/career_advisor.py

Prompt templates are in:
- career_compass/agents/career/prompts.py
"""

from career_compass.agents.career.catalog import CAREER_CATALOG, render_catalog
from career_compass.agents.career.prompts import (
    CAREER_COUNSELOR_ROLE,
    build_analysis_prompt,
    build_question_prompt,
)

__all__ = [
    "CAREER_CATALOG",
    "CAREER_COUNSELOR_ROLE",
    "build_analysis_prompt",
    "build_question_prompt",
    "render_catalog",
]
