"""
Pytest configuration for Career Compass tests.

Sets up the test environment and shared fixtures. No test talks to Gemini:
the client is replaced with mocks that return SDK response objects
(see tests/gemini_fakes.py).
"""
import os
from typing import Any, Dict, List

import pytest

# Disable config validation during tests
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables before the app is imported
os.environ["ENVIRONMENT"] = "testing"
# No default key: tests opt into a credential explicitly
os.environ["GEMINI_API_KEY"] = ""

from career_compass.schemas.careers import CareerProfile  # noqa: E402
from career_compass.services.career_advisor import AdvisorConfig, CareerAdvisor  # noqa: E402
from tests.gemini_fakes import TEST_API_KEY, make_recommendation  # noqa: E402


@pytest.fixture
def profile() -> CareerProfile:
    return CareerProfile(interests=["music", "puzzles"], skills=["math", "communication"])


@pytest.fixture
def advisor_without_key() -> CareerAdvisor:
    """Advisor with no default credential (static fallback mode)."""
    return CareerAdvisor(AdvisorConfig(default_api_key=""))


@pytest.fixture
def advisor_with_key() -> CareerAdvisor:
    return CareerAdvisor(AdvisorConfig(default_api_key=TEST_API_KEY))


@pytest.fixture
def five_recommendations() -> List[Dict[str, Any]]:
    return [make_recommendation(index) for index in range(1, 6)]
