"""
Logging utilities for the Career Compass backend.

Provides standardized logger configuration following privacy rules.

CRITICAL SECURITY RULES:
- NEVER log Gemini API keys, whether from the environment or a request header
- NEVER log full prompts (they embed the user's interests and skills)
- NEVER log full model replies; use preview() to truncate them

Acceptable logging:
- High-level events (e.g., "analyze called", "falling back to static result")
- Non-sensitive metadata (e.g., counts of interests and skills, career title)
- Error classes and sanitized error messages
"""

import logging
from typing import Optional

PREVIEW_LENGTH = 200


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a configured logger for the specified module.

    Args:
        name: Module name (typically __name__)
        level: Optional logging level (defaults to INFO)

    Returns:
        Configured logger instance

    Usage:
        >>> from career_compass.utils.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("High-level event occurred")
    """
    logger = logging.getLogger(name)

    if level is None:
        level = logging.INFO

    logger.setLevel(level)

    # Add handler if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def preview(text: Optional[str], limit: int = PREVIEW_LENGTH) -> str:
    """Shorten model output for log lines."""
    if not text:
        return ""
    text = text.replace("\n", " ")
    if len(text) > limit:
        return text[:limit] + "..."
    return text
