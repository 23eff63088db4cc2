"""
Chat transcript helpers for the career chat view.

The server keeps no chat state. The client sends the transcript it holds and
gets it back with new messages appended; earlier messages are never edited.
"""

import logging
from typing import List, Optional

from career_compass.schemas.careers import ChatMessage, ChatTranscript
from career_compass.services.career_advisor import CareerAdvisor

logger = logging.getLogger(__name__)

SUGGESTED_QUESTIONS = [
    "What tests or exams are required?",
    "What subjects should I focus on?",
    "What is the typical salary range?",
    "How long does it take to qualify?",
    "What skills do I need to develop?",
]


def build_greeting(career_title: str) -> str:
    return (
        f"Hi! I'm here to answer any questions you have about becoming a {career_title}. "
        f"Feel free to ask about required tests, educational qualifications, subjects to "
        f"focus on, salary expectations, or anything else!"
    )


def start_chat(career_title: str) -> ChatTranscript:
    """Open a transcript with the assistant's greeting and suggested questions."""
    greeting = ChatMessage(role="assistant", content=build_greeting(career_title))
    return ChatTranscript(
        career_title=career_title,
        messages=[greeting],
        suggested_questions=list(SUGGESTED_QUESTIONS),
    )


async def ask_career_question(
    advisor: CareerAdvisor,
    career_title: str,
    question: str,
    history: List[ChatMessage],
    api_key: Optional[str] = None,
) -> ChatTranscript:
    """
    Append the question and the advisor's answer to a transcript.

    Args:
        advisor: Configured career advisor
        career_title: Career the transcript is about
        question: Trimmed, non-blank question text
        history: Messages the client already holds, oldest first
        api_key: Caller-supplied Gemini key (optional)

    Returns:
        ChatTranscript with history followed by exactly one user message
        and one assistant message.
    """
    user_message = ChatMessage(role="user", content=question)
    answer = await advisor.answer_question(question, career_title, api_key)
    assistant_message = ChatMessage(role="assistant", content=answer)

    logger.info(
        f"Chat for career_title='{career_title[:50]}' now has {len(history) + 2} message(s)"
    )

    return ChatTranscript(
        career_title=career_title,
        messages=[*history, user_message, assistant_message],
    )
