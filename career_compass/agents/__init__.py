"""
AI Components for the Career Compass backend.

1. Career Advisor (Single-Shot LLM)
   - Prompt templates and the reference career catalog live here
   - The Gemini calls and reply parsing are in career_compass/services/career_advisor.py
"""
