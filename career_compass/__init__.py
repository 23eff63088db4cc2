"""Career Compass backend: career recommendations and career Q&A backed by Gemini."""

__version__ = "0.1.0"
