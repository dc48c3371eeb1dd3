"""Token usage helpers."""

from .extraction import extract_gemini_usage, extract_openai_usage

__all__ = ["extract_openai_usage", "extract_gemini_usage"]
