"""OpenRouter provider adapter."""
