"""Google Gemini provider adapter."""
