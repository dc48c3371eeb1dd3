"""Request bodies and response builders for the FastAPI app."""
