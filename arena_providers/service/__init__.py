"""Outer surfaces over the orchestrator: FastAPI service, dev server and CLI."""
