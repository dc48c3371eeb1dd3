from __future__ import annotations

import os
from typing import Any, Dict, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from arena_providers.config.defaults import ARENA_SERVICE_CORS_DEFAULT_ORIGINS
from arena_providers.orchestration import Orchestrator, create_orchestrator

from .app_parts.app_core import (
    ChatBody,
    CompareBody,
    KeysBody,
    _build_available_response,
    _build_models_response,
    _handle_chat,
    _handle_compare,
    _handle_keys,
)


def get_orchestrator(request: Request) -> Orchestrator:
    """FastAPI dependency returning the orchestrator bound to the app."""
    return request.app.state.orchestrator


def get_app(orchestrator: Optional[Orchestrator] = None) -> FastAPI:
    """Build the FastAPI application around an explicit orchestrator.

    When ``orchestrator`` is omitted one is created from process configuration
    (environment, ``.env`` file, ``ARENA_CONFIG_FILE``).
    """
    application = FastAPI(title="Model Arena Service", version="0.1.0")
    application.state.orchestrator = orchestrator or create_orchestrator()

    cors_origins_env = os.getenv("ARENA_SERVICE_CORS_ORIGINS", ARENA_SERVICE_CORS_DEFAULT_ORIGINS)
    allow_origins = [o.strip() for o in cors_origins_env.split(",") if o.strip()]
    application.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -----------------------------------------------------------------------
    # Health
    # -----------------------------------------------------------------------

    @application.get("/api/health")
    def health() -> Dict[str, Any]:
        """Check the health status of the service."""
        return {"ok": True}

    # -----------------------------------------------------------------------
    # Models
    # -----------------------------------------------------------------------

    @application.get("/api/models")
    def get_models(orch: Orchestrator = Depends(get_orchestrator)) -> Dict[str, Any]:
        """List every known model with an ``available`` flag."""
        return _build_models_response(orch)

    @application.get("/api/models/available")
    def get_available_models(orch: Orchestrator = Depends(get_orchestrator)) -> Dict[str, Any]:
        """List only models whose provider has a credential configured."""
        return _build_available_response(orch)

    @application.get("/api/models/best")
    def get_best_model(orch: Orchestrator = Depends(get_orchestrator)) -> Dict[str, Any]:
        """Return the preferred available model id, or ``null`` when none."""
        return {"ok": True, "model_id": orch.best_available_model()}

    # -----------------------------------------------------------------------
    # Chat and comparison
    # -----------------------------------------------------------------------

    @application.post("/api/chat")
    def post_chat(body: ChatBody, orch: Orchestrator = Depends(get_orchestrator)) -> Dict[str, Any]:
        """Send the supplied history to one model and return its reply."""
        return _handle_chat(body, orch)

    @application.post("/api/compare")
    def post_compare(body: CompareBody, orch: Orchestrator = Depends(get_orchestrator)) -> Dict[str, Any]:
        """Send one prompt to several models, one after another."""
        return _handle_compare(body, orch)

    # -----------------------------------------------------------------------
    # Credentials
    # -----------------------------------------------------------------------

    @application.post("/api/keys")
    def post_keys(body: KeysBody, orch: Orchestrator = Depends(get_orchestrator)) -> Dict[str, Any]:
        """Set a provider credential in memory (never persisted or echoed)."""
        return _handle_keys(body, orch)

    return application


app = get_app()
