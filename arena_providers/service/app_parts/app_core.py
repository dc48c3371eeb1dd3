from __future__ import annotations

from typing import Any, Dict, List, Literal

from fastapi import HTTPException
from pydantic import BaseModel, Field

from arena_providers.base.errors import NotConfiguredError, ProviderError
from arena_providers.base.factory import UnknownProviderError
from arena_providers.base.models import ChatMessage, ChatResult, ModelDescriptor
from arena_providers.orchestration import Orchestrator


class ChatMessageDTO(BaseModel):
    """A single chat message as received from the client."""

    role: Literal["user", "assistant", "system"]
    content: str


class ChatBody(BaseModel):
    """Body of a single-model chat request; ``messages`` is the full history."""

    model_id: str
    messages: List[ChatMessageDTO] = Field(min_length=1)


class CompareBody(BaseModel):
    """Body of a comparison batch request."""

    model_ids: List[str] = Field(min_length=1)
    prompt: str


class KeysBody(BaseModel):
    """Credential injection for one provider (``"Google"``/``"google"``, ...)."""

    provider: str
    api_key: str = Field(repr=False)


def _descriptor_view(descriptor: ModelDescriptor, available: bool) -> Dict[str, Any]:
    data = descriptor.to_dict()
    data["available"] = available
    return data


def _build_models_response(orchestrator: Orchestrator) -> Dict[str, Any]:
    """List every catalog model with its availability flag."""
    models = [
        _descriptor_view(d, orchestrator.has_credential(d.id)) for d in orchestrator.list_all()
    ]
    return {"ok": True, "models": models}


def _build_available_response(orchestrator: Orchestrator) -> Dict[str, Any]:
    models = [_descriptor_view(d, True) for d in orchestrator.list_available()]
    return {"ok": True, "models": models}


def _require_known_model(orchestrator: Orchestrator, model_id: str) -> None:
    """Raise 404 for ids outside the catalog."""
    if orchestrator.gate.registry.get(model_id) is None:
        raise HTTPException(status_code=404, detail=f"Unknown model: {model_id}")


def _handle_chat(body: ChatBody, orchestrator: Orchestrator) -> Dict[str, Any]:
    """Run a single-model chat and map core errors to HTTP statuses.

    ``NotConfiguredError`` → 409, any other ``ProviderError`` → 502 with the
    error payload as ``detail``.
    """
    _require_known_model(orchestrator, body.model_id)
    history = [ChatMessage(role=m.role, content=m.content) for m in body.messages]
    try:
        result = orchestrator.chat(body.model_id, history)
    except NotConfiguredError as e:
        raise HTTPException(status_code=409, detail=e.to_dict()) from e
    except ProviderError as e:
        raise HTTPException(status_code=502, detail=e.to_dict()) from e
    return {"ok": True, "response": result.to_dict()}


def _outcome_view(outcome: Any) -> Dict[str, Any]:
    if isinstance(outcome, ChatResult):
        return {"ok": True, "response": outcome.to_dict()}
    return {"ok": False, "error": outcome.to_dict()}


def _handle_compare(body: CompareBody, orchestrator: Orchestrator) -> Dict[str, Any]:
    """Run a comparison batch; per-model failures are reported inline."""
    results = orchestrator.compare_models(body.model_ids, body.prompt)
    return {"ok": True, "results": {mid: _outcome_view(o) for mid, o in results.items()}}


def _handle_keys(body: KeysBody, orchestrator: Orchestrator) -> Dict[str, Any]:
    """Register (or clear) a provider credential; unknown providers → 400."""
    candidate = body.api_key.strip()
    # Keys travel in HTTP headers; masked or pasted non-ASCII text can never work.
    if not candidate.isascii():
        raise HTTPException(status_code=400, detail="api_key must be ASCII")
    try:
        model_ids = orchestrator.set_credential(body.provider, candidate)
    except UnknownProviderError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return {
        "ok": True,
        "provider": body.provider.lower().strip(),
        "available": [mid for mid in model_ids if orchestrator.has_credential(mid)],
    }


__all__ = [
    "ChatMessageDTO",
    "ChatBody",
    "CompareBody",
    "KeysBody",
    "_build_models_response",
    "_build_available_response",
    "_handle_chat",
    "_handle_compare",
    "_handle_keys",
]
