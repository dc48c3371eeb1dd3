"""Static model catalog.

The catalog is the ordered list of every model the application knows about,
whether or not a credential is configured for it. Filtering by availability is
the credential gate's job; nothing here looks at configuration.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from .models import ModelDescriptor

MODEL_CATALOG: Tuple[ModelDescriptor, ...] = (
    ModelDescriptor(
        id="gemini-1.5-flash",
        display_name="Gemini 1.5 Flash",
        provider_name="Google",
        free_tier_note="15 req/min, 1500/day",
        description="Fast, excellent for most tasks",
    ),
    ModelDescriptor(
        id="deepseek/deepseek-chat",
        display_name="DeepSeek Chat",
        provider_name="OpenRouter",
        free_tier_note="$1 credit",
        description="Great coding assistant",
    ),
)


class ModelRegistry:
    """Read-only lookup surface over an ordered catalog.

    Raises:
        ValueError: If the catalog contains duplicate ids.
    """

    def __init__(self, catalog: Tuple[ModelDescriptor, ...] = MODEL_CATALOG) -> None:
        self._catalog = tuple(catalog)
        self._by_id: Dict[str, ModelDescriptor] = {}
        for descriptor in self._catalog:
            if descriptor.id in self._by_id:
                raise ValueError(f"Duplicate model id in catalog: {descriptor.id}")
            self._by_id[descriptor.id] = descriptor

    def list_all(self) -> Tuple[ModelDescriptor, ...]:
        """Return every descriptor in catalog order."""
        return self._catalog

    def get(self, model_id: str) -> Optional[ModelDescriptor]:
        return self._by_id.get(model_id)

    def ids_for_provider(self, provider_name: str) -> Tuple[str, ...]:
        """Return the model ids served by ``provider_name`` (case-insensitive)."""
        key = (provider_name or "").lower().strip()
        return tuple(d.id for d in self._catalog if d.provider_key == key)

    def providers(self) -> Tuple[str, ...]:
        """Return canonical provider keys in first-appearance order."""
        seen: Dict[str, None] = {}
        for d in self._catalog:
            seen.setdefault(d.provider_key, None)
        return tuple(seen)


__all__ = ["MODEL_CATALOG", "ModelRegistry"]
