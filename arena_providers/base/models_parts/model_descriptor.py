"""
ModelDescriptor DTO for the static model catalog.

Describes one selectable backend model. Descriptors are defined at import time
and never change; identity is the ``id`` field.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ModelDescriptor:
    """A single catalog entry.

    Attributes:
        id: Opaque backend model identifier (sent on the wire).
        display_name: Human-friendly name for model pickers.
        provider_name: Provider owning this model (e.g., ``"Google"``).
        free_tier_note: Optional description of the provider's free quota.
        description: Optional one-line summary of the model's strengths.
    """

    id: str
    display_name: str
    provider_name: str
    free_tier_note: Optional[str] = None
    description: Optional[str] = None

    @property
    def provider_key(self) -> str:
        """Canonical lowercase provider key used by config and the factory."""
        return self.provider_name.lower().strip()

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary of the entry."""
        return asdict(self)


__all__ = ["ModelDescriptor"]
