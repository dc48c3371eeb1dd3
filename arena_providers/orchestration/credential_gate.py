"""Credential gate: model id → adapter resolution.

Purpose
-------
Own the adapter map for one process. A model id is present in the map if and
only if its provider currently has a usable credential (non-empty and not the
provider's placeholder literal). Adapters are built through a builder callable
so tests can inject fakes; the default builder goes through
``ProviderFactory`` with configuration-derived ``AdapterParams``.

Lifecycle
---------
Constructed once at startup (``CredentialGate.from_config``), mutated only by
``set_credential`` and read by ``resolve``/``has_credential``. No locking: the
single caller contract means ``set_credential`` never races with itself.

Secrets are never logged; log events carry the provider key and model ids only.
"""

from __future__ import annotations

from typing import Callable, Dict, Mapping, Optional, Tuple

from ..base.dto import AdapterParams
from ..base.errors import ErrorCode, NotConfiguredError
from ..base.factory import ProviderFactory, UnknownProviderError
from ..base.interfaces import ChatAdapter
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import ModelDescriptor
from ..base.registry import ModelRegistry
from ..config import get_provider_config
from ..config.env import is_usable_credential

AdapterBuilder = Callable[[str, str], ChatAdapter]


def build_adapter(provider: str, secret: str) -> ChatAdapter:
    """Default builder: create the provider adapter bound to ``secret``."""
    cfg = get_provider_config(provider)
    params = AdapterParams(provider=provider, api_key=secret, base_url=cfg.get("base_url"))
    return ProviderFactory.create(provider, params=params)


class CredentialGate:
    """Map model ids to adapters based on configured credentials.

    Parameters:
        registry: Model catalog; defaults to the built-in catalog.
        adapter_builder: ``(provider_key, secret) -> ChatAdapter``.
    """

    def __init__(
        self,
        registry: Optional[ModelRegistry] = None,
        adapter_builder: Optional[AdapterBuilder] = None,
    ) -> None:
        self._registry = registry or ModelRegistry()
        self._build = adapter_builder or build_adapter
        self._adapters: Dict[str, ChatAdapter] = {}
        self._logger = get_logger("orchestration.gate")

    @classmethod
    def from_config(
        cls,
        registry: Optional[ModelRegistry] = None,
        adapter_builder: Optional[AdapterBuilder] = None,
        credentials: Optional[Mapping[str, Optional[str]]] = None,
    ) -> "CredentialGate":
        """Build a gate and register one credential per known provider.

        ``credentials`` maps provider keys to secrets and, when given, replaces
        the lookup through ``get_provider_config``. Empty or placeholder values
        leave the provider's models unavailable.
        """
        gate = cls(registry=registry, adapter_builder=adapter_builder)
        for provider in gate.registry.providers():
            if credentials is not None:
                secret = credentials.get(provider)
            else:
                secret = get_provider_config(provider).get("api_key")
            if is_usable_credential(provider, secret):
                gate.set_credential(provider, secret)
        return gate

    @property
    def registry(self) -> ModelRegistry:
        return self._registry

    def has_credential(self, model_id: str) -> bool:
        """Return True iff an adapter is registered for ``model_id``."""
        return model_id in self._adapters

    def resolve(self, model_id: str) -> ChatAdapter:
        """Return the adapter for ``model_id``.

        Raises:
            NotConfiguredError: No credential is configured for the model.
        """
        adapter = self._adapters.get(model_id)
        if adapter is None:
            descriptor = self._registry.get(model_id)
            raise NotConfiguredError(
                code=ErrorCode.AUTH,
                message=f"No API key configured for model: {model_id}",
                provider=descriptor.provider_key if descriptor else "unknown",
                model=model_id,
            )
        return adapter

    def set_credential(self, provider_name: str, secret: Optional[str]) -> Tuple[str, ...]:
        """Bind ``secret`` to every model of ``provider_name``.

        A fresh adapter replaces any previous one for those ids. An empty or
        placeholder secret removes the ids instead. Returns the affected ids.

        Raises:
            UnknownProviderError: The provider serves no catalog model.
        """
        provider = (provider_name or "").lower().strip()
        model_ids = self._registry.ids_for_provider(provider)
        if not model_ids:
            raise UnknownProviderError(f"Unknown provider '{provider_name}'")
        ctx = LogContext(provider=provider)

        if not is_usable_credential(provider, secret):
            for model_id in model_ids:
                self._adapters.pop(model_id, None)
            normalized_log_event(
                self._logger, "gate.unregister", ctx, phase="config", model_ids=list(model_ids)
            )
            return model_ids

        adapter = self._build(provider, secret)
        for model_id in model_ids:
            self._adapters[model_id] = adapter
        normalized_log_event(
            self._logger, "gate.register", ctx, phase="config", model_ids=list(model_ids)
        )
        return model_ids

    def list_available(self) -> Tuple[ModelDescriptor, ...]:
        """Return catalog entries with a credential, in catalog order."""
        return tuple(d for d in self._registry.list_all() if self.has_credential(d.id))

    def best_available(self) -> Optional[str]:
        """Return the first available model id in catalog order, if any."""
        available = self.list_available()
        return available[0].id if available else None


__all__ = ["CredentialGate", "AdapterBuilder", "build_adapter"]
