"""Provider Factory utilities.

Purpose
-------
Centralize creation of adapter instances implementing ``ChatAdapter`` from a
canonical provider key. Adapter modules are imported lazily with
``importlib`` so that importing the factory never pulls in every provider.

Semantics
---------
The factory performs no retries or fallbacks; it either returns an instance
or raises :class:`UnknownProviderError`. Each call builds a fresh instance;
sharing an adapter between model ids is the credential gate's concern.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, Mapping, Optional, Tuple, Type

from .dto.adapter_params import AdapterParams


class UnknownProviderError(Exception):
    """Raised when a provider cannot be resolved or initialized.

    Failure modes include:
    - The provider key is not registered in the factory mapping.
    - The provider module cannot be imported or the adapter class is missing.
    - The adapter constructor raised during initialization.
    """


class ProviderFactory:
    """Create provider adapters from a canonical key (e.g., ``"google"``)."""

    # Map canonical provider keys to import paths and class names
    _PROVIDERS: Dict[str, Dict[str, str]] = {
        "google": {"module": "arena_providers.gemini.client", "class": "GeminiProvider"},
        "openrouter": {"module": "arena_providers.openrouter.client", "class": "OpenRouterProvider"},
    }

    @classmethod
    def create(
        cls,
        provider: str,
        *,
        params: Optional[AdapterParams] = None,
        **kwargs: Any,
    ) -> Any:
        """Create a provider adapter instance.

        Parameters
        ----------
        provider:
            Canonical provider key, matched case-insensitively.
        params:
            Optional :class:`AdapterParams`; merged with ``kwargs``, explicit
            kwargs taking precedence.
        **kwargs:
            Adapter constructor kwargs.

        Raises
        ------
        UnknownProviderError
            If the provider is unknown, its module fails to import, the class is
            missing, or the constructor raises.
        """
        merged_kwargs = cls._coerce_params(params, kwargs)

        name = (provider or "").lower().strip()
        spec = cls._PROVIDERS.get(name)
        if not spec:
            raise UnknownProviderError(f"Unknown provider '{provider}'")

        module_path, class_name = spec["module"], spec["class"]

        try:
            mod = import_module(module_path)
        except Exception as exc:  # pragma: no cover - import failure path
            raise UnknownProviderError(
                f"Failed to import module '{module_path}' for provider '{provider}': {exc}"
            ) from exc

        try:
            klass: Type = getattr(mod, class_name)
        except AttributeError as exc:
            raise UnknownProviderError(
                f"Adapter class '{class_name}' not found in '{module_path}' for provider '{provider}'"
            ) from exc

        try:
            return klass(**merged_kwargs)
        except TypeError as exc:
            raise UnknownProviderError(
                f"Invalid arguments for '{provider}' adapter constructor: {exc}"
            ) from exc

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Return the supported canonical provider keys in deterministic order."""
        return tuple(cls._PROVIDERS.keys())

    @staticmethod
    def _coerce_params(params: Optional[AdapterParams], kwargs: Mapping[str, Any]) -> Dict[str, Any]:
        """Merge ``AdapterParams`` into ``kwargs`` (explicit kwargs win)."""
        if params is None:
            return dict(kwargs)
        merged: Dict[str, Any] = params.constructor_kwargs()
        merged.update(kwargs)
        return merged


__all__ = ["ProviderFactory", "UnknownProviderError"]
