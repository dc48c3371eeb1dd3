"""Orchestrator: public entry point for single and multi-model chat.

Both operations are stateless with respect to earlier calls: the caller sends
the full history every time and nothing is retained between calls.

Comparison batches are deliberately sequential. A fixed pause separates
consecutive calls, after successes and failures alike, to stay under the
providers' free-tier rate limits. ``compare_models`` is the only place where
provider errors are caught; ``chat`` lets them propagate unchanged.
"""

from __future__ import annotations

import time
from typing import Callable, Dict, Iterable, Optional, Sequence, Tuple, Union

from ..base.constants import COMPARE_PAUSE_SECONDS
from ..base.errors import ErrorCode, NotConfiguredError, ProviderError
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import ChatMessage, ChatResult, ModelDescriptor
from ..base.registry import ModelRegistry
from .credential_gate import AdapterBuilder, CredentialGate

CompareOutcome = Union[ChatResult, ProviderError]


class Orchestrator:
    """Coordinate chat calls over a :class:`CredentialGate`.

    Parameters:
        gate: Credential gate owning the adapter map.
        pause_seconds: Pause between consecutive comparison calls.
        sleep: Blocking sleep callable (``time.sleep`` by default).
    """

    def __init__(
        self,
        gate: CredentialGate,
        *,
        pause_seconds: float = COMPARE_PAUSE_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._gate = gate
        self._pause_seconds = pause_seconds
        self._sleep = sleep
        self._logger = get_logger("orchestration.orchestrator")

    @property
    def gate(self) -> CredentialGate:
        return self._gate

    def chat(self, model_id: str, history: Sequence[ChatMessage]) -> ChatResult:
        """Send ``history`` to ``model_id`` and return the normalized result.

        Raises:
            NotConfiguredError: No credential for the model; no request is sent.
            ProviderError: Any adapter failure, unchanged.
        """
        try:
            adapter = self._gate.resolve(model_id)
        except NotConfiguredError as e:
            normalized_log_event(
                self._logger,
                "chat.error",
                LogContext(provider=e.provider, model=model_id),
                phase="resolve",
                error_code=e.code.value,
            )
            raise
        return adapter.chat(list(history), model_id)

    def compare_models(self, model_ids: Iterable[str], prompt: str) -> Dict[str, CompareOutcome]:
        """Send ``prompt`` to each model in turn and collect every outcome.

        Each distinct id gets a one-message user history. The result holds one
        entry per distinct id in input order: a :class:`ChatResult` on success
        or the :class:`ProviderError` raised for that id. One id's failure never
        stops the batch.
        """
        ids = list(dict.fromkeys(model_ids))
        history = [ChatMessage(role="user", content=prompt)]
        results: Dict[str, CompareOutcome] = {}
        normalized_log_event(self._logger, "compare.start", phase="start", models=len(ids))

        for index, model_id in enumerate(ids):
            if index:
                self._sleep(self._pause_seconds)
            try:
                results[model_id] = self.chat(model_id, history)
            except ProviderError as e:
                results[model_id] = e
            except Exception as e:
                results[model_id] = ProviderError(
                    code=ErrorCode.INTERNAL,
                    message=str(e) or type(e).__name__,
                    provider="unknown",
                    model=model_id,
                    raw=e,
                )
            outcome = results[model_id]
            normalized_log_event(
                self._logger,
                "compare.item",
                LogContext(model=model_id),
                phase="item",
                emitted=isinstance(outcome, ChatResult),
                error_code=outcome.code.value if isinstance(outcome, ProviderError) else None,
                tokens=outcome.usage if isinstance(outcome, ChatResult) else None,
            )

        failed = sum(isinstance(v, ProviderError) for v in results.values())
        normalized_log_event(
            self._logger,
            "compare.end",
            phase="finalize",
            models=len(ids),
            failed=failed,
        )
        return results

    # ---- pass-through helpers for collaborators ----
    def list_available(self) -> Tuple[ModelDescriptor, ...]:
        return self._gate.list_available()

    def list_all(self) -> Tuple[ModelDescriptor, ...]:
        return self._gate.registry.list_all()

    def has_credential(self, model_id: str) -> bool:
        return self._gate.has_credential(model_id)

    def set_credential(self, provider_name: str, secret: Optional[str]) -> Tuple[str, ...]:
        return self._gate.set_credential(provider_name, secret)

    def best_available_model(self) -> Optional[str]:
        return self._gate.best_available()


def create_orchestrator(
    *,
    registry: Optional[ModelRegistry] = None,
    adapter_builder: Optional[AdapterBuilder] = None,
    pause_seconds: float = COMPARE_PAUSE_SECONDS,
) -> Orchestrator:
    """Build a credential gate from configuration and wrap it in an orchestrator."""
    gate = CredentialGate.from_config(registry=registry, adapter_builder=adapter_builder)
    return Orchestrator(gate, pause_seconds=pause_seconds)


__all__ = ["Orchestrator", "CompareOutcome", "create_orchestrator"]
