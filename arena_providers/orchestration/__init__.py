"""Orchestration layer: credential gate and the public orchestrator."""

from .credential_gate import AdapterBuilder, CredentialGate, build_adapter
from .orchestrator import CompareOutcome, Orchestrator, create_orchestrator

__all__ = [
    "AdapterBuilder",
    "CredentialGate",
    "build_adapter",
    "CompareOutcome",
    "Orchestrator",
    "create_orchestrator",
]
