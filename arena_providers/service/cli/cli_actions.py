"""CLI action handlers.

Purpose
-------
Subcommand handlers for ``arena-cli``, kept apart from the parser so they can
be exercised in tests with an injected orchestrator. This module has no
top-level side effects.

Fallback & Error Semantics
--------------------------
- ``chat`` prints the provider error to stderr and returns ``1``; a missing
  credential returns ``2`` so scripts can tell configuration problems apart.
- ``compare`` always prints every model's outcome and returns ``1`` when any
  model failed.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, List

from ...base.errors import NotConfiguredError, ProviderError
from ...base.models import ChatMessage, ChatResult
from ...orchestration import Orchestrator


def _print_json(data: Any, *, err: bool = False) -> None:
    print(json.dumps(data, ensure_ascii=False), file=sys.stderr if err else sys.stdout)


def handle_models(args: argparse.Namespace, orchestrator: Orchestrator) -> int:
    """Print the catalog (or only available models with ``--available``)."""
    descriptors = orchestrator.list_available() if args.available else orchestrator.list_all()
    rows: List[Dict[str, Any]] = []
    for d in descriptors:
        row = d.to_dict()
        row["available"] = orchestrator.has_credential(d.id)
        rows.append(row)
    if args.json:
        _print_json({"models": rows})
        return 0
    if not rows:
        print("No models available. Set GOOGLE_API_KEY or OPENROUTER_API_KEY.")
        return 0
    for row in rows:
        mark = "x" if row["available"] else " "
        note = f" ({row['free_tier_note']})" if row.get("free_tier_note") else ""
        print(f"[{mark}] {row['id']:<28} {row['display_name']} - {row['provider_name']}{note}")
    return 0


def handle_chat(args: argparse.Namespace, orchestrator: Orchestrator) -> int:
    """Send ``--prompt`` (optionally with ``--system``) to one model."""
    model_id = args.model or orchestrator.best_available_model()
    if not model_id:
        _print_json({"ok": False, "error": "No models available"}, err=True)
        return 2
    history: List[ChatMessage] = []
    if args.system:
        history.append(ChatMessage(role="system", content=args.system))
    history.append(ChatMessage(role="user", content=args.prompt))
    try:
        result = orchestrator.chat(model_id, history)
    except NotConfiguredError as e:
        _print_json({"ok": False, "error": e.to_dict()}, err=True)
        return 2
    except ProviderError as e:
        _print_json({"ok": False, "error": e.to_dict()}, err=True)
        return 1
    if args.json:
        _print_json({"ok": True, "response": result.to_dict()})
    else:
        print(result.content)
    return 0


def handle_compare(args: argparse.Namespace, orchestrator: Orchestrator) -> int:
    """Run a comparison batch and print one block per model."""
    model_ids = args.models or [d.id for d in orchestrator.list_available()]
    if not model_ids:
        _print_json({"ok": False, "error": "No models available"}, err=True)
        return 2
    results = orchestrator.compare_models(model_ids, args.prompt)
    failed = [mid for mid, outcome in results.items() if not isinstance(outcome, ChatResult)]
    if args.json:
        payload = {
            mid: (
                {"ok": True, "response": outcome.to_dict()}
                if isinstance(outcome, ChatResult)
                else {"ok": False, "error": outcome.to_dict()}
            )
            for mid, outcome in results.items()
        }
        _print_json({"results": payload})
    else:
        for mid, outcome in results.items():
            print(f"=== {mid}")
            if isinstance(outcome, ChatResult):
                print(outcome.content)
            else:
                print(f"error: {outcome.message}")
    return 1 if failed else 0


__all__ = ["handle_models", "handle_chat", "handle_compare"]
