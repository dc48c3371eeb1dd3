"""Arena CLI (package entrypoint).

Wires argument parsing to the action handlers in ``cli_actions``. It performs
no provider logic directly.
"""

from __future__ import annotations

import sys
from typing import Optional

from ...orchestration import Orchestrator, create_orchestrator
from .cli_actions import handle_chat, handle_compare, handle_models
from .cli_parser import build_parser


def main(argv: Optional[list[str]] = None, orchestrator: Optional[Orchestrator] = None) -> int:
    """CLI entrypoint.

    Parameters
    ----------
    argv: Optional[list[str]]
        Argument vector; when ``None`` uses ``sys.argv[1:]``.
    orchestrator: Optional[Orchestrator]
        Pre-built orchestrator; built from configuration when omitted.

    Returns
    -------
    int
        Process exit code (0 success, non-zero on error).
    """
    args = build_parser().parse_args(list(sys.argv[1:] if argv is None else argv))
    orch = orchestrator or create_orchestrator()
    if args.cmd == "models":
        return handle_models(args, orch)
    if args.cmd == "chat":
        return handle_chat(args, orch)
    return handle_compare(args, orch)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
