"""CLI parser construction for arena-cli.

This module wires subparsers but contains no execution logic. Subcommand
handlers live in ``cli_actions`` to keep files small and testable.
"""

from __future__ import annotations

import argparse


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level CLI parser and subcommands.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser with ``models``, ``chat`` and ``compare`` subcommands.
    """
    p = argparse.ArgumentParser(
        prog="arena-cli", description="Chat with one model or compare several side by side"
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    # models
    p_models = sub.add_parser("models", help="List known models and whether a key is configured")
    p_models.add_argument("--available", action="store_true", help="Only show usable models")
    p_models.add_argument("--json", action="store_true")

    # chat
    p_chat = sub.add_parser("chat", help="Send one prompt to a single model")
    p_chat.add_argument("--model", default=None, help="Model id (defaults to the best available)")
    p_chat.add_argument("--prompt", required=True)
    p_chat.add_argument("--system", default=None, help="Optional system instruction")
    p_chat.add_argument("--json", action="store_true")

    # compare
    p_cmp = sub.add_parser("compare", help="Send one prompt to several models, one after another")
    p_cmp.add_argument("--models", nargs="+", default=None, help="Model ids (defaults to all available)")
    p_cmp.add_argument("--prompt", required=True)
    p_cmp.add_argument("--json", action="store_true")

    return p


__all__ = ["build_parser"]
