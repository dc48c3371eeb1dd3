"""HTTP utilities for providers (pooled httpx clients, single-shot POST)."""

from .client import close_all_clients, get_httpx_client
from .chat_call import post_chat_json

__all__ = ["get_httpx_client", "close_all_clients", "post_chat_json"]
