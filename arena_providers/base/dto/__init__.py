"""Typed DTOs shared across the providers layer."""

from .adapter_params import AdapterParams

__all__ = ["AdapterParams"]
