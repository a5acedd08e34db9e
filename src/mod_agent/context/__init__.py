"""
Shared per-context state.
"""
from .prefix_store import PrefixStore

__all__ = ["PrefixStore"]
