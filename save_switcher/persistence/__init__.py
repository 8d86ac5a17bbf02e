"""Persistence layer – each store owns its file path, data format, and I/O."""

from .config import ConfigStore, PersistedState

__all__ = [
    "ConfigStore",
    "PersistedState",
]
