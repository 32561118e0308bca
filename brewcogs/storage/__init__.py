"""Data storage layer."""

from brewcogs.storage.json_store import JsonProductStore

__all__ = [
    "JsonProductStore",
]
