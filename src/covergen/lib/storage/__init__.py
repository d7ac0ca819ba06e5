"""Saved state storage."""

from covergen.lib.storage.base import StateStore
from covergen.lib.storage.duckdb_store import DuckDBStateStore

__all__ = ["StateStore", "DuckDBStateStore"]
