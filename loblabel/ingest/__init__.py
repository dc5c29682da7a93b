"""Ingestion: snapshot type and streaming CSV reader."""

from .snapshot import BOOK_DEPTH, SNAPSHOT_COLUMNS, Snapshot

__all__ = ["BOOK_DEPTH", "SNAPSHOT_COLUMNS", "Snapshot"]
