"""Initial UTxO file loading."""

from .loader import SnapshotSummary, load_initial_utxo, load_snapshot, read_document, summarize

__all__ = ["SnapshotSummary", "load_initial_utxo", "load_snapshot", "read_document", "summarize"]
