"""Snapshot (cache file) loading, validation & saving."""

from .store import SnapshotHit, SnapshotMiss, load_snapshot, lookup_snapshot, save_snapshot  # noqa: F401
from .validator import SnapshotValidationError, validate_snapshot_payload  # noqa: F401

__all__ = [
    "SnapshotHit",
    "SnapshotMiss",
    "load_snapshot",
    "lookup_snapshot",
    "save_snapshot",
    "SnapshotValidationError",
    "validate_snapshot_payload",
]
