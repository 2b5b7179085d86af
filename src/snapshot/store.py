"""Read & write the on-disk snapshot that stands in for a fresh fetch."""

from __future__ import annotations
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from tracker.models import CountrySeries
from .validator import SnapshotValidationError, validate_snapshot_payload

LOGGER = logging.getLogger(__name__)


@dataclass
class SnapshotHit:
    series: List[CountrySeries] = field(default_factory=list)


@dataclass
class SnapshotMiss:
    reason: str = ""


def load_snapshot(path: str | Path) -> List[CountrySeries]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"snapshot not found: {p}")
    with p.open("r", encoding="utf-8") as f:
        data = json.load(f)
    return [CountrySeries.from_dict(entry) for entry in validate_snapshot_payload(data)]


def lookup_snapshot(path: str | Path):
    """Return SnapshotHit when a usable snapshot exists, SnapshotMiss otherwise.

    A snapshot never expires. A malformed one is reported and treated as a miss
    so the caller fetches fresh data.
    """
    p = Path(path)
    if not p.exists():
        LOGGER.info(f"No snapshot at {p}, fetching fresh data")
        return SnapshotMiss(f"{p} does not exist")
    try:
        series = load_snapshot(p)
    except (json.JSONDecodeError, UnicodeDecodeError, SnapshotValidationError) as e:
        LOGGER.error(f"Invalid snapshot {p}: {e}")
        return SnapshotMiss(f"invalid snapshot: {e}")
    LOGGER.info(f"Loaded snapshot {p} ({len(series)} countries)")
    return SnapshotHit(series)


def save_snapshot(series: List[CountrySeries], path: str | Path) -> Path:
    p = Path(path)
    payload = [s.to_dict() for s in series]
    with p.open("w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False)
    LOGGER.info(f"Snapshot written to {p}")
    return p


__all__ = ["SnapshotHit", "SnapshotMiss", "load_snapshot", "lookup_snapshot", "save_snapshot"]
