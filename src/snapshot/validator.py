"""Validation for the data.json snapshot payload."""

from __future__ import annotations
import math
from typing import List, Dict, Any


class SnapshotValidationError(Exception):
    pass


def _check_count(name: str, idx: int, key: str, value: Any):
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SnapshotValidationError(f"Country '{name}' point {idx} has non-numeric '{key}'")
    # json.load accepts NaN and Infinity
    if not math.isfinite(value):
        raise SnapshotValidationError(f"Country '{name}' point {idx} has non-finite '{key}'")


def validate_snapshot_payload(data: Any) -> List[Dict[str, Any]]:
    if not isinstance(data, list):
        raise SnapshotValidationError("Root must be a list of country series")
    seen = set()
    normed: List[Dict[str, Any]] = []
    for idx, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise SnapshotValidationError(f"Series at index {idx} is not an object")
        code = str(entry.get("code", "")).strip()
        name = str(entry.get("name", "")).strip()
        points = entry.get("data")
        if not code:
            raise SnapshotValidationError(f"Series at index {idx} missing code")
        if not name:
            raise SnapshotValidationError(f"Series '{code}' missing name")
        if code in seen:
            raise SnapshotValidationError(f"Duplicate country code: {code}")
        if not isinstance(points, list):
            raise SnapshotValidationError(f"Series '{code}' must have a 'data' list")
        for pidx, point in enumerate(points):
            if not isinstance(point, dict) or not str(point.get("date", "")).strip():
                raise SnapshotValidationError(f"Country '{name}' point {pidx} missing date")
            for key in ("deaths", "confirmed", "new_confirmed"):
                _check_count(name, pidx, key, point.get(key))
        normed.append({"code": code, "name": name, "data": points})
        seen.add(code)
    return normed
