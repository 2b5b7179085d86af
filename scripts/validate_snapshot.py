#!/usr/bin/env python3
"""Validate data.json snapshot structure.
Exit non-zero if invalid."""
import json, math, sys, pathlib

COUNTERS = ("deaths", "confirmed", "new_confirmed")

path = pathlib.Path(sys.argv[1] if len(sys.argv) > 1 else "data.json")
if not path.exists():
    print(f"{path} missing", file=sys.stderr)
    sys.exit(1)
try:
    data = json.loads(path.read_text(encoding="utf-8"))
except (ValueError, UnicodeDecodeError) as e:
    print("JSON parse error:", e, file=sys.stderr)
    sys.exit(2)
if not isinstance(data, list):
    print("Root must be a list of country series", file=sys.stderr)
    sys.exit(3)
seen = set()
errors = 0
total_points = 0
for idx, s in enumerate(data):
    if not isinstance(s, dict):
        print(f"Series at index {idx} not object", file=sys.stderr)
        errors += 1
        continue
    code = str(s.get("code", "")).strip()
    if not code:
        print(f"Series {idx} missing code", file=sys.stderr)
        errors += 1
    if code in seen:
        print(f"Duplicate country code: {code}", file=sys.stderr)
        errors += 1
    seen.add(code)
    if not str(s.get("name", "")).strip():
        print(f"Series {code or idx} missing name", file=sys.stderr)
        errors += 1
    points = s.get("data")
    if not isinstance(points, list):
        print(f"Series {code or idx} has no data list", file=sys.stderr)
        errors += 1
        continue
    total_points += len(points)
    dates = set()
    for p in points:
        date = p.get("date") if isinstance(p, dict) else None
        if not date:
            print(f"Series {code} has point without date: {p}", file=sys.stderr)
            errors += 1
            continue
        if date in dates:
            # Allowed, the chart keeps the first value
            print(f"Series {code} repeats date {date}", file=sys.stderr)
        dates.add(date)
        for key in COUNTERS:
            value = p.get(key)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
                print(f"Series {code} date {date} has invalid '{key}': {value!r}", file=sys.stderr)
                errors += 1
if errors:
    print(f"Validation failed with {errors} error(s).", file=sys.stderr)
    sys.exit(5)
print(f"{path} valid: {len(data)} countries, {total_points} points")
