"""Date-axis alignment of per-country series."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

import pandas as pd

from tracker.models import METRIC_FIELDS, CountrySeries


@dataclass
class AlignedChartData:
    date_axis: List[str] = field(default_factory=list)
    series: List[Dict] = field(default_factory=list)


def build_date_axis(series_list: List[CountrySeries], order: str = "first_seen") -> List[str]:
    """Union of all dates.

    ``first_seen`` keeps the order in which dates appear while walking the
    countries in turn, which is not necessarily chronological. ``chronological``
    sorts the ``MM-DD`` labels, so it assumes a single calendar year.
    """
    axis: List[str] = []
    seen = set()
    for s in series_list:
        for date in s.dates():
            if date not in seen:
                seen.add(date)
                axis.append(date)
    if order == "chronological":
        return sorted(axis)
    if order != "first_seen":
        raise ValueError(f"Unsupported axis order: {order}")
    return axis


def reindex_values(series: CountrySeries, field_name: str, date_axis: List[str]) -> List[int]:
    """Values of one metric positioned on the shared axis, 0 where the day is missing."""
    values = pd.Series(series.values(field_name), index=series.dates(), dtype="int64")
    # First occurrence wins when a day was reported twice
    values = values[~values.index.duplicated(keep="first")]
    return [int(v) for v in values.reindex(date_axis, fill_value=0)]


def align_series(
    series_list: List[CountrySeries], field_name: str, order: str = "first_seen"
) -> AlignedChartData:
    if field_name not in METRIC_FIELDS:
        raise ValueError(f"Unknown metric field: {field_name}")
    date_axis = build_date_axis(series_list, order)
    series = [
        {
            "name": s.country.name,
            "type": "line",
            "data": reindex_values(s, field_name, date_axis),
        }
        for s in series_list
    ]
    return AlignedChartData(date_axis, series)


__all__ = ["AlignedChartData", "build_date_axis", "reindex_values", "align_series"]
