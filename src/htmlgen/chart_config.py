"""Chart configuration helpers."""

from __future__ import annotations

from typing import Dict, List
import json

from tracker.models import CountrySeries
from .align import AlignedChartData, align_series
from .constants import CONFIRM_TITLE, DEATH_TITLE, NEW_CONFIRMED_TITLE


def build_chart_option(aligned: AlignedChartData, title: str, boundary_gap: bool = True) -> Dict:
    x_axis = {"type": "category", "data": aligned.date_axis}
    if not boundary_gap:
        x_axis = {"type": "category", "boundaryGap": False, "data": aligned.date_axis}
    return {
        "title": {"text": title},
        "tooltip": {"trigger": "axis"},
        "legend": {"data": [s["name"] for s in aligned.series]},
        "xAxis": x_axis,
        "yAxis": {"type": "value"},
        "series": aligned.series,
    }


def build_chart_options(series_list: List[CountrySeries], order: str = "first_seen") -> Dict[str, Dict]:
    """One option per metric, all drawn from the same alignment routine."""
    return {
        "confirm": build_chart_option(
            align_series(series_list, "confirmed", order), CONFIRM_TITLE, boundary_gap=False
        ),
        "death": build_chart_option(align_series(series_list, "deaths", order), DEATH_TITLE),
        "new_confirmed": build_chart_option(
            align_series(series_list, "new_confirmed", order), NEW_CONFIRMED_TITLE
        ),
    }


def chart_option_json(option: Dict) -> str:
    return json.dumps(option, ensure_ascii=False)


__all__ = ["build_chart_option", "build_chart_options", "chart_option_json"]
