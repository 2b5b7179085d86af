"""Single-file HTML document builder.

``render`` aligns the confirmed-count series; ``to_document`` turns the result
into a page that draws the chart client-side with ECharts. Nothing here touches
the network.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from tracker.models import CountrySeries
from .align import AlignedChartData, align_series
from .chart_config import build_chart_option, chart_option_json
from .constants import CONFIRM_TITLE, ECHARTS_URL

logger = logging.getLogger(__name__)


def render(series_list: List[CountrySeries], order: str = "first_seen") -> AlignedChartData:
    return align_series(series_list, "confirmed", order)


def _script_safe(payload: str) -> str:
    # Keep a display name from closing the inline <script>
    return payload.replace("</", "<\\/")


def to_document(chart: AlignedChartData) -> str:
    option = build_chart_option(chart, CONFIRM_TITLE, boundary_gap=False)
    option_json = _script_safe(chart_option_json(option))
    html_parts = [
        "<!DOCTYPE html>",
        "<html>",
        "<head>",
        '  <meta charset="utf-8">',
        f'  <script src="{ECHARTS_URL}"></script>',
        "  <style>",
        "    * {margin: 0; padding: 0;}",
        "    #main {display: flex; height: 100vh; width: 100vw;}",
        "  </style>",
        "</head>",
        "<body>",
        '<div id="main"></div>',
        '<script type="text/javascript">',
        "window.onload = function() {",
        '  var confirm = echarts.init(document.getElementById("main"));',
        f"  confirm.setOption({option_json});",
        "}",
        "</script>",
        "</body>",
        "</html>",
    ]
    return "\n".join(html_parts)


def save_html(html: str, path: str | Path) -> Path:
    p = Path(path)
    with p.open("w", encoding="utf-8") as f:
        f.write(html)
    logger.info(f"HTML written to {p}")
    return p


__all__ = ["render", "to_document", "save_html"]
