"""HTML generation: date alignment, chart options and page assembly."""

from .align import AlignedChartData, align_series, build_date_axis  # noqa: F401
from .builder import render, save_html, to_document  # noqa: F401
from .chart_config import build_chart_option, build_chart_options  # noqa: F401
