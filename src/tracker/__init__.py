"""Core types and settings for the pandemic trend chart."""

from .config import TrackerConfig
from .models import Country, CountrySeries, DataPoint, METRIC_FIELDS

__all__ = ["TrackerConfig", "Country", "CountrySeries", "DataPoint", "METRIC_FIELDS"]
