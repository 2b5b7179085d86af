# Utils package
import logging
from datetime import datetime, timezone

import requests
from fake_useragent import UserAgent


DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"


def format_day(value):
    """Format a timestamp to the short ``MM-DD`` day label used on the chart axis.

    Accepts epoch milliseconds (as returned by ArcGIS), ISO strings or datetimes.
    Timestamps are read as UTC. Unparseable values are returned unchanged.
    """
    try:
        if isinstance(value, datetime):
            dt = value
        elif isinstance(value, (int, float)):
            dt = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        elif "T" in value:
            dt = datetime.fromisoformat(value.split(".")[0])
        else:
            dt = datetime.strptime(value, "%Y-%m-%d")
        return f"{dt.month:02d}-{dt.day:02d}"
    except (ValueError, TypeError, OverflowError, OSError):
        return value


def get_user_agent():
    try:
        return UserAgent().random
    except (ImportError, AttributeError, requests.exceptions.RequestException, TimeoutError):
        return DEFAULT_USER_AGENT


def setup_logging(log_file):
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        handlers=[
            logging.FileHandler(log_file, encoding="utf-8"),
            logging.StreamHandler(),
        ],
    )
