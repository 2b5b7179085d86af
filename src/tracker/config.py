"""
Tracker configuration and settings.
"""

import os
from pathlib import Path
from typing import Optional

DEFAULT_BASE_URL = (
    "https://services9.arcgis.com/N9p5hsImWXAccRNI/arcgis/rest/services/Nc2JKvYFoAEOFCG5JSI6"
)
DEFAULT_REFERER = "https://www.arcgis.com/apps/opsdashboard/index.html"
AXIS_ORDERS = ("first_seen", "chronological")


def default_output_dir(module_file: str = __file__) -> Path:
    """Where index.html goes when no output path is configured.

    A source or editable checkout writes next to the program (the project root).
    An installed package lives under site-packages, so it writes to the working
    directory.
    """
    path = Path(module_file).resolve()
    if any(part in ("site-packages", "dist-packages") for part in path.parts):
        return Path.cwd()
    return path.parent.parent.parent


class TrackerConfig:
    """Configuration for a single fetch-and-render run."""

    def __init__(
        self,
        data_path: str = "data.json",
        output_path: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        referer: str = DEFAULT_REFERER,
        page_size: int = 1000,
        timeout: int = 15,
        axis_order: str = "first_seen",
        log_file: str = "tracker.log",
    ):
        if axis_order not in AXIS_ORDERS:
            raise ValueError(f"Unsupported axis order: {axis_order} (expected one of {AXIS_ORDERS})")
        if page_size <= 0:
            raise ValueError("page_size must be positive")

        self.data_path = data_path
        self.base_url = base_url.rstrip("/")
        self.referer = referer
        self.page_size = page_size
        self.timeout = timeout
        self.axis_order = axis_order
        self.log_file = log_file

        if output_path is None:
            self.output_path = str(default_output_dir() / "index.html")
        else:
            self.output_path = output_path

    @classmethod
    def from_env(cls) -> "TrackerConfig":
        """Create config from environment variables."""
        return cls(
            data_path=os.getenv("TRACKER_DATA_PATH", "data.json"),
            output_path=os.getenv("TRACKER_OUTPUT_PATH"),
            base_url=os.getenv("TRACKER_BASE_URL", DEFAULT_BASE_URL),
            referer=os.getenv("TRACKER_REFERER", DEFAULT_REFERER),
            page_size=int(os.getenv("TRACKER_PAGE_SIZE", "1000")),
            timeout=int(os.getenv("TRACKER_TIMEOUT", "15")),
            axis_order=os.getenv("TRACKER_AXIS_ORDER", "first_seen"),
            log_file=os.getenv("TRACKER_LOG_FILE", "tracker.log"),
        )

    @classmethod
    def from_config_file(cls, config_path: str = "tracker.conf") -> "TrackerConfig":
        """Create config from configuration file."""
        config = {}
        if os.path.exists(config_path):
            with open(config_path, "r", encoding="utf-8") as f:
                for line in f:
                    line = line.strip()
                    if line and not line.startswith("#"):
                        key, value = line.split("=", 1)
                        config[key.strip()] = value.strip()

        return cls(
            data_path=config.get("data_path", "data.json"),
            output_path=config.get("output_path"),
            base_url=config.get("base_url", DEFAULT_BASE_URL),
            referer=config.get("referer", DEFAULT_REFERER),
            page_size=int(config.get("page_size", "1000")),
            timeout=int(config.get("timeout", "15")),
            axis_order=config.get("axis_order", "first_seen"),
            log_file=config.get("log_file", "tracker.log"),
        )
