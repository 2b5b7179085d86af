import logging
import sys
from pathlib import Path

from utils import setup_logging
from tracker import TrackerConfig
from sources import COUNTRY_LIST, fetch_all
from snapshot import SnapshotHit, lookup_snapshot, save_snapshot
from htmlgen import render, save_html, to_document

CONFIG_FILE = "tracker.conf"


def load_config(config_path=CONFIG_FILE):
    """Config file wins when present, otherwise the environment."""
    if Path(config_path).exists():
        return TrackerConfig.from_config_file(config_path)
    return TrackerConfig.from_env()


def load_series(config, countries, session=None):
    """Snapshot data when there is a usable one, a fresh fetch otherwise."""
    cached = lookup_snapshot(config.data_path)
    if isinstance(cached, SnapshotHit):
        logging.info(f"[SNAPSHOT] Using {len(cached.series)} cached series, skipping fetch")
        return cached.series
    logging.info(f"[SNAPSHOT] Miss ({cached.reason}), fetching {len(countries)} countries")
    return fetch_all(countries, config, session)


def run(config, countries=None, session=None):
    countries = COUNTRY_LIST if countries is None else countries
    series = load_series(config, countries, session)

    chart = render(series, config.axis_order)
    save_html(to_document(chart), config.output_path)

    # Always refreshed, whether the data came from disk or the network
    save_snapshot(series, config.data_path)
    return series


def main():
    config = load_config()
    setup_logging(config.log_file)
    run(config)
    logging.info("Chart generated successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
