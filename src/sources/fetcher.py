"""Sequential per-country fetch with explicit success/degraded outcomes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

import requests

from tracker.config import TrackerConfig
from tracker.models import Country, CountrySeries
from .arcgis import build_headers, build_query_params, build_query_url, extract_points

logger = logging.getLogger(__name__)


@dataclass
class FetchResult:
    """Outcome of one country fetch.

    A degraded result always carries an empty series so the run can go on.
    """

    series: CountrySeries
    ok: bool = True
    reason: Optional[str] = None

    @classmethod
    def success(cls, series: CountrySeries) -> "FetchResult":
        return cls(series=series)

    @classmethod
    def degraded(cls, country: Country, reason: str) -> "FetchResult":
        return cls(series=CountrySeries(country), ok=False, reason=reason)


def fetch_country(country: Country, config: TrackerConfig, session=None) -> FetchResult:
    """Fetch one country's records. Never raises for HTTP or transport errors."""
    http = session or requests
    url = build_query_url(config.base_url)
    try:
        resp = http.get(
            url,
            params=build_query_params(country, config.page_size),
            headers=build_headers(config.referer),
            timeout=config.timeout,
        )
        if resp.status_code != 200:
            logger.warning(f"Non-200 status code for {country.code}: {resp.status_code}")
            return FetchResult.degraded(country, f"HTTP {resp.status_code}")
        payload = resp.json()
    except requests.RequestException as e:
        logger.error(f"Requests error for {country.code}: {e}")
        return FetchResult.degraded(country, str(e))
    except ValueError as e:
        logger.error(f"Invalid JSON body for {country.code}: {e}")
        return FetchResult.degraded(country, f"invalid JSON: {e}")

    series = CountrySeries(country, extract_points(payload))
    logger.info(f"Fetched [{country.name}] data - {len(series.points)}")
    return FetchResult.success(series)


def fetch_all_results(
    countries: List[Country], config: TrackerConfig, session=None
) -> List[FetchResult]:
    """Fetch every country one at a time, preserving input order."""
    results = [fetch_country(country, config, session) for country in countries]
    degraded = [r.series.country.code for r in results if not r.ok]
    if degraded:
        logger.warning(f"{len(degraded)} country fetch(es) degraded: {', '.join(degraded)}")
    return results


def fetch_all(countries: List[Country], config: TrackerConfig, session=None) -> List[CountrySeries]:
    return [r.series for r in fetch_all_results(countries, config, session)]


__all__ = ["FetchResult", "fetch_country", "fetch_all_results", "fetch_all"]
