"""
ArcGIS feature-service query helpers.

The Johns Hopkins dashboard publishes per-country daily counters through an
ArcGIS ``FeatureServer`` layer. This module knows the query shape and the
record layout; it does not decide what to do when a request fails.
"""

import logging

from tracker.models import DataPoint
from utils import format_day, get_user_agent

logger = logging.getLogger(__name__)

QUERY_PATH = "/FeatureServer/4/query"
OUT_FIELDS = "OBJECTID,Confirmed,Delta_Confirmed,Deaths,Last_Update"


def build_query_url(base_url):
    return base_url.rstrip("/") + QUERY_PATH


def build_query_params(country, page_size=1000):
    """Query parameters for one country's records, oldest first."""
    return {
        "f": "json",
        "where": f"Country_Region='{country.code}'",
        "returnGeometry": "false",
        "spatialRel": "esriSpatialRelIntersects",
        "outFields": OUT_FIELDS,
        "orderByFields": "Last_Update asc",
        "outSR": "102100",
        "resultOffset": "0",
        "resultRecordCount": str(page_size),
        "cacheHint": "true",
    }


def build_headers(referer):
    # The service rejects requests that do not come from the dashboard
    return {"referer": referer, "User-Agent": get_user_agent()}


def record_to_point(attributes):
    """Convert one feature's ``attributes`` dict into a DataPoint."""
    return DataPoint.from_dict(
        {
            "date": format_day(attributes.get("Last_Update")),
            "deaths": attributes.get("Deaths"),
            "confirmed": attributes.get("Confirmed"),
            "new_confirmed": attributes.get("Delta_Confirmed"),
        }
    )


def extract_points(payload):
    """Turn a query response body into DataPoints, skipping malformed features."""
    features = payload.get("features") if isinstance(payload, dict) else None
    if not isinstance(features, list):
        return []
    points = []
    for feature in features:
        attributes = feature.get("attributes") if isinstance(feature, dict) else None
        if not isinstance(attributes, dict) or attributes.get("Last_Update") is None:
            logger.debug(f"Skipping feature without attributes: {feature}")
            continue
        try:
            points.append(record_to_point(attributes))
        except (ValueError, TypeError, OverflowError) as e:
            logger.warning(f"Skipping malformed record {attributes}: {e}")
    return points
