"""Remote case-count sources."""

from .countries import COUNTRY_LIST  # noqa: F401
from .fetcher import FetchResult, fetch_all, fetch_all_results  # noqa: F401

__all__ = ["COUNTRY_LIST", "FetchResult", "fetch_all", "fetch_all_results"]
