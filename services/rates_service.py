"""
services.rates_service - Client for the external rates and cart backend.

The backend is not part of this application.  Every failure (network,
HTTP status, unexpected body) is logged and turned into an empty page or
a False return so the results page can render an empty state instead of
an error.  Nothing is retried.
"""

from __future__ import annotations

import logging

import requests

import config
from services.rate_models import RateQuery, RateRecord, RatesPage

logger = logging.getLogger(__name__)

HEADERS = {
    "User-Agent": "RateFinder/1.0",
    "Accept": "application/json",
}


class RatesClient:

    def __init__(self, base_url: str = config.RATES_BACKEND_URL,
                 timeout: float = config.RATES_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def search_rates(self, query: RateQuery) -> RatesPage:
        """GET /api/rates.  Returns an empty page (with .error set) on failure."""
        url = f"{self.base_url}/api/rates"
        try:
            response = requests.get(url, params=query.to_params(),
                                    headers=HEADERS, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            logger.error(f"Rates fetch failed: {e}")
            return RatesPage(page=query.page, per_page=query.limit,
                             error="Failed to fetch rates")
        except ValueError as e:
            logger.error(f"Rates backend returned invalid JSON: {e}")
            return RatesPage(page=query.page, per_page=query.limit,
                             error="Failed to fetch rates")

        if not isinstance(data, dict):
            logger.error(f"Unexpected rates payload type: {type(data).__name__}")
            return RatesPage(page=query.page, per_page=query.limit,
                             error="Failed to fetch rates")

        results = [RateRecord.from_dict(r) for r in data.get("results") or []
                   if isinstance(r, dict)]
        return RatesPage(
            total=_int_or(data.get("total"), 0),
            page=_int_or(data.get("page"), query.page),
            per_page=query.limit,
            results=results,
        )

    def add_to_cart(self, rate_id: int) -> bool:
        """POST /api/cart with {"rateId": ...}.  True on a 2xx response."""
        url = f"{self.base_url}/api/cart"
        try:
            response = requests.post(url, json={"rateId": rate_id},
                                     headers=HEADERS, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Add to cart failed for rate {rate_id}: {e}")
            return False
        logger.info(f"Added rate {rate_id} to cart")
        return True


def _int_or(value, default: int) -> int:
    # A zero/absent total or page falls back, as the results page does
    if isinstance(value, bool):
        return default
    try:
        return int(value) or default
    except (TypeError, ValueError):
        return default
