"""
services - Business-logic layer sitting between API/UI and the data.

The app factory builds one SuggestService and one RatesClient and stores
them on app.extensions; request handlers reach them through the helpers
below.
"""

from flask import current_app

from services.suggest_service import SuggestService, parse_limit, split_highlight   # noqa: F401
from services.rates_service import RatesClient                                      # noqa: F401
from services.rate_models import RateQuery, RateRecord, RatesPage, format_price     # noqa: F401

SUGGEST_EXT = "ratefinder.suggest"
RATES_EXT = "ratefinder.rates"


def get_suggest_service() -> SuggestService:
    return current_app.extensions[SUGGEST_EXT]


def get_rates_client() -> RatesClient:
    return current_app.extensions[RATES_EXT]
