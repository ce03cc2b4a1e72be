"""
RateFinder - Centralised configuration.

All tunables live here.  Every other module imports from config
instead of reading os.environ directly.
"""

from __future__ import annotations
import os
from pathlib import Path


# ── Paths ──────────────────────────────────────────────────────────────
BASE_DIR      = Path(__file__).resolve().parent
DATASET_PATH  = Path(os.environ.get("RATEFINDER_DATASET", BASE_DIR / "dataset" / "ports.json"))

# ── Server ─────────────────────────────────────────────────────────────
HOST   = os.environ.get("RATEFINDER_HOST", "0.0.0.0")
PORT   = int(os.environ.get("RATEFINDER_PORT", "3001"))
DEBUG  = os.environ.get("RATEFINDER_DEBUG", "0") == "1"
SECRET = os.environ.get("RATEFINDER_SECRET", "ratefinder-dev-key-change-in-prod")
LOG_LEVEL    = os.environ.get("RATEFINDER_LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = os.environ.get("RATEFINDER_CORS_ORIGINS", "*")

# ── Rates / cart backend (external) ────────────────────────────────────
RATES_BACKEND_URL = os.environ.get("RATEFINDER_RATES_BACKEND", "http://localhost:3001")
RATES_TIMEOUT     = float(os.environ.get("RATEFINDER_RATES_TIMEOUT", "10"))
RATES_PER_PAGE    = 10

# ── Suggestions ────────────────────────────────────────────────────────
SUGGEST_DEFAULT_LIMIT = 10
FIELD_SAMPLE_SIZE     = 50     # rows scored when detecting the search column

# ── Search form ────────────────────────────────────────────────────────
RATE_TYPES   = ["FCL Buy Rates", "LCL Buy Rates", "Spot Rates"]
SORT_OPTIONS = {
    "relevance": "Relevance",
    "price_asc": "Price: Low → High",
    "price_desc": "Price: High → Low",
}
DEFAULT_SORT        = "relevance"
DEFAULT_SEARCH_DATE = "2023-02-21"
