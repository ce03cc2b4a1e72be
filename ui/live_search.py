"""
ui.live_search - Fast JSON endpoints for the search form.

Separate from the public API so UI-specific concerns (dropdown
highlighting, form options) stay out of /api.
"""

from __future__ import annotations

import json as _json

from flask import request

from ui import ui_bp
from services import get_suggest_service, parse_limit, split_highlight
import config


@ui_bp.route("/ui-api/suggest")
def ui_suggest():
    """Suggestions with the matched part of each value marked."""
    q = request.args.get("q", "").strip()
    if not q:
        return _json_response([])

    limit = parse_limit(request.args.get("limit"))
    values = get_suggest_service().suggest(q, limit)
    return _json_response([
        {"value": v, "parts": split_highlight(v, q)}
        for v in values
    ])


@ui_bp.route("/ui-api/search_options")
def ui_search_options():
    """Rate types, sort keys and the default date for the search form."""
    return _json_response({
        "rate_types": config.RATE_TYPES,
        "sort_options": [
            {"value": k, "label": v} for k, v in config.SORT_OPTIONS.items()
        ],
        "default_sort": config.DEFAULT_SORT,
        "default_date": config.DEFAULT_SEARCH_DATE,
        "per_page": config.RATES_PER_PAGE,
    })


def _json_response(data, status: int = 200) -> tuple:
    return (_json.dumps(data, ensure_ascii=False), status,
            {"Content-Type": "application/json"})
