"""
api.routes_suggest - /api/suggest autocomplete and /api/health.
"""

from flask import request, jsonify

from api import api_bp
from services import get_suggest_service, parse_limit


@api_bp.route("/suggest")
def suggest():
    """
    GET /api/suggest?q=<text>&limit=10

    Distinct values of the detected search column containing q,
    prefix matches first.  A bad limit silently becomes 10.
    """
    q = request.args.get("q", "")
    limit = parse_limit(request.args.get("limit"))
    return jsonify(get_suggest_service().suggest(q, limit))


@api_bp.route("/health")
def health():
    stats = get_suggest_service().dataset.stats()
    return jsonify({"ok": True, **stats})
