"""
ui.routes_rates - Results page data: rate listing and add-to-cart.

Both calls go to the external rates backend through RatesClient.
Backend failures come back as an empty page or {"ok": false}; they are
never turned into a 5xx here.
"""

from __future__ import annotations

from flask import request

from ui import ui_bp
from ui.live_search import _json_response
from services import get_rates_client, RateQuery


@ui_bp.route("/ui-api/rates")
def ui_rates():
    """
    GET /ui-api/rates?origin=&destination=&date=&rateType=&page=1&sort=relevance
    """
    query = RateQuery.from_args(request.args)
    page = get_rates_client().search_rates(query)
    data = page.to_dict()
    data["query"] = {
        "origin": query.origin,
        "destination": query.destination,
        "date": query.date,
        "rateType": query.rate_type,
        "sort": query.sort,
    }
    return _json_response(data)


@ui_bp.route("/ui-api/cart", methods=["POST"])
def ui_add_to_cart():
    """POST {"rateId": <int>} → {"ok": bool}"""
    body = request.get_json(silent=True)
    rate_id = body.get("rateId") if isinstance(body, dict) else None
    if isinstance(rate_id, bool) or not isinstance(rate_id, int):
        return _json_response({"ok": False, "error": "rateId must be an integer"}, 400)

    ok = get_rates_client().add_to_cart(rate_id)
    if not ok:
        return _json_response({"ok": False, "error": "Failed to add to cart"})
    return _json_response({"ok": True})
