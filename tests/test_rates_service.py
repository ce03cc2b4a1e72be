from unittest.mock import patch, Mock

import requests

from services.rate_models import RateQuery, RateRecord, RatesPage, format_price
from services.rates_service import RatesClient


def _response(payload, status=200):
    resp = Mock()
    resp.status_code = status
    resp.json.return_value = payload
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status} error")
    else:
        resp.raise_for_status.return_value = None
    return resp


@patch("requests.get")
def test_search_rates_parses_page(mock_get):
    mock_get.return_value = _response({
        "total": 23,
        "page": 2,
        "results": [
            {"id": 7, "origin": "Chicago, US", "destination": "Nhava Sheva",
             "carrier": "MSC", "rate20": 1250, "rate40": 1999.5,
             "currency": "USD", "date": "2023-03-31"},
        ],
    })
    client = RatesClient("http://rates.test/")
    page = client.search_rates(RateQuery(origin="USCHI", page=2))

    args, kwargs = mock_get.call_args
    assert args[0] == "http://rates.test/api/rates"
    assert kwargs["params"] == {"origin": "USCHI", "limit": "10", "page": "2",
                                "sort": "relevance"}
    assert kwargs["timeout"] == client.timeout

    assert page.total == 23
    assert page.page == 2
    assert page.error is None
    rate = page.results[0]
    assert rate.id == 7
    assert rate.rate20 == 1250.0
    assert rate.rate40hc is None
    assert page.showing_from == 11
    assert page.showing_to == 20
    assert page.has_prev and page.has_next


@patch("requests.get")
def test_search_rates_network_error_gives_empty_page(mock_get):
    mock_get.side_effect = requests.ConnectionError("refused")
    page = RatesClient("http://rates.test").search_rates(RateQuery(page=3))
    assert page.results == []
    assert page.total == 0
    assert page.page == 3
    assert page.error == "Failed to fetch rates"


@patch("requests.get")
def test_search_rates_http_error_gives_empty_page(mock_get):
    mock_get.return_value = _response({}, status=503)
    page = RatesClient("http://rates.test").search_rates(RateQuery())
    assert page.results == []
    assert page.error


@patch("requests.get")
def test_search_rates_bad_json(mock_get):
    resp = _response(None)
    resp.json.side_effect = ValueError("no json")
    mock_get.return_value = resp
    page = RatesClient("http://rates.test").search_rates(RateQuery())
    assert page.results == []
    assert page.error


@patch("requests.get")
def test_search_rates_missing_fields_default(mock_get):
    mock_get.return_value = _response({"results": None})
    page = RatesClient("http://rates.test").search_rates(RateQuery(page=4))
    assert page.total == 0
    assert page.page == 4
    assert page.results == []


@patch("requests.post")
def test_add_to_cart(mock_post):
    mock_post.return_value = _response({"ok": True})
    assert RatesClient("http://rates.test").add_to_cart(7) is True
    args, kwargs = mock_post.call_args
    assert args[0] == "http://rates.test/api/cart"
    assert kwargs["json"] == {"rateId": 7}


@patch("requests.post")
def test_add_to_cart_failure(mock_post):
    mock_post.return_value = _response({}, status=500)
    assert RatesClient("http://rates.test").add_to_cart(7) is False
    mock_post.side_effect = requests.Timeout("slow")
    assert RatesClient("http://rates.test").add_to_cart(7) is False


def test_query_from_args_defaults_bad_values():
    q = RateQuery.from_args({"origin": " Shanghai ", "page": "x", "sort": "cheapest",
                             "rateType": "Bulk"})
    assert q.origin == "Shanghai"
    assert q.page == 1
    assert q.sort == "relevance"
    assert q.rate_type == ""
    assert q.to_params() == {"origin": "Shanghai", "limit": "10", "page": "1",
                             "sort": "relevance"}


def test_query_keeps_known_options():
    q = RateQuery.from_args({"destination": "INNSA", "date": "2023-02-21",
                             "rateType": "Spot Rates", "sort": "price_desc", "page": "0"})
    assert q.page == 1
    assert q.to_params() == {"destination": "INNSA", "date": "2023-02-21",
                             "rateType": "Spot Rates", "limit": "10", "page": "1",
                             "sort": "price_desc"}


def test_rate_record_ignores_non_numeric_prices():
    rate = RateRecord.from_dict({"id": 1, "origin": "A", "destination": "B",
                                 "rate20": "1200", "rate40": True, "rate40hc": 2100})
    assert rate.rate20 is None
    assert rate.rate40 is None
    assert rate.to_dict()["prices"] == {"20ft": "—", "40ft": "—",
                                        "40ft_hc": "2100.00 USD"}


def test_format_price():
    assert format_price(1234.5, "EUR") == "1234.50 EUR"
    assert format_price(99, None) == "99.00 USD"
    assert format_price(None, "USD") == "—"


def test_pager_bounds():
    empty = RatesPage()
    assert (empty.showing_from, empty.showing_to) == (0, 0)
    assert not empty.has_prev and not empty.has_next
    last = RatesPage(total=23, page=3)
    assert (last.showing_from, last.showing_to) == (21, 23)
    assert last.has_prev and not last.has_next
