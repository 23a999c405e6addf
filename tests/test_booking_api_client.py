"""
Tests for the HTTP adapter that loads booked ranges from the booking backend.
"""

from __future__ import annotations

import httpx
import pytest

from hoarding_booking.application.exceptions import BookedRangesUnavailable
from hoarding_booking.infrastructure.booking_api.booking_api_client import BookingApiClient


def _client(handler) -> BookingApiClient:
    return BookingApiClient(
        base_url="https://api.example.test/",
        token="secret",
        client=httpx.Client(transport=httpx.MockTransport(handler)),
    )


def test_fetches_ranges_with_bearer_token():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["auth"] = request.headers.get("Authorization")
        return httpx.Response(200, json=[{"startDate": "2025-03-01", "endDate": "2025-03-05"}, "junk"])

    ranges = _client(handler).fetch_booked_ranges("42")
    assert ranges == [{"startDate": "2025-03-01", "endDate": "2025-03-05"}]
    assert seen["url"] == "https://api.example.test/bookings/hoarding/42/booked-dates"
    assert seen["auth"] == "Bearer secret"


def test_html_body_is_treated_as_empty():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html><body>Not found</body></html>", headers={"content-type": "text/html"})

    assert _client(handler).fetch_booked_ranges("42") == []


def test_non_list_json_and_no_content_are_empty():
    assert _client(lambda r: httpx.Response(200, json={"error": "nope"})).fetch_booked_ranges("1") == []
    assert _client(lambda r: httpx.Response(204)).fetch_booked_ranges("1") == []


def test_http_errors_raise_booked_ranges_unavailable():
    with pytest.raises(BookedRangesUnavailable):
        _client(lambda r: httpx.Response(500, json={"error": "boom"})).fetch_booked_ranges("1")


def test_transport_errors_raise_booked_ranges_unavailable():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(BookedRangesUnavailable):
        _client(handler).fetch_booked_ranges("1")


def test_base_url_is_required():
    with pytest.raises(ValueError):
        BookingApiClient(base_url="", client=httpx.Client())
