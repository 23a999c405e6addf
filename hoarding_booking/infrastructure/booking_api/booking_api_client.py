from __future__ import annotations

import logging
from typing import Any

import httpx

from hoarding_booking.application.exceptions import BookedRangesUnavailable
from hoarding_booking.application.ports.booked_ranges import BookedRangesPort
from hoarding_booking.core.config import settings


class BookingApiClient(BookedRangesPort):
    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = None,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._base_url = (base_url or settings.BOOKING_API_BASE_URL or "").rstrip("/")
        self._token = token or settings.BOOKING_API_TOKEN
        self._client = client or httpx.Client(timeout=timeout or settings.BOOKING_API_TIMEOUT_SECONDS)
        self._logger = logging.getLogger(__name__)

        if not self._base_url:
            raise ValueError("BOOKING_API_BASE_URL is required for the booking API client")

    def fetch_booked_ranges(self, item_id: str) -> list[dict[str, Any]]:
        url = f"{self._base_url}/bookings/hoarding/{item_id}/booked-dates"
        headers = {"Authorization": f"Bearer {self._token}"} if self._token else {}

        try:
            response = self._client.get(url, headers=headers)
            response.raise_for_status()
        except httpx.HTTPError as e:
            self._logger.error("Error fetching booked ranges", extra={"item_id": item_id, "error": str(e)})
            raise BookedRangesUnavailable(str(e)) from e

        if response.status_code == 204 or not response.content:
            return []

        # Misrouted requests come back as an HTML page rather than an error status.
        content_type = response.headers.get("content-type", "")
        if "application/json" not in content_type:
            self._logger.warning(
                "Booked ranges response is not JSON; treating as empty",
                extra={"item_id": item_id},
            )
            return []

        try:
            data = response.json()
        except ValueError:
            self._logger.warning("Booked ranges response is not valid JSON", extra={"item_id": item_id})
            return []

        if not isinstance(data, list):
            return []
        return [entry for entry in data if isinstance(entry, dict)]

    def close(self) -> None:
        self._client.close()
