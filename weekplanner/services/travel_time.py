"""
Travel time lookups between two addresses, backed by the Google Distance Matrix API.
"""

import logging
import math
import threading
from typing import Dict, Optional
import requests

from .. import config

logger = logging.getLogger(__name__)

# Returned when no API key is configured
DEFAULT_TRAVEL_MINUTES = 15


class TravelTimeError(Exception):
    """Raised when a travel time cannot be determined."""


class TravelTimeService:
    """
    Looks up travel minutes between addresses and memoizes the results.

    One instance is meant to be shared by every request in the process, so the
    cache is guarded by a lock. Keys are ordered: A -> B and B -> A are cached
    separately.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        mode: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.api_key = config.GOOGLE_MAPS_API_KEY if api_key is None else api_key
        self.mode = mode or config.TRAVEL_MODE
        self.base_url = base_url or config.DISTANCE_MATRIX_URL
        self.timeout = config.TRAVEL_TIME_TIMEOUT_SECONDS if timeout is None else timeout
        self._cache: Dict[str, int] = {}
        self._lock = threading.Lock()

    @property
    def cache_size(self) -> int:
        with self._lock:
            return len(self._cache)

    def get_travel_time_minutes(self, origin: Optional[str], destination: Optional[str]) -> int:
        """Travel minutes from origin to destination, rounded up."""
        if not origin or not destination:
            raise TravelTimeError("Addresses cannot be empty")

        cache_key = f"{origin}|{destination}"
        with self._lock:
            cached = self._cache.get(cache_key)
        if cached is not None:
            logger.debug(f"Cache hit for travel time: {origin} -> {destination}")
            return cached

        if not self.api_key:
            logger.warning("Google Maps API key not configured, using default estimate")
            return DEFAULT_TRAVEL_MINUTES

        try:
            minutes = self._fetch_travel_minutes(origin, destination)
        except TravelTimeError as e:
            logger.error(f"Failed to get travel time: {e}")
            raise

        with self._lock:
            self._cache[cache_key] = minutes

        logger.info(f"Travel time from '{origin}' to '{destination}': {minutes} minutes")
        return minutes

    def clear_cache(self) -> int:
        """Drop every cached travel time. Returns the number of entries removed."""
        with self._lock:
            cleared = len(self._cache)
            self._cache.clear()
        logger.info("Travel time cache cleared")
        return cleared

    def _fetch_travel_minutes(self, origin: str, destination: str) -> int:
        params = {
            "origins": origin,
            "destinations": destination,
            "mode": self.mode,
            "key": self.api_key,
        }
        try:
            response = requests.get(self.base_url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise TravelTimeError(f"Distance Matrix request failed: {e}") from e

        if response.status_code != 200:
            raise TravelTimeError(f"Google Maps API returned status: {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            raise TravelTimeError(f"Invalid Distance Matrix response: {e}") from e

        if not isinstance(payload, dict):
            raise TravelTimeError("Distance Matrix response is not a JSON object")

        status = payload.get("status")
        if status != "OK":
            raise TravelTimeError(f"Google Maps API status: {status}")

        try:
            element = payload["rows"][0]["elements"][0]
        except (KeyError, IndexError, TypeError) as e:
            raise TravelTimeError("Distance Matrix response has no route element") from e
        if not isinstance(element, dict):
            raise TravelTimeError("Distance Matrix route element is not a JSON object")

        element_status = element.get("status")
        if element_status != "OK":
            raise TravelTimeError(f"Route not found: {element_status}")

        try:
            return math.ceil(element["duration"]["value"] / 60)
        except (KeyError, TypeError, ValueError, OverflowError) as e:
            raise TravelTimeError(f"Distance Matrix route has no usable duration: {e}") from e
