import hashlib
import logging
from dataclasses import dataclass

import requests
from django.conf import settings
from django.core.cache import cache

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeocodedPoint:
    latitude: float
    longitude: float
    display_name: str
    source: str


class GeocodingError(Exception):
    pass


def _cache_key(query: str) -> str:
    digest = hashlib.sha256(query.lower().strip().encode("utf-8")).hexdigest()
    return f"geocode::{digest}"


def _google_lookup(query: str) -> GeocodedPoint | None:
    response = requests.get(
        f"{settings.GOOGLE_MAPS_API_BASE_URL}/geocode/json",
        params={
            "address": query,
            "key": settings.GOOGLE_MAPS_API_KEY,
        },
        timeout=settings.EXTERNAL_API_TIMEOUT_SECONDS,
    )
    response.raise_for_status()

    payload = response.json()
    status = payload.get("status")
    if status == "ZERO_RESULTS" or not payload.get("results"):
        return None
    if status != "OK":
        message = payload.get("error_message", status)
        raise GeocodingError(f"Google geocoding failed: {message}")

    item = payload["results"][0]
    location = item["geometry"]["location"]
    return GeocodedPoint(
        latitude=float(location["lat"]),
        longitude=float(location["lng"]),
        display_name=item.get("formatted_address", query),
        source="google",
    )


def _nominatim_lookup(query: str) -> GeocodedPoint | None:
    response = requests.get(
        f"{settings.NOMINATIM_API_BASE_URL}/search",
        params={
            "q": query,
            "format": "jsonv2",
            "limit": 1,
        },
        headers={"User-Agent": settings.GEOLOOKUP_USER_AGENT},
        timeout=settings.EXTERNAL_API_TIMEOUT_SECONDS,
    )
    response.raise_for_status()

    payload = response.json()
    if not payload:
        return None

    item = payload[0]
    return GeocodedPoint(
        latitude=float(item["lat"]),
        longitude=float(item["lon"]),
        display_name=item.get("display_name", query),
        source="nominatim",
    )


def _remote_lookup(query: str) -> GeocodedPoint | None:
    if settings.GOOGLE_MAPS_API_KEY and settings.MAP_PROVIDER != "osrm":
        return _google_lookup(query)
    return _nominatim_lookup(query)


def geocode_location(query: str) -> GeocodedPoint:
    normalized_query = query.strip()
    if not normalized_query:
        raise GeocodingError("Location input cannot be empty")

    cache_key = _cache_key(normalized_query)
    cached = cache.get(cache_key)
    if cached:
        return cached

    point = _remote_lookup(normalized_query)
    if point is None:
        raise GeocodingError(f"Unable to geocode location: {normalized_query}")

    logger.debug("Geocoded %r via %s", normalized_query, point.source)
    if settings.GEOCODE_CACHE_SECONDS > 0:
        cache.set(cache_key, point, timeout=settings.GEOCODE_CACHE_SECONDS)
    return point
