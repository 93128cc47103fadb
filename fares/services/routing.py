import logging
from dataclasses import dataclass

import requests
from django.conf import settings

from fares.services.geocoding import geocode_location

logger = logging.getLogger(__name__)

DRIVING = "driving"


@dataclass(frozen=True)
class RouteLeg:
    distance_meters: float
    duration_seconds: float


@dataclass(frozen=True)
class DirectionsRoute:
    legs: list[RouteLeg]
    provider: str


class RoutingError(Exception):
    pass


def _request_json(url: str, params: dict[str, str]) -> dict:
    response = requests.get(
        url,
        params=params,
        timeout=settings.EXTERNAL_API_TIMEOUT_SECONDS,
    )
    response.raise_for_status()
    return response.json()


def _parse_legs(raw_legs: list[dict], distance_of, duration_of) -> list[RouteLeg]:
    return [
        RouteLeg(
            distance_meters=float(distance_of(leg)),
            duration_seconds=float(duration_of(leg)),
        )
        for leg in raw_legs
    ]


def _fetch_google_directions(origin_text: str, destination_text: str, mode: str) -> list[DirectionsRoute]:
    token = settings.GOOGLE_MAPS_API_KEY
    if not token:
        raise RoutingError("GOOGLE_MAPS_API_KEY is required when MAP_PROVIDER=google")

    payload = _request_json(
        f"{settings.GOOGLE_MAPS_API_BASE_URL}/directions/json",
        params={
            "origin": origin_text,
            "destination": destination_text,
            "mode": mode,
            "key": token,
        },
    )

    if payload.get("status") != "OK" or not payload.get("routes"):
        message = payload.get("error_message", payload.get("status", "route not available"))
        raise RoutingError(f"Google directions failed: {message}")

    return [
        DirectionsRoute(
            legs=_parse_legs(
                route.get("legs", []),
                distance_of=lambda leg: leg["distance"]["value"],
                duration_of=lambda leg: leg["duration"]["value"],
            ),
            provider="google",
        )
        for route in payload["routes"]
    ]


def _fetch_osrm_directions(origin_text: str, destination_text: str, mode: str) -> list[DirectionsRoute]:
    origin = geocode_location(origin_text)
    destination = geocode_location(destination_text)

    coordinate_string = f"{origin.longitude},{origin.latitude};{destination.longitude},{destination.latitude}"
    url = f"{settings.OSRM_API_BASE_URL}/route/v1/{mode}/{coordinate_string}"

    payload = _request_json(
        url,
        params={
            "alternatives": "false",
            "overview": "false",
            "steps": "false",
        },
    )

    if payload.get("code") != "Ok" or not payload.get("routes"):
        message = payload.get("message", "route not available")
        raise RoutingError(f"OSRM directions failed: {message}")

    return [
        DirectionsRoute(
            legs=_parse_legs(
                route.get("legs", []),
                distance_of=lambda leg: leg["distance"],
                duration_of=lambda leg: leg["duration"],
            ),
            provider="osrm",
        )
        for route in payload["routes"]
    ]


def _resolve_provider() -> str:
    value = settings.MAP_PROVIDER
    if value in {"google", "osrm", "auto"}:
        return value
    return "auto"


def fetch_directions(origin_text: str, destination_text: str, mode: str = DRIVING) -> list[DirectionsRoute]:
    provider = _resolve_provider()
    candidate_providers = ["google", "osrm"] if provider == "auto" else [provider]

    errors: list[str] = []
    for candidate in candidate_providers:
        try:
            if candidate == "google":
                routes = _fetch_google_directions(origin_text, destination_text, mode)
            else:
                routes = _fetch_osrm_directions(origin_text, destination_text, mode)
        except RoutingError as exc:
            errors.append(f"{candidate}: {exc}")
            if provider != "auto":
                raise
            logger.info("Directions provider %s failed, trying next: %s", candidate, exc)
            continue

        return routes

    detail = "; ".join(errors) if errors else "No routing providers available"
    raise RoutingError(f"Unable to build route: {detail}")
