"""Resolve a pair of free-text locations into route data.

Every collaborator failure is reported as the same ``RouteUnavailable`` so
callers never distinguish a bad origin from a bad destination or a missing
route.
"""

import logging

from requests import RequestException

from fares.domain.decimal_value import to_decimal
from fares.domain.types import ResolvedRoute, RouteRequest
from fares.services.geocoding import GeocodedPoint, GeocodingError, geocode_location
from fares.services.routing import DRIVING, RoutingError, fetch_directions

logger = logging.getLogger(__name__)

COLLABORATOR_ERRORS = (GeocodingError, RoutingError, RequestException)


class RouteUnavailable(Exception):
    pass


def resolve_route(request: RouteRequest) -> ResolvedRoute:
    try:
        routes = fetch_directions(
            origin_text=request.origin_text,
            destination_text=request.destination_text,
            mode=DRIVING,
        )
    except COLLABORATOR_ERRORS as exc:
        logger.debug("Route lookup failed: %s", exc)
        raise RouteUnavailable() from exc

    if not routes or not routes[0].legs:
        logger.debug("Route lookup returned no legs")
        raise RouteUnavailable()

    return ResolvedRoute(distance_meters=to_decimal(routes[0].legs[0].distance_meters))


def geocode_endpoints(request: RouteRequest) -> tuple[GeocodedPoint, GeocodedPoint]:
    try:
        origin = geocode_location(request.origin_text)
        destination = geocode_location(request.destination_text)
    except COLLABORATOR_ERRORS as exc:
        logger.debug("Endpoint geocoding failed: %s", exc)
        raise RouteUnavailable() from exc

    return origin, destination
