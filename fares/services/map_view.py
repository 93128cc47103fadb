from dataclasses import dataclass

from fares.domain.types import Coordinates, RouteRequest
from fares.services.config import MapProperties, get_map_properties
from fares.services.route_pipeline import geocode_endpoints


@dataclass(frozen=True)
class MapMarker:
    position: Coordinates
    title: str
    icon_url: str
    shadow_url: str


@dataclass(frozen=True)
class MapView:
    center: Coordinates
    zoom_level: int
    style_name: str
    route_stroke_colour: str
    route_stroke_weight: int
    markers: tuple[MapMarker, ...] = ()
    origin_text: str | None = None
    destination_text: str | None = None


def make_marker(
    position: Coordinates,
    title: str,
    colour: str,
    icon: str,
    properties: MapProperties,
) -> MapMarker:
    return MapMarker(
        position=position,
        title=title,
        icon_url=f"{properties.marker_image_url_prefix}{icon}|{colour}",
        shadow_url=properties.marker_shadow_url,
    )


def midpoint(first: Coordinates, second: Coordinates) -> Coordinates:
    return Coordinates(
        latitude=(first.latitude + second.latitude) / 2,
        longitude=(first.longitude + second.longitude) / 2,
    )


def default_map_view(properties: MapProperties | None = None) -> MapView:
    properties = properties or get_map_properties()
    return MapView(
        center=properties.center,
        zoom_level=properties.default_zoom_level,
        style_name=properties.map_style_name,
        route_stroke_colour=properties.route_stroke_colour,
        route_stroke_weight=properties.route_stroke_weight,
    )


def build_map_view(request: RouteRequest, properties: MapProperties | None = None) -> MapView:
    properties = properties or get_map_properties()
    origin_point, destination_point = geocode_endpoints(request)

    origin = Coordinates(latitude=origin_point.latitude, longitude=origin_point.longitude)
    destination = Coordinates(latitude=destination_point.latitude, longitude=destination_point.longitude)

    return MapView(
        center=midpoint(origin, destination),
        zoom_level=properties.default_zoom_level,
        style_name=properties.map_style_name,
        route_stroke_colour=properties.route_stroke_colour,
        route_stroke_weight=properties.route_stroke_weight,
        markers=(
            make_marker(
                origin,
                properties.origin_marker_title,
                properties.origin_marker_colour,
                properties.origin_marker_icon,
                properties,
            ),
            make_marker(
                destination,
                properties.destination_marker_title,
                properties.destination_marker_colour,
                properties.destination_marker_icon,
                properties,
            ),
        ),
        origin_text=request.origin_text,
        destination_text=request.destination_text,
    )
