import xml.etree.ElementTree as ElementTree
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from functools import lru_cache
from pathlib import Path

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from fares.domain.decimal_value import DecimalValue
from fares.domain.types import Coordinates, FareConfig


class InvalidNumericConfig(ImproperlyConfigured):
    pass


@dataclass(frozen=True)
class DisplayStrings:
    origin_placeholder: str
    destination_placeholder: str
    show_fare_label: str
    invalid_input_error_message: str


@dataclass(frozen=True)
class MapProperties:
    center: Coordinates
    default_zoom_level: int
    map_style_name: str
    marker_image_url_prefix: str
    marker_shadow_url: str
    origin_marker_colour: str
    origin_marker_icon: str
    origin_marker_title: str
    destination_marker_colour: str
    destination_marker_icon: str
    destination_marker_title: str
    route_stroke_colour: str
    route_stroke_weight: int


def load_strings_document(path: str | Path) -> dict[str, str]:
    """Read a flat ``<string id="key">value</string>`` document into a dict."""
    document_path = Path(path).expanduser()
    if not document_path.exists():
        raise ImproperlyConfigured(f"Fare strings document not found: {document_path}")

    try:
        root = ElementTree.parse(document_path).getroot()
    except ElementTree.ParseError as exc:
        raise ImproperlyConfigured(f"Fare strings document is not valid XML: {exc}") from exc

    values: dict[str, str] = {}
    for element in root.iter():
        key = element.get("id")
        if key:
            values[key] = (element.text or "").strip()
    return values


@lru_cache(maxsize=4)
def _load_cached(path: str) -> dict[str, str]:
    return load_strings_document(path)


def get_strings() -> dict[str, str]:
    return _load_cached(str(settings.FARE_STRINGS_PATH))


def clear_config_cache() -> None:
    _load_cached.cache_clear()
    _fare_config_for.cache_clear()


def _parse_decimal(values: dict[str, str], key: str) -> Decimal:
    raw_value = values.get(key)
    if raw_value is None or raw_value == "":
        raise InvalidNumericConfig(f"Missing numeric config value: {key}")
    try:
        parsed = Decimal(raw_value)
    except InvalidOperation as exc:
        raise InvalidNumericConfig(f"Config value {key} is not numeric: {raw_value!r}") from exc
    if not parsed.is_finite():
        raise InvalidNumericConfig(f"Config value {key} must be finite: {raw_value!r}")
    return parsed


def _parse_int(values: dict[str, str], key: str) -> int:
    parsed = _parse_decimal(values, key)
    if parsed != parsed.to_integral_value():
        raise InvalidNumericConfig(f"Config value {key} must be a whole number: {values[key]!r}")
    return int(parsed)


def build_fare_config(values: dict[str, str]) -> FareConfig:
    config = FareConfig(
        base_rate=DecimalValue(_parse_decimal(values, "fare_base_rate"), 2).value(),
        distance_unit=DecimalValue(_parse_decimal(values, "fare_distance_unit"), 3).value(),
        rate_per_distance_unit=DecimalValue(_parse_decimal(values, "fare_rate_per_distance_unit"), 2).value(),
    )

    if config.base_rate < 0:
        raise InvalidNumericConfig("fare_base_rate cannot be negative")
    if config.rate_per_distance_unit < 0:
        raise InvalidNumericConfig("fare_rate_per_distance_unit cannot be negative")
    if config.distance_unit <= 0:
        raise InvalidNumericConfig("fare_distance_unit must be greater than zero")

    return config


@lru_cache(maxsize=4)
def _fare_config_for(path: str) -> FareConfig:
    return build_fare_config(_load_cached(path))


def get_fare_config() -> FareConfig:
    return _fare_config_for(str(settings.FARE_STRINGS_PATH))


def get_display_strings() -> DisplayStrings:
    values = get_strings()
    return DisplayStrings(
        origin_placeholder=values.get("origin_input_placeholder", ""),
        destination_placeholder=values.get("destination_input_placeholder", ""),
        show_fare_label=values.get("show_fare_button_value", ""),
        invalid_input_error_message=values.get("invalid_input_error_message", ""),
    )


def get_map_properties() -> MapProperties:
    values = get_strings()
    return MapProperties(
        center=Coordinates(
            latitude=float(_parse_decimal(values, "map_output_center_lat")),
            longitude=float(_parse_decimal(values, "map_output_center_lng")),
        ),
        default_zoom_level=_parse_int(values, "map_output_default_zoom_level"),
        map_style_name=values.get("map_output_map_style_name", ""),
        marker_image_url_prefix=values.get("map_output_marker_image_url_prefix", ""),
        marker_shadow_url=values.get("map_output_marker_shadow_url", ""),
        origin_marker_colour=values.get("map_output_origin_marker_colour", ""),
        origin_marker_icon=values.get("map_output_origin_marker_icon", ""),
        origin_marker_title=values.get("map_output_origin_marker_title", ""),
        destination_marker_colour=values.get("map_output_destination_marker_colour", ""),
        destination_marker_icon=values.get("map_output_destination_marker_icon", ""),
        destination_marker_title=values.get("map_output_destination_marker_title", ""),
        route_stroke_colour=values.get("map_output_route_stroke_colour", ""),
        route_stroke_weight=_parse_int(values, "map_output_route_stroke_weight"),
    )
