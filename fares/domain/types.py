from dataclasses import dataclass
from decimal import Decimal

from fares.domain.decimal_value import DecimalValue


@dataclass(frozen=True)
class FareConfig:
    base_rate: Decimal
    distance_unit: Decimal
    rate_per_distance_unit: Decimal


@dataclass(frozen=True)
class RouteRequest:
    origin_text: str
    destination_text: str


@dataclass(frozen=True)
class ResolvedRoute:
    distance_meters: Decimal


@dataclass(frozen=True)
class FareResult:
    total_fare: DecimalValue
    total_distance: DecimalValue


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float
