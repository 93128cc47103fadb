from fares.domain.decimal_value import DecimalValue
from fares.domain.fare_calculator import calculate_fare
from fares.domain.types import Coordinates, FareConfig, FareResult, ResolvedRoute, RouteRequest

__all__ = [
    "Coordinates",
    "DecimalValue",
    "FareConfig",
    "FareResult",
    "ResolvedRoute",
    "RouteRequest",
    "calculate_fare",
]
