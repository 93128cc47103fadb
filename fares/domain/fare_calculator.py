import math
from decimal import Decimal

from fares.domain.decimal_value import DecimalValue, to_decimal
from fares.domain.types import FareConfig, FareResult

METERS_PER_KILOMETER = Decimal(1000)


def count_tiers(distance_over_base: Decimal, distance_unit: Decimal) -> int:
    # Trips shorter than the base allowance give zero or negative tiers.
    return math.ceil(distance_over_base / distance_unit)


def calculate_fare(distance_meters: Decimal | float | int, config: FareConfig) -> FareResult:
    total_distance = DecimalValue(to_decimal(distance_meters) / METERS_PER_KILOMETER, 3)
    distance_over_base = DecimalValue(total_distance.value() - config.distance_unit, 3)

    tier_count = count_tiers(distance_over_base.value(), config.distance_unit)
    distance_fare = DecimalValue(config.rate_per_distance_unit * tier_count, 2)
    total_fare = DecimalValue(config.base_rate + distance_fare.value(), 2)

    return FareResult(total_fare=total_fare, total_distance=total_distance)
