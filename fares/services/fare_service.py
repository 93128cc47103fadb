import itertools
import logging
import threading
from typing import Protocol

from django.conf import settings

from fares.domain.fare_calculator import calculate_fare
from fares.domain.types import FareConfig, FareResult, RouteRequest
from fares.services.config import get_display_strings, get_fare_config
from fares.services.route_pipeline import RouteUnavailable, resolve_route

logger = logging.getLogger(__name__)

ERROR_STYLE_TAG = "error"


class FareDisplay(Protocol):
    def show_fare(self, fare_text: str, distance_text: str) -> None: ...

    def show_message(self, text: str, style_tag: str) -> None: ...


def estimate_fare(request: RouteRequest, config: FareConfig | None = None) -> FareResult:
    route = resolve_route(request)
    return calculate_fare(route.distance_meters, config or get_fare_config())


class FareSession:
    """Runs fare requests for one display and drops responses that arrive late.

    Each request takes a new token from a monotonically increasing counter.
    A result reaches the display only while its token is still the latest one
    issued, so a slow earlier request can never overwrite a newer answer.
    """

    def __init__(
        self,
        display: FareDisplay,
        config: FareConfig | None = None,
        error_message: str | None = None,
        currency_prefix: str | None = None,
        distance_suffix: str | None = None,
    ):
        self._display = display
        self._config = config or get_fare_config()
        self._error_message = (
            error_message if error_message is not None else get_display_strings().invalid_input_error_message
        )
        self._currency_prefix = currency_prefix if currency_prefix is not None else settings.FARE_CURRENCY_PREFIX
        self._distance_suffix = distance_suffix if distance_suffix is not None else settings.FARE_DISTANCE_SUFFIX
        self._tokens = itertools.count(1)
        self._latest_token = 0
        self._lock = threading.Lock()

    def issue_token(self) -> int:
        with self._lock:
            self._latest_token = next(self._tokens)
            return self._latest_token

    def is_current(self, token: int) -> bool:
        with self._lock:
            return token == self._latest_token

    def request_fare(self, origin_text: str, destination_text: str) -> bool:
        """Estimate and display a fare. Returns True if anything was shown."""
        token = self.issue_token()
        request = RouteRequest(origin_text=origin_text, destination_text=destination_text)

        try:
            result = estimate_fare(request, self._config)
        except RouteUnavailable:
            return self._deliver(token, lambda: self._display.show_message(self._error_message, ERROR_STYLE_TAG))

        fare_text = result.total_fare.to_currency(self._currency_prefix)
        distance_text = result.total_distance.to_distance(self._distance_suffix)
        delivered = self._deliver(token, lambda: self._display.show_fare(fare_text, distance_text))
        if delivered:
            logger.info("Estimated fare %s for %s", fare_text, distance_text)
        return delivered

    def _deliver(self, token: int, show) -> bool:
        with self._lock:
            if token != self._latest_token:
                logger.debug("Discarding stale response for request %s (latest is %s)", token, self._latest_token)
                return False
            show()
            return True
