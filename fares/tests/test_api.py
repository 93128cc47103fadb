from decimal import Decimal
from unittest.mock import patch

from django.test import SimpleTestCase

from fares.domain.types import ResolvedRoute
from fares.services.geocoding import GeocodedPoint
from fares.services.route_pipeline import RouteUnavailable

ERROR_MESSAGE = "Please enter a valid origin and destination."


class FareApiTests(SimpleTestCase):
    @patch("fares.services.fare_service.resolve_route")
    def test_fare_endpoint_returns_formatted_fare(self, mock_resolve):
        mock_resolve.return_value = ResolvedRoute(distance_meters=Decimal(1300))

        response = self.client.post(
            "/api/fare/",
            data={"origin": "Union Station", "destination": "CN Tower"},
            content_type="application/json",
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"fare": "$7.75", "distance": "1.300 km"})

    @patch("fares.services.fare_service.resolve_route")
    def test_fare_endpoint_returns_error_message_when_route_unavailable(self, mock_resolve):
        mock_resolve.side_effect = RouteUnavailable()

        response = self.client.post(
            "/api/fare/",
            data={"origin": "asdfgh", "destination": "CN Tower"},
            content_type="application/json",
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"detail": ERROR_MESSAGE, "style": "error"})

    def test_fare_endpoint_validates_payload(self):
        response = self.client.post(
            "/api/fare/",
            data={"origin": "Only one field"},
            content_type="application/json",
        )

        self.assertEqual(response.status_code, 400)
        self.assertIn("destination", response.json())


class MapViewApiTests(SimpleTestCase):
    def test_get_returns_default_map(self):
        response = self.client.get("/api/map-view/")

        self.assertEqual(response.status_code, 200)
        payload = response.json()
        self.assertAlmostEqual(payload["center"]["latitude"], 43.653226)
        self.assertEqual(payload["markers"], [])
        self.assertIsNone(payload["origin_text"])

    @patch("fares.services.route_pipeline.geocode_location")
    def test_post_returns_markers(self, mock_geocode):
        mock_geocode.side_effect = [
            GeocodedPoint(latitude=43.0, longitude=-79.0, display_name="A", source="test"),
            GeocodedPoint(latitude=44.0, longitude=-80.0, display_name="B", source="test"),
        ]

        response = self.client.post(
            "/api/map-view/",
            data={"origin": "A", "destination": "B"},
            content_type="application/json",
        )

        self.assertEqual(response.status_code, 200)
        payload = response.json()
        self.assertEqual(len(payload["markers"]), 2)
        self.assertAlmostEqual(payload["center"]["longitude"], -79.5)

    @patch("fares.api.views.build_map_view")
    def test_post_returns_error_message_when_place_unknown(self, mock_build):
        mock_build.side_effect = RouteUnavailable()

        response = self.client.post(
            "/api/map-view/",
            data={"origin": "A", "destination": "B"},
            content_type="application/json",
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"detail": ERROR_MESSAGE, "style": "error"})


class WidgetConfigApiTests(SimpleTestCase):
    def test_returns_display_strings(self):
        response = self.client.get("/api/widget-config/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["show_fare_label"], "Show fare")
        self.assertEqual(response.json()["origin_placeholder"], "Enter taxi route origin")
