from unittest.mock import patch

from django.test import SimpleTestCase

from fares.domain.types import RouteRequest
from fares.services.geocoding import GeocodedPoint, GeocodingError
from fares.services.map_view import build_map_view, default_map_view
from fares.services.route_pipeline import RouteUnavailable

REQUEST = RouteRequest(origin_text="Union Station", destination_text="Pearson Airport")


def _point(latitude, longitude, name):
    return GeocodedPoint(latitude=latitude, longitude=longitude, display_name=name, source="test")


class MapViewTests(SimpleTestCase):
    def test_default_view_uses_configured_center_without_markers(self):
        view = default_map_view()

        self.assertAlmostEqual(view.center.latitude, 43.653226)
        self.assertEqual(view.zoom_level, 12)
        self.assertEqual(view.style_name, "Greyscale")
        self.assertEqual(view.markers, ())

    @patch("fares.services.route_pipeline.geocode_location")
    def test_centers_between_origin_and_destination(self, mock_geocode):
        mock_geocode.side_effect = [
            _point(43.0, -79.0, "Union Station"),
            _point(44.0, -80.0, "Pearson Airport"),
        ]

        view = build_map_view(REQUEST)

        self.assertAlmostEqual(view.center.latitude, 43.5)
        self.assertAlmostEqual(view.center.longitude, -79.5)
        self.assertEqual(view.origin_text, "Union Station")

    @patch("fares.services.route_pipeline.geocode_location")
    def test_builds_styled_markers(self, mock_geocode):
        mock_geocode.side_effect = [
            _point(43.0, -79.0, "Union Station"),
            _point(44.0, -80.0, "Pearson Airport"),
        ]

        origin_marker, destination_marker = build_map_view(REQUEST).markers

        self.assertEqual(origin_marker.title, "Origin")
        self.assertTrue(origin_marker.icon_url.endswith("&chld=taxi|33CC33"))
        self.assertEqual(destination_marker.title, "Destination")
        self.assertTrue(destination_marker.icon_url.endswith("&chld=flag|FF3333"))
        self.assertEqual(destination_marker.position.latitude, 44.0)
        self.assertIn("d_map_pin_shadow", origin_marker.shadow_url)

    @patch("fares.services.route_pipeline.geocode_location")
    def test_unknown_destination_is_route_unavailable(self, mock_geocode):
        mock_geocode.side_effect = [
            _point(43.0, -79.0, "Union Station"),
            GeocodingError("Unable to geocode location: Pearson Airport"),
        ]

        with self.assertRaises(RouteUnavailable):
            build_map_view(REQUEST)
