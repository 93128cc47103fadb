from unittest.mock import Mock, patch

from django.core.cache import cache
from django.test import SimpleTestCase, override_settings

from fares.services.geocoding import GeocodedPoint, GeocodingError, geocode_location


def _response(payload):
    response = Mock()
    response.raise_for_status.return_value = None
    response.json.return_value = payload
    return response


class GeocodingServiceTests(SimpleTestCase):
    def setUp(self):
        cache.clear()

    def test_rejects_empty_query(self):
        with self.assertRaises(GeocodingError):
            geocode_location("   ")

    @patch("fares.services.geocoding._remote_lookup")
    def test_caches_remote_results(self, mock_remote_lookup):
        mock_remote_lookup.return_value = GeocodedPoint(
            latitude=43.65,
            longitude=-79.38,
            display_name="Toronto, ON",
            source="nominatim",
        )

        first = geocode_location("Toronto")
        second = geocode_location("  toronto ")

        self.assertEqual(first, second)
        mock_remote_lookup.assert_called_once_with("Toronto")

    @patch("fares.services.geocoding._remote_lookup")
    def test_raises_when_nothing_found(self, mock_remote_lookup):
        mock_remote_lookup.return_value = None

        with self.assertRaises(GeocodingError):
            geocode_location("Nowhere at all")

    @override_settings(GOOGLE_MAPS_API_KEY="", NOMINATIM_API_BASE_URL="https://nominatim.test")
    @patch("fares.services.geocoding.requests.get")
    def test_uses_nominatim_without_google_key(self, mock_get):
        mock_get.return_value = _response([{"lat": "43.6", "lon": "-79.4", "display_name": "Toronto"}])

        result = geocode_location("Toronto")

        self.assertEqual(result.source, "nominatim")
        self.assertEqual(result.latitude, 43.6)
        self.assertEqual(mock_get.call_args.args[0], "https://nominatim.test/search")

    @override_settings(GOOGLE_MAPS_API_KEY="key-123", MAP_PROVIDER="auto")
    @patch("fares.services.geocoding.requests.get")
    def test_uses_google_with_key(self, mock_get):
        mock_get.return_value = _response(
            {
                "status": "OK",
                "results": [
                    {
                        "formatted_address": "Union Station, Toronto",
                        "geometry": {"location": {"lat": 43.645, "lng": -79.380}},
                    }
                ],
            }
        )

        result = geocode_location("Union Station")

        self.assertEqual(result.source, "google")
        self.assertEqual(result.display_name, "Union Station, Toronto")
        self.assertIn("/geocode/json", mock_get.call_args.args[0])
        self.assertEqual(mock_get.call_args.kwargs["params"]["address"], "Union Station")

    @override_settings(GOOGLE_MAPS_API_KEY="key-123", MAP_PROVIDER="google")
    @patch("fares.services.geocoding.requests.get")
    def test_google_zero_results_is_a_geocoding_error(self, mock_get):
        mock_get.return_value = _response({"status": "ZERO_RESULTS", "results": []})

        with self.assertRaises(GeocodingError):
            geocode_location("qwertyuiop")

    @override_settings(GOOGLE_MAPS_API_KEY="key-123", MAP_PROVIDER="google")
    @patch("fares.services.geocoding.requests.get")
    def test_google_denied_request_is_a_geocoding_error(self, mock_get):
        mock_get.return_value = _response(
            {"status": "REQUEST_DENIED", "results": [{}], "error_message": "bad key"},
        )

        with self.assertRaisesMessage(GeocodingError, "bad key"):
            geocode_location("Toronto")
