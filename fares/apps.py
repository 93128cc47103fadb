from django.apps import AppConfig


class FaresConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "fares"

    def ready(self):
        # Fail at startup on missing or invalid fare constants.
        from fares.services.config import get_fare_config, get_map_properties

        get_fare_config()
        get_map_properties()
