import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(BASE_DIR / ".env")


def env_bool(name: str, default: bool) -> bool:
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    return raw_value.strip().lower() in {"1", "true", "yes", "on"}


def env_list(name: str, default: str) -> list[str]:
    raw_value = os.getenv(name, default)
    return [item.strip() for item in raw_value.split(",") if item.strip()]


def env_int(name: str, default: int) -> int:
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    return int(raw_value)


SECRET_KEY = os.getenv("SECRET_KEY", "dev-insecure-secret-key-change-me")
DEBUG = env_bool("DEBUG", True)
ALLOWED_HOSTS = env_list("ALLOWED_HOSTS", "127.0.0.1,localhost,testserver")
CSRF_TRUSTED_ORIGINS = env_list("CSRF_TRUSTED_ORIGINS", "")

INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "rest_framework",
    "drf_spectacular",
    "fares",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "fare_site.urls"

WSGI_APPLICATION = "fare_site.wsgi.application"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "fare-finder-locmem-cache",
        "TIMEOUT": 24 * 60 * 60,
    }
}

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
    ],
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
}

SPECTACULAR_SETTINGS = {
    "TITLE": "Taxi Fare Finder API",
    "DESCRIPTION": "Taxi fare estimates from driving route distance.",
    "VERSION": "1.0.0",
    "SERVE_INCLUDE_SCHEMA": False,
}

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        "fares": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
    },
}

FARE_STRINGS_PATH = os.getenv(
    "FARE_STRINGS_PATH",
    str(BASE_DIR / "fares" / "data" / "strings.xml"),
)
FARE_CURRENCY_PREFIX = os.getenv("FARE_CURRENCY_PREFIX", "$")
FARE_DISTANCE_SUFFIX = os.getenv("FARE_DISTANCE_SUFFIX", " km")

OSRM_API_BASE_URL = os.getenv("OSRM_API_BASE_URL", "https://router.project-osrm.org")
NOMINATIM_API_BASE_URL = os.getenv(
    "NOMINATIM_API_BASE_URL",
    "https://nominatim.openstreetmap.org",
)
GOOGLE_MAPS_API_BASE_URL = os.getenv(
    "GOOGLE_MAPS_API_BASE_URL",
    "https://maps.googleapis.com/maps/api",
)
GOOGLE_MAPS_API_KEY = os.getenv("GOOGLE_MAPS_API_KEY", "")
EXTERNAL_API_TIMEOUT_SECONDS = env_int("EXTERNAL_API_TIMEOUT_SECONDS", 15)
GEOCODE_CACHE_SECONDS = env_int("GEOCODE_CACHE_SECONDS", 24 * 60 * 60)
GEOLOOKUP_USER_AGENT = os.getenv(
    "GEOLOOKUP_USER_AGENT",
    "taxi-fare-finder/1.0",
)

MAP_PROVIDER = os.getenv("MAP_PROVIDER", "auto").strip().lower()
