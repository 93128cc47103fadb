from django.http import JsonResponse
from django.urls import include, path
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)


def root(_request):
    return JsonResponse(
        {
            "service": "taxi-fare-finder",
            "status": "ok",
            "endpoints": {
                "fare": {
                    "method": "POST",
                    "path": "/api/fare/",
                },
                "map_view": {
                    "method": ["GET", "POST"],
                    "path": "/api/map-view/",
                },
                "widget_config": {
                    "method": "GET",
                    "path": "/api/widget-config/",
                },
                "schema": "/api/schema/",
                "swagger_ui": "/api/docs/swagger/",
                "redoc": "/api/docs/redoc/",
            },
        }
    )


urlpatterns = [
    path("", root),
    path("api/", include("fares.api.urls")),
    path("api/schema/", SpectacularAPIView.as_view(), name="api-schema"),
    path(
        "api/docs/swagger/",
        SpectacularSwaggerView.as_view(url_name="api-schema"),
        name="api-docs-swagger",
    ),
    path(
        "api/docs/redoc/",
        SpectacularRedocView.as_view(url_name="api-schema"),
        name="api-docs-redoc",
    ),
]
