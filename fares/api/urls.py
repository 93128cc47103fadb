from django.urls import path

from fares.api.views import FareView, MapViewView, WidgetConfigView

urlpatterns = [
    path("fare/", FareView.as_view(), name="fare"),
    path("map-view/", MapViewView.as_view(), name="map-view"),
    path("widget-config/", WidgetConfigView.as_view(), name="widget-config"),
]
