from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from fares.api.serializers import (
    FareResponseSerializer,
    MapViewSerializer,
    MessageResponseSerializer,
    RouteRequestSerializer,
    WidgetConfigSerializer,
)
from fares.domain.types import RouteRequest
from fares.services.config import get_display_strings
from fares.services.fare_service import ERROR_STYLE_TAG, FareSession
from fares.services.map_view import build_map_view, default_map_view
from fares.services.route_pipeline import RouteUnavailable


class ResponseDisplay:
    """Collects what a fare session shows so it can be returned as JSON."""

    def __init__(self):
        self.payload: dict[str, str] = {}
        self.status_code = status.HTTP_200_OK

    def show_fare(self, fare_text: str, distance_text: str) -> None:
        self.payload = {"fare": fare_text, "distance": distance_text}
        self.status_code = status.HTTP_200_OK

    def show_message(self, text: str, style_tag: str) -> None:
        self.payload = {"detail": text, "style": style_tag}
        self.status_code = status.HTTP_400_BAD_REQUEST


def _unavailable_response() -> Response:
    return Response(
        {"detail": get_display_strings().invalid_input_error_message, "style": ERROR_STYLE_TAG},
        status=status.HTTP_400_BAD_REQUEST,
    )


class FareView(APIView):
    @extend_schema(
        request=RouteRequestSerializer,
        responses={
            200: OpenApiResponse(response=FareResponseSerializer, description="Formatted fare and distance."),
            400: OpenApiResponse(response=MessageResponseSerializer, description="Validation error or no route."),
        },
    )
    def post(self, request):
        serializer = RouteRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        payload = serializer.validated_data
        display = ResponseDisplay()
        FareSession(display).request_fare(
            origin_text=payload["origin"],
            destination_text=payload["destination"],
        )
        return Response(display.payload, status=display.status_code)


class MapViewView(APIView):
    @extend_schema(responses={200: MapViewSerializer})
    def get(self, request):
        return Response(MapViewSerializer(default_map_view()).data, status=status.HTTP_200_OK)

    @extend_schema(
        request=RouteRequestSerializer,
        responses={
            200: OpenApiResponse(response=MapViewSerializer, description="Map centered between both markers."),
            400: OpenApiResponse(response=MessageResponseSerializer, description="Validation error or unknown place."),
        },
    )
    def post(self, request):
        serializer = RouteRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        payload = serializer.validated_data
        try:
            view = build_map_view(
                RouteRequest(origin_text=payload["origin"], destination_text=payload["destination"]),
            )
        except RouteUnavailable:
            return _unavailable_response()

        return Response(MapViewSerializer(view).data, status=status.HTTP_200_OK)


class WidgetConfigView(APIView):
    @extend_schema(responses={200: WidgetConfigSerializer})
    def get(self, request):
        return Response(WidgetConfigSerializer(get_display_strings()).data, status=status.HTTP_200_OK)
