from rest_framework import serializers


class RouteRequestSerializer(serializers.Serializer):
    origin = serializers.CharField(max_length=255, allow_blank=True)
    destination = serializers.CharField(max_length=255, allow_blank=True)


class FareResponseSerializer(serializers.Serializer):
    fare = serializers.CharField()
    distance = serializers.CharField()


class MessageResponseSerializer(serializers.Serializer):
    detail = serializers.CharField()
    style = serializers.CharField()


class CoordinatesSerializer(serializers.Serializer):
    latitude = serializers.FloatField()
    longitude = serializers.FloatField()


class MapMarkerSerializer(serializers.Serializer):
    position = CoordinatesSerializer()
    title = serializers.CharField()
    icon_url = serializers.CharField()
    shadow_url = serializers.CharField()


class MapViewSerializer(serializers.Serializer):
    center = CoordinatesSerializer()
    zoom_level = serializers.IntegerField()
    style_name = serializers.CharField()
    route_stroke_colour = serializers.CharField()
    route_stroke_weight = serializers.IntegerField()
    markers = MapMarkerSerializer(many=True)
    origin_text = serializers.CharField(allow_null=True)
    destination_text = serializers.CharField(allow_null=True)


class WidgetConfigSerializer(serializers.Serializer):
    origin_placeholder = serializers.CharField()
    destination_placeholder = serializers.CharField()
    show_fare_label = serializers.CharField()
    invalid_input_error_message = serializers.CharField()
