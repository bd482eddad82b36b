from rest_framework import serializers

from destinations.filters import INTERESTS, is_open
from routing.directions import (
    format_distance,
    format_duration,
    format_step_instruction,
    get_maneuver_icon,
    get_total_route_info,
    visible_steps,
)


class InterestSerializer(serializers.Serializer):
    id = serializers.CharField(source="value")
    label = serializers.CharField()


class OnboardingSerializer(serializers.Serializer):
    interests = serializers.ListField(
        child=serializers.ChoiceField(choices=[interest.value for interest in INTERESTS]),
        allow_empty=False,
    )


class LocationSerializer(serializers.Serializer):
    title = serializers.CharField()
    latitude = serializers.FloatField()
    longitude = serializers.FloatField()


class DestinationSerializer(LocationSerializer):
    type = serializers.CharField()
    rating = serializers.FloatField(allow_null=True)
    timeRange = serializers.CharField(source="time_range", allow_null=True)
    description = serializers.CharField(allow_blank=True)
    isOpen = serializers.SerializerMethodField()

    def get_isOpen(self, obj):
        # one clock reading per response so every card agrees
        return is_open(obj.time_range, self.context.get("now"))


class TravelCostSerializer(serializers.Serializer):
    distance = serializers.FloatField(allow_null=True)
    duration = serializers.FloatField(allow_null=True)
    distanceText = serializers.SerializerMethodField()
    durationText = serializers.SerializerMethodField()

    def get_distanceText(self, obj):
        return format_distance(obj.distance)

    def get_durationText(self, obj):
        return format_duration(obj.duration)


class StepSerializer(serializers.Serializer):
    """One Mapbox step (a dict) as shown in the directions panel."""
    instruction = serializers.CharField(source="maneuver.instruction")
    name = serializers.CharField(required=False, allow_blank=True)
    distance = serializers.FloatField()
    duration = serializers.FloatField()
    distanceText = serializers.SerializerMethodField()
    text = serializers.SerializerMethodField()
    icon = serializers.SerializerMethodField()

    def get_distanceText(self, step):
        return format_distance(step["distance"])

    def get_text(self, step):
        return format_step_instruction(step)

    def get_icon(self, step):
        return get_maneuver_icon(step["maneuver"])


class RouteSerializer(serializers.Serializer):
    origin = serializers.CharField(source="from_title")
    destination = serializers.CharField(source="to_title")
    distance = serializers.FloatField()
    duration = serializers.FloatField()
    distanceText = serializers.SerializerMethodField()
    durationText = serializers.SerializerMethodField()
    geometry = serializers.JSONField()
    stepCount = serializers.SerializerMethodField()
    stepTotals = serializers.SerializerMethodField()
    steps = serializers.SerializerMethodField()

    def get_distanceText(self, route):
        return format_distance(route.distance)

    def get_durationText(self, route):
        return format_duration(route.duration)

    def get_stepCount(self, route):
        return len(visible_steps(route.steps))

    def get_stepTotals(self, route):
        return get_total_route_info(route.steps)

    def get_steps(self, route):
        steps = StepSerializer(visible_steps(route.steps), many=True).data
        # the final visible step is highlighted in the panel
        for position, step in enumerate(steps):
            step["isLast"] = position == len(steps) - 1
        return steps
