import logging

from django.utils import timezone
from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.views import APIView

from destinations.filters import INTERESTS, build_interest_query
from .serializers import (
    DestinationSerializer,
    InterestSerializer,
    LocationSerializer,
    OnboardingSerializer,
    RouteSerializer,
    TravelCostSerializer,
)
from .tour_service import TOUR_SESSION_KEY, TourService

logger = logging.getLogger(__name__)


def local_now():
    # opening hours in the catalog are local wall-clock times
    return timezone.localtime()


class InterestViewSet(viewsets.ViewSet):
    """
    The interest cards offered on the onboarding screen.
    """
    def list(self, request):
        return Response(InterestSerializer(INTERESTS, many=True).data)


class OnboardingView(APIView):
    """
    Turns the selected interest ids into the query string the map screen
    is opened with. At least one interest is required ("Next" is disabled
    otherwise).
    """
    def post(self, request):
        serializer = OnboardingSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        query = build_interest_query(serializer.validated_data["interests"])
        return Response({"query": query, "next": f"/api/v1/tour/?{query}"})


class DestinationViewSet(viewsets.ViewSet):
    """
    Destination cards for the current interest filter (query params).
    - list: filtered, open places first
    - closest: closest-first by precomputed driving distance from the origin
    """
    def list(self, request):
        now = local_now()
        places = TourService().browse(request.query_params, now)
        data = DestinationSerializer(places, many=True, context={"now": now}).data
        return Response({"count": len(places), "results": data})

    @action(detail=False, methods=['get'])
    def closest(self, request):
        limit = request.query_params.get("limit")
        if limit is not None:
            try:
                limit = int(limit)
            except ValueError:
                return Response({"error": "limit must be an integer"}, status=status.HTTP_400_BAD_REQUEST)
            if limit < 0:
                return Response({"error": "limit must be >= 0"}, status=status.HTTP_400_BAD_REQUEST)

        now = local_now()
        results = []
        for place, cost in TourService().closest(request.query_params, limit):
            item = dict(DestinationSerializer(place, context={"now": now}).data)
            item["travel"] = TravelCostSerializer(cost).data if cost is not None else None
            results.append(item)
        return Response({"count": len(results), "results": results})


class TourViewSet(viewsets.ViewSet):
    """
    Step-by-step walk through the closest-first destinations.
    Position 0 is the user origin; next/previous wrap around.
    The position is kept in the session.
    """
    def _payload(self, request, service, sequencer):
        request.session[TOUR_SESSION_KEY] = service.dump_state(sequencer)

        route = service.current_route(sequencer)
        focus = sequencer.focus()
        return {
            "origin": LocationSerializer(sequencer.origin).data,
            "index": sequencer.index,
            "total": sequencer.size,
            "position": sequencer.position_label(),
            "current": sequencer.current_title(),
            "focus": {
                "latitude": focus.latitude,
                "longitude": focus.longitude,
                "zoom": service.policy.focus_zoom,
            },
            "route": RouteSerializer(route).data if route is not None else None,
        }

    def _load(self, request):
        service = TourService()
        sequencer = service.sequencer(request.query_params, request.session.get(TOUR_SESSION_KEY))
        return service, sequencer

    def list(self, request):
        service, sequencer = self._load(request)
        return Response(self._payload(request, service, sequencer))

    @action(detail=False, methods=['post'])
    def next(self, request):
        service, sequencer = self._load(request)
        sequencer.go_next()
        return Response(self._payload(request, service, sequencer))

    @action(detail=False, methods=['post'])
    def previous(self, request):
        service, sequencer = self._load(request)
        sequencer.go_previous()
        return Response(self._payload(request, service, sequencer))


class DirectionsView(APIView):
    """
    Turn-by-turn directions between two named places (?from=...&to=...).
    """
    def get(self, request):
        from_title = request.query_params.get("from")
        to_title = request.query_params.get("to")
        if not from_title or not to_title:
            return Response({"error": "both 'from' and 'to' are required"}, status=status.HTTP_400_BAD_REQUEST)

        service = TourService()
        origin = service.find_place(from_title)
        destination = service.find_place(to_title)
        if origin is None or destination is None:
            missing = from_title if origin is None else to_title
            return Response({"error": f"Unknown place: {missing}"}, status=status.HTTP_404_NOT_FOUND)

        route = service.route(origin, destination)
        if route is None:
            return Response({"error": "No route found"}, status=status.HTTP_502_BAD_GATEWAY)

        data = dict(RouteSerializer(route).data)
        cost = service.precomputed_cost(origin, destination)
        data["precomputed"] = TravelCostSerializer(cost).data if cost is not None else None
        return Response(data)
