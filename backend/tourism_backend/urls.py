from django.urls import path, include
from rest_framework.routers import DefaultRouter
from itinerary.views import (
    DestinationViewSet,
    DirectionsView,
    InterestViewSet,
    OnboardingView,
    TourViewSet,
)

router = DefaultRouter()
router.register(r'interests', InterestViewSet, basename='interest')
router.register(r'destinations', DestinationViewSet, basename='destination')
router.register(r'tour', TourViewSet, basename='tour')

urlpatterns = [
    path('api/v1/', include(router.urls)),
    path('api/v1/onboarding/', OnboardingView.as_view(), name='onboarding'),
    path('api/v1/directions/', DirectionsView.as_view(), name='directions'),
]
