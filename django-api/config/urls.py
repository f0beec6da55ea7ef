from django.urls import include, path

from core.handlers.views import HealthView, IndexView

urlpatterns = [
    path("", IndexView.as_view(), name="index"),
    path("health", HealthView.as_view(), name="health"),
    path("api/", include("payments.urls")),
    path("api/analytics/", include("analytics.urls")),
]

handler404 = "core.handlers.exceptions.not_found"
handler500 = "core.handlers.exceptions.server_error"
