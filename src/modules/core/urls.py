from django.urls import path

from modules.core.views import PrincipalView, health_check

urlpatterns = [
    path("health", health_check, name="health_check"),
    path("api/me", PrincipalView.as_view(), name="principal_me"),
]
