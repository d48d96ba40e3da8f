# config/urls.py
from django.urls import path, include


urlpatterns = [
    # Endpoints del sistema
    path('api/', include('api.patients.urls', namespace='patients')),
]
