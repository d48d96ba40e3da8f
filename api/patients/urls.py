from django.urls import path, include
from rest_framework.routers import DefaultRouter
from .views import PacienteViewSet

router = DefaultRouter()
router.include_root_view = False
# El front-end llama /pacientes y /pacientes/{id} sin barra final
router.trailing_slash = '/?'
router.register(r'pacientes', PacienteViewSet, basename='paciente')

app_name = 'patients'
urlpatterns = [
    path('', include(router.urls)),
]
