# apps/empreendimentos/urls_api.py

from django.urls import path

from . import views_api

app_name = 'empreendimentos_api'

# Rotas fixas antes de properties/<id>
urlpatterns = [
    path('properties', views_api.api_empreendimentos, name='lista'),
    path('properties/obras', views_api.api_obras, name='obras'),
    path('properties/tour', views_api.api_tours, name='tours'),
    path('properties/tour/<uuid:empreendimento_id>', views_api.api_tour_detalhe, name='tour'),
    path('properties/<uuid:empreendimento_id>', views_api.api_empreendimento_detalhe, name='detalhe'),
]
