# apps/indicacoes/urls_api.py

from django.urls import path

from . import views_api

app_name = 'indicacoes_api'

urlpatterns = [
    path('indicacao', views_api.api_indicacoes, name='lista'),
    path('indicacao/<uuid:indicacao_id>', views_api.api_indicacao_detalhe, name='detalhe'),
]
