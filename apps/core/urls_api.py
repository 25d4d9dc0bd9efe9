# apps/core/urls_api.py

from django.urls import path

from . import views_api

app_name = 'core_api'

urlpatterns = [
    path('auth/login', views_api.api_login, name='login'),
    path('auth/logout', views_api.api_logout, name='logout'),
    path('auth/session', views_api.api_sessao, name='sessao'),

    path('users', views_api.api_usuarios, name='usuarios'),
    path('users/<uuid:usuario_id>', views_api.api_usuario_detalhe, name='usuario'),
    path('users/<uuid:usuario_id>/properties', views_api.api_usuario_empreendimentos, name='usuario_empreendimentos'),
]
