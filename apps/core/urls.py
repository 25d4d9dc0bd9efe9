# apps/core/urls.py

from django.urls import path
from django.views.generic import RedirectView

from . import views

app_name = 'core'

urlpatterns = [
    # === AUTENTICAÇÃO ===
    path('login/', views.login_view, name='login'),
    path('logout/', views.logout_view, name='logout'),
    path('unauthorized/', views.unauthorized_view, name='unauthorized'),

    # === USUÁRIOS ===
    path('home/', views.home_view, name='home'),
    path('', RedirectView.as_view(pattern_name='core:home', permanent=False)),
    path('usuarios/adicionar/', views.usuario_adicionar, name='usuario_adicionar'),
    path('usuarios/<uuid:usuario_id>/visualizar/', views.usuario_visualizar, name='usuario_visualizar'),
    path('usuarios/<uuid:usuario_id>/editar/', views.usuario_editar, name='usuario_editar'),

    # === MONITORAMENTO ===
    path('health/', views.health_check, name='health'),
]
