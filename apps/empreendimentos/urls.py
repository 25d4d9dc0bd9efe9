# apps/empreendimentos/urls.py

from django.urls import path

from . import views

app_name = 'empreendimentos'

urlpatterns = [
    # === OBRAS ===
    path('obras/', views.obras_view, name='obras'),
    path('obras/editar/<uuid:empreendimento_id>/', views.obra_editar, name='obra_editar'),

    # === TOUR VIRTUAL ===
    path('tour/', views.tours_view, name='tours'),
    path('tour/<uuid:empreendimento_id>/salvar/', views.tour_salvar, name='tour_salvar'),
]
