# apps/indicacoes/urls.py

from django.urls import path

from . import views

app_name = 'indicacoes'

urlpatterns = [
    path('indicacao/', views.indicacoes_view, name='lista'),
]
