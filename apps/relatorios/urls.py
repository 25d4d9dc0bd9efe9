# apps/relatorios/urls.py

from django.urls import path

from . import views

app_name = 'relatorios'

urlpatterns = [
    # Análise embutida
    path('analise/', views.analise_view, name='analise'),

    # Exportações
    path('relatorios/indicacoes.csv', views.exportar_indicacoes_csv, name='indicacoes_csv'),
    path('relatorios/indicacoes.xlsx', views.exportar_indicacoes_excel, name='indicacoes_excel'),
    path('relatorios/obras.pdf', views.relatorio_obras_pdf, name='obras_pdf'),
]
