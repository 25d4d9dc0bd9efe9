# apps/empreendimentos/apps.py

from django.apps import AppConfig


class EmpreendimentosConfig(AppConfig):
    """Configuração da app Empreendimentos"""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.empreendimentos'
    verbose_name = 'Empreendimentos - Obras & Tour'
