# apps/indicacoes/apps.py

from django.apps import AppConfig


class IndicacoesConfig(AppConfig):
    """Configuração da app Indicações"""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.indicacoes'
    verbose_name = 'Indicações'
