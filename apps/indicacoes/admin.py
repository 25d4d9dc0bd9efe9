# apps/indicacoes/admin.py

from django.contrib import admin

from .models import Indicacao


@admin.register(Indicacao)
class IndicacaoAdmin(admin.ModelAdmin):
    """Admin para indicações; staff altera o status por aqui ou pela API"""

    list_display = ['name', 'cpf', 'phone', 'status', 'is_client', 'indicador_nome', 'created_at']
    list_filter = ['status', 'is_client', 'created_at']
    list_editable = ['status']
    search_fields = ['name', 'cpf', 'phone']
    date_hierarchy = 'created_at'
    readonly_fields = ['created_at', 'updated_at']

    fieldsets = (
        ('Indicado', {
            'fields': ('name', 'rg', 'cpf', 'phone', 'birth_date', 'is_client', 'address', 'imovel')
        }),
        ('Quem Indicou', {
            'fields': ('indication', 'bank')
        }),
        ('Análise', {
            'fields': ('status', 'created_at', 'updated_at')
        }),
    )

    @admin.display(description='Indicado por')
    def indicador_nome(self, obj):
        return obj.indicador.get('name', '-')
