# apps/empreendimentos/admin.py

from django.contrib import admin
from django.utils.html import format_html

from .models import Empreendimento


@admin.register(Empreendimento)
class EmpreendimentoAdmin(admin.ModelAdmin):
    """Admin para empreendimentos"""

    list_display = ['title', 'status_badge', 'percentual_obra', 'tem_tour', 'updated_at']
    list_filter = ['project_status', 'updated_at']
    search_fields = ['title']
    readonly_fields = ['created_at', 'updated_at']

    fieldsets = (
        ('Informações Básicas', {
            'fields': ('title', 'project_status', 'address')
        }),
        ('Imagens', {
            'fields': ('facade', 'logo', 'images')
        }),
        ('Andamento', {
            'fields': ('project_evolution', 'metadata')
        }),
        ('Datas', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        })
    )

    def status_badge(self, obj):
        cores = {
            'under_construction': '#F59E0B',
            'launch': '#3B82F6',
            'ready_to_move_in': '#10B981',
        }
        return format_html(
            '<span style="background-color: {}; color: white; '
            'padding: 3px 8px; border-radius: 4px; font-size: 11px;">{}</span>',
            cores.get(obj.project_status, '#6B7280'),
            obj.get_project_status_display() or 'Não Definido'
        )

    status_badge.short_description = 'Status'

    def percentual_obra(self, obj):
        return f"{obj.percentual}%"

    percentual_obra.short_description = 'Obra'

    @admin.display(boolean=True, description='Tour')
    def tem_tour(self, obj):
        return bool(obj.tour)
