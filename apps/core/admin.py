# apps/core/admin.py

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html

from .models import Usuario


@admin.register(Usuario)
class UsuarioAdmin(BaseUserAdmin):
    """Admin customizado para o modelo Usuario"""

    list_display = [
        'name', 'email', 'cpf', 'role_badge', 'permissao',
        'is_active', 'created_at'
    ]
    list_filter = ['role', 'is_staff', 'is_active', 'email_verified', 'created_at']
    search_fields = ['name', 'email', 'cpf']
    ordering = ['name']
    readonly_fields = ['created_at', 'updated_at', 'last_login']

    fieldsets = (
        (None, {
            'fields': ('email', 'password')
        }),
        ('Identificação', {
            'fields': ('name', 'cpf', 'role', 'email_verified')
        }),
        ('Metadados', {
            'fields': ('metadata',)
        }),
        ('Permissões do Admin', {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
            'classes': ('collapse',)
        }),
        ('Datas', {
            'fields': ('last_login', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'name', 'cpf', 'role', 'password1', 'password2'),
        }),
    )

    def role_badge(self, obj):
        """Exibe o papel do usuário com badge colorido"""
        cores = {
            'admin': '#EF4444',  # vermelho
            'cac': '#F59E0B',  # amarelo
            'marketing': '#8B5CF6',  # roxo
            'customer': '#3B82F6'  # azul
        }
        cor = cores.get(obj.role, '#6B7280')
        return format_html(
            '<span style="background-color: {}; color: white; '
            'padding: 3px 8px; border-radius: 4px; font-size: 11px;">{}</span>',
            cor, obj.get_role_display()
        )

    role_badge.short_description = 'Papel'

    @admin.display(description='Permissão')
    def permissao(self, obj):
        return obj.permissao or '-'
