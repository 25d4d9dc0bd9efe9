# apps/core/templatetags/painel_tags.py

"""
Template tags do painel
Formatação de CPF e checagem de permissão nos templates
"""

from django import template

from apps.core.permissions import ContextoAutorizacao
from apps.core.utils import formatar_cpf

register = template.Library()


@register.filter
def cpf(valor):
    """
    Formata CPF para exibição

    Uso: {{ usuario.cpf|cpf }}
    """
    return formatar_cpf(valor)


@register.filter
def percentual(valor):
    """Valor 0-100 vindo do JSON, com fallback para 0"""
    try:
        return max(0, min(100, int(valor)))
    except (TypeError, ValueError):
        return 0


@register.simple_tag(takes_context=True)
def tem_acesso(context, chave):
    """
    Verifica se o usuário logado pode acessar uma funcionalidade

    Uso no template:
    {% tem_acesso 'ADMIN' as pode_criar %}
    """
    request = context.get('request')
    if request is None:
        return False

    contexto = getattr(request, 'contexto_autorizacao', None)
    if contexto is None:
        contexto = ContextoAutorizacao.do_usuario(request.user)
    return contexto.pode(chave)
