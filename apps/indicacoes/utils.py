# apps/indicacoes/utils.py

"""
Filtros, ordenação e estatísticas das indicações

Usados pela página, pela API e pelas exportações, para que
os três mostrem exatamente o mesmo recorte.
"""

from datetime import date, datetime, time
from typing import Dict, Optional

from django.db.models import Count, Q
from django.utils import timezone
from django.utils.dateparse import parse_date

from .models import Indicacao

# Campos aceitos em ?sort= -> campo do model
CAMPOS_ORDENACAO = {
    'name': 'name',
    'cpf': 'cpf',
    'phone': 'phone',
    'status': 'status',
    'isClient': 'is_client',
    'birthDate': 'birth_date',
    'createdAt': 'created_at',
}


def _inicio_do_dia(data):
    return timezone.make_aware(datetime.combine(data, time.min))


def _fim_do_dia(data):
    return timezone.make_aware(datetime.combine(data, time.max))


def filtrar_indicacoes(params, queryset=None):
    """
    Aplica os filtros da querystring

    q          nome, CPF, telefone ou nome de quem indicou
    status     um dos STATUS_CHOICES ("all" ou vazio ignora)
    client     "client" / "non-client"
    date_from  AAAA-MM-DD, inclusivo
    date_to    AAAA-MM-DD, inclusivo até o fim do dia
    sort, dir  campo de CAMPOS_ORDENACAO e asc/desc (padrão createdAt desc)
    """
    indicacoes = queryset if queryset is not None else Indicacao.objects.all()

    termo = (params.get('q') or '').strip()
    if termo:
        indicacoes = indicacoes.filter(
            Q(name__icontains=termo) |
            Q(cpf__contains=termo) |
            Q(phone__contains=termo) |
            Q(indication__name__icontains=termo)
        )

    status = params.get('status')
    if status and status != 'all':
        indicacoes = indicacoes.filter(status=status)

    cliente = params.get('client')
    if cliente == 'client':
        indicacoes = indicacoes.filter(is_client=True)
    elif cliente == 'non-client':
        indicacoes = indicacoes.filter(is_client=False)

    data_inicio = _ler_data(params.get('date_from'))
    if data_inicio:
        indicacoes = indicacoes.filter(created_at__gte=_inicio_do_dia(data_inicio))

    data_fim = _ler_data(params.get('date_to'))
    if data_fim:
        indicacoes = indicacoes.filter(created_at__lte=_fim_do_dia(data_fim))

    campo = CAMPOS_ORDENACAO.get(params.get('sort'), 'created_at')
    direcao = '' if params.get('dir') == 'asc' else '-'

    return indicacoes.order_by(f'{direcao}{campo}', 'id')


def _ler_data(valor) -> Optional[date]:
    if not valor:
        return None
    try:
        return parse_date(valor)
    except ValueError:
        return None


def estatisticas() -> Dict[str, int]:
    """Totais do topo da página (sempre sobre todas as indicações)"""
    return Indicacao.objects.aggregate(
        total=Count('id'),
        clientes=Count('id', filter=Q(is_client=True)),
        novas=Count('id', filter=Q(status='new')),
        aprovadas=Count('id', filter=Q(status='approved')),
    )
