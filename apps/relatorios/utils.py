# apps/relatorios/utils.py

from typing import Iterable, List

from django.utils import timezone
from reportlab.lib import colors
from reportlab.platypus import TableStyle

from apps.core.utils import formatar_cpf
from apps.empreendimentos.models import ETAPAS_OBRA

CABECALHO_INDICACOES = [
    'Nome', 'CPF', 'Telefone', 'Status', 'Cliente', 'Indicado por',
    'CPF de quem indicou', 'Data Criação'
]


def linhas_indicacoes(indicacoes: Iterable) -> List[List]:
    """
    Linhas das exportações de indicações (CSV e Excel)

    A data vai como datetime local sem fuso para o Excel formatar.
    """
    linhas = []
    for indicacao in indicacoes:
        indicador = indicacao.indicador
        linhas.append([
            indicacao.name,
            formatar_cpf(indicacao.cpf),
            indicacao.phone,
            indicacao.get_status_display(),
            'Sim' if indicacao.is_client else 'Não',
            indicador.get('name', ''),
            formatar_cpf(indicador.get('cpf', '')),
            timezone.localtime(indicacao.created_at).replace(tzinfo=None),
        ])
    return linhas


def linha_evolucao(empreendimento) -> List[str]:
    """Percentuais de cada etapa formatados para o PDF"""
    evolucao = empreendimento.evolucao
    linha = [empreendimento.title]
    for campo, _rotulo in ETAPAS_OBRA:
        valor = evolucao.get(campo)
        linha.append(f"{valor}%" if valor not in (None, '') else '-')
    return linha


def estilo_tabela(cor_cabecalho, cor_linhas, tamanho_fonte=12):
    """Estilo padrão das tabelas dos PDFs"""
    return TableStyle([
        ('BACKGROUND', (0, 0), (-1, 0), cor_cabecalho),
        ('TEXTCOLOR', (0, 0), (-1, 0), colors.whitesmoke),
        ('ALIGN', (0, 0), (-1, -1), 'LEFT'),
        ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
        ('FONTSIZE', (0, 0), (-1, -1), tamanho_fonte),
        ('BOTTOMPADDING', (0, 0), (-1, 0), 12),
        ('BACKGROUND', (0, 1), (-1, -1), cor_linhas),
        ('GRID', (0, 0), (-1, -1), 1, colors.black)
    ])
