# apps/relatorios/views.py

import csv
import logging
from io import BytesIO

from django.conf import settings
from django.http import HttpResponse
from django.shortcuts import render
from django.utils import timezone

# Imports para PDF
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table

# Imports para Excel
import xlsxwriter

from apps.core.permissions import requer_permissao
from apps.empreendimentos.models import ETAPAS_OBRA, Empreendimento
from apps.indicacoes.utils import filtrar_indicacoes

from .utils import CABECALHO_INDICACOES, estilo_tabela, linha_evolucao, linhas_indicacoes

logger = logging.getLogger(__name__)


@requer_permissao('ANALISE')
def analise_view(request):
    """Relatório de análise externo embutido em iframe"""
    context = {
        'title': 'Análise',
        'report_url': settings.ANALYTICS_REPORT_URL,
    }

    return render(request, 'relatorios/analise.html', context)


@requer_permissao('INDICACOES')
def exportar_indicacoes_csv(request):
    """
    Exporta as indicações filtradas para CSV

    Aceita os mesmos filtros da página de indicações.
    """
    indicacoes = filtrar_indicacoes(request.GET)

    response = HttpResponse(content_type='text/csv; charset=utf-8')
    response['Content-Disposition'] = 'attachment; filename="indicacoes.csv"'
    response.write('\ufeff')  # BOM para UTF-8

    writer = csv.writer(response)
    writer.writerow(CABECALHO_INDICACOES)

    for linha in linhas_indicacoes(indicacoes):
        linha[-1] = linha[-1].strftime('%d/%m/%Y')
        writer.writerow(linha)

    logger.info("Exportação CSV de indicações por %s", request.user.email)
    return response


@requer_permissao('INDICACOES')
def exportar_indicacoes_excel(request):
    """
    Exporta as indicações filtradas para Excel (XLSX)
    Com aba de resumo por status
    """
    indicacoes = filtrar_indicacoes(request.GET)

    # Criar arquivo Excel em memória
    output = BytesIO()
    workbook = xlsxwriter.Workbook(output, {'in_memory': True})

    # Formatos
    header_format = workbook.add_format({
        'bold': True,
        'font_color': 'white',
        'bg_color': '#366092',
        'border': 1
    })
    cell_format = workbook.add_format({'border': 1})
    date_format = workbook.add_format({'num_format': 'dd/mm/yyyy', 'border': 1})

    # Aba 1: Indicações
    sheet = workbook.add_worksheet('Indicações')
    for col, header in enumerate(CABECALHO_INDICACOES):
        sheet.write(0, col, header, header_format)

    linhas = linhas_indicacoes(indicacoes)
    for row, linha in enumerate(linhas, 1):
        for col, valor in enumerate(linha[:-1]):
            sheet.write(row, col, valor, cell_format)
        sheet.write_datetime(row, len(linha) - 1, linha[-1], date_format)

    sheet.set_column('A:H', 20)

    # Aba 2: Resumo por status
    resumo = workbook.add_worksheet('Resumo')
    resumo.write('A1', 'Status', header_format)
    resumo.write('B1', 'Quantidade', header_format)
    contagem = {}
    for linha in linhas:
        contagem[linha[3]] = contagem.get(linha[3], 0) + 1
    for row, (status, quantidade) in enumerate(sorted(contagem.items()), 1):
        resumo.write(row, 0, status, cell_format)
        resumo.write(row, 1, quantidade, cell_format)
    resumo.write(len(contagem) + 1, 0, 'Total', header_format)
    resumo.write(len(contagem) + 1, 1, len(linhas), header_format)
    resumo.set_column('A:B', 20)

    # Fechar workbook e preparar response
    workbook.close()
    output.seek(0)

    response = HttpResponse(
        output.read(),
        content_type='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
    )
    response['Content-Disposition'] = 'attachment; filename="indicacoes.xlsx"'

    logger.info("Exportação Excel de indicações por %s", request.user.email)
    return response


@requer_permissao('OBRAS')
def relatorio_obras_pdf(request):
    """
    Gera relatório de evolução das obras em PDF
    """
    obras = Empreendimento.objects.filter(project_status='under_construction').order_by('title')

    response = HttpResponse(content_type='application/pdf')
    response['Content-Disposition'] = 'attachment; filename="relatorio_obras.pdf"'

    doc = SimpleDocTemplate(response, pagesize=landscape(A4))
    story = []

    # Estilos
    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        'CustomTitle',
        parent=styles['Heading1'],
        fontSize=20,
        spaceAfter=30,
        textColor=colors.darkblue
    )

    story.append(Paragraph("Evolução das Obras", title_style))
    story.append(Paragraph(
        f"Gerado em: {timezone.localtime().strftime('%d/%m/%Y %H:%M')}", styles['Normal']
    ))
    story.append(Spacer(1, 20))

    if obras:
        dados = [['Empreendimento'] + [rotulo for _campo, rotulo in ETAPAS_OBRA]]
        dados += [linha_evolucao(obra) for obra in obras]

        tabela = Table(dados, repeatRows=1)
        tabela.setStyle(estilo_tabela(colors.darkblue, colors.lightblue, tamanho_fonte=8))
        story.append(tabela)
    else:
        story.append(Paragraph("Nenhum empreendimento em obras.", styles['Normal']))

    # Rodapé
    story.append(Spacer(1, 30))
    story.append(Paragraph("Relatório gerado pelo Painel Metrocasa", styles['Normal']))

    doc.build(story)
    return response
