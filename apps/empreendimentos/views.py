# apps/empreendimentos/views.py

import logging

from django.conf import settings
from django.contrib import messages
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_POST

from apps.core.permissions import requer_permissao

from .forms import EvolucaoObraForm, TourForm
from .models import ETAPAS_OBRA, Empreendimento
from .services import atualizar_evolucao, atualizar_tour

logger = logging.getLogger(__name__)


@requer_permissao('OBRAS')
def obras_view(request):
    """Empreendimentos em obras, com busca por título"""
    obras = Empreendimento.objects.filter(project_status='under_construction').order_by('title')

    termo = request.GET.get('q', '').strip()
    if termo:
        obras = obras.filter(title__icontains=termo)

    context = {
        'title': 'Obras',
        'obras': obras,
        'termo': termo,
    }

    return render(request, 'empreendimentos/obras.html', context)


@requer_permissao('OBRAS')
def obra_editar(request, empreendimento_id):
    """Formulário de evolução da obra"""
    empreendimento = get_object_or_404(Empreendimento, id=empreendimento_id)

    form = EvolucaoObraForm(initial=empreendimento.evolucao)

    if request.method == 'POST':
        form = EvolucaoObraForm(request.POST)

        if form.is_valid():
            atualizar_evolucao(empreendimento.id, form.para_evolucao())
            messages.success(request, f'Evolução de {empreendimento.title} salva com sucesso!')
            return redirect('empreendimentos:obras')

        messages.error(request, 'Corrija os campos destacados.')

    context = {
        'title': f'Editar Obra - {empreendimento.title}',
        'empreendimento': empreendimento,
        'form': form,
        'etapas': ETAPAS_OBRA,
    }

    return render(request, 'empreendimentos/obra_form.html', context)


@requer_permissao('VIDEO')
def tours_view(request):
    """Lista de links de tour virtual"""
    empreendimentos = Empreendimento.objects.order_by('title')[:settings.PAINEL_TOURS_LIMITE]

    context = {
        'title': 'Tour Virtual',
        'empreendimentos': empreendimentos,
    }

    return render(request, 'empreendimentos/tours.html', context)


@require_POST
@requer_permissao('VIDEO')
def tour_salvar(request, empreendimento_id):
    """
    Salva o link do tour de uma linha (htmx)

    Devolve só a linha atualizada quando chamado via htmx.
    """
    empreendimento = get_object_or_404(Empreendimento, id=empreendimento_id)
    form = TourForm(request.POST)

    if form.is_valid():
        empreendimento = atualizar_tour(empreendimento.id, form.cleaned_data['tour'])
        salvo, erro = True, None
    else:
        salvo, erro = False, form.errors['tour'][0]

    if request.htmx:
        return render(request, 'empreendimentos/partials/linha_tour.html', {
            'empreendimento': empreendimento,
            'salvo': salvo,
            'erro': erro,
        })

    if salvo:
        messages.success(request, f'Tour de {empreendimento.title} atualizado!')
    else:
        messages.error(request, erro)
    return redirect('empreendimentos:tours')
