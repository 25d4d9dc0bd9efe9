# apps/indicacoes/views.py

from django.conf import settings
from django.core.paginator import Paginator
from django.shortcuts import render

from apps.core.permissions import requer_permissao

from .forms import FiltroIndicacoesForm
from .utils import filtrar_indicacoes, estatisticas
from .models import Indicacao


@requer_permissao('INDICACOES')
def indicacoes_view(request):
    """
    Página de indicações

    Filtros, ordenação e paginação vêm da querystring; as estatísticas
    do topo consideram todas as indicações.
    """
    form = FiltroIndicacoesForm(request.GET or None)

    indicacoes = filtrar_indicacoes(request.GET)
    paginator = Paginator(indicacoes, settings.PAINEL_INDICACOES_POR_PAGINA)
    pagina = paginator.get_page(request.GET.get('page'))

    # Querystring sem page/sort/dir para montar links
    params = request.GET.copy()
    for chave in ('page', 'sort', 'dir'):
        params.pop(chave, None)

    context = {
        'title': 'Indicações',
        'form': form,
        'pagina': pagina,
        'stats': estatisticas(),
        'total_filtrado': paginator.count,
        'total_geral': Indicacao.objects.count(),
        'tem_filtro': form.tem_filtro(),
        'sort': request.GET.get('sort', 'createdAt'),
        'dir': 'asc' if request.GET.get('dir') == 'asc' else 'desc',
        'querystring': params.urlencode(),
    }

    if request.htmx:
        return render(request, 'indicacoes/partials/tabela_indicacoes.html', context)

    return render(request, 'indicacoes/lista.html', context)
