# apps/empreendimentos/views_api.py

"""
API JSON de empreendimentos

Todas as rotas passam pelo ServiceTokenMiddleware.
"""

import logging

from django.conf import settings
from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_http_methods

from apps.core.utils import ler_json
from apps.core.views_api import ERRO_INTERNO, erro

from .models import Empreendimento
from .services import atualizar_evolucao, atualizar_tour

logger = logging.getLogger(__name__)

NAO_ENCONTRADO = 'Empreendimento não encontrado'


@require_GET
def api_empreendimentos(request):
    """Todos os empreendimentos ordenados por título"""
    try:
        empreendimentos = Empreendimento.objects.order_by('title')
        return JsonResponse([e.para_json() for e in empreendimentos], safe=False)
    except Exception:
        logger.exception("Erro ao listar empreendimentos")
        return erro(ERRO_INTERNO, 500)


@csrf_exempt
@require_http_methods(['GET', 'PUT'])
def api_empreendimento_detalhe(request, empreendimento_id):
    empreendimento = Empreendimento.objects.filter(id=empreendimento_id).first()
    if empreendimento is None:
        return erro(NAO_ENCONTRADO, 404)

    if request.method == 'GET':
        return JsonResponse(empreendimento.para_json())

    try:
        dados = ler_json(request)
        if 'project_evolution' not in dados:
            raise ValueError('project_evolution é obrigatório')
        empreendimento = atualizar_evolucao(empreendimento.id, dados['project_evolution'])
    except ValueError as exc:
        return erro(str(exc), 400)
    except Empreendimento.DoesNotExist:
        return erro(NAO_ENCONTRADO, 404)
    except Exception:
        logger.exception("Erro ao atualizar empreendimento %s", empreendimento_id)
        return erro('Erro ao atualizar empreendimento', 500)

    return JsonResponse(empreendimento.para_json())


@require_GET
def api_obras(request):
    """Empreendimentos em obras"""
    try:
        obras = Empreendimento.objects.filter(
            project_status='under_construction'
        ).order_by('title')
        return JsonResponse([e.para_json() for e in obras], safe=False)
    except Exception:
        logger.exception("Erro ao listar obras")
        return erro(ERRO_INTERNO, 500)


@require_GET
def api_tours(request):
    """Até PAINEL_TOURS_LIMITE empreendimentos com o link do tour"""
    try:
        empreendimentos = Empreendimento.objects.order_by('title')[:settings.PAINEL_TOURS_LIMITE]
        return JsonResponse([e.para_json_tour() for e in empreendimentos], safe=False)
    except Exception:
        logger.exception("Erro ao listar tours")
        return erro(ERRO_INTERNO, 500)


@csrf_exempt
@require_http_methods(['GET', 'PUT'])
def api_tour_detalhe(request, empreendimento_id):
    empreendimento = Empreendimento.objects.filter(id=empreendimento_id).first()
    if empreendimento is None:
        return erro(NAO_ENCONTRADO, 404)

    if request.method == 'GET':
        return JsonResponse(empreendimento.para_json_tour())

    try:
        dados = ler_json(request)
    except ValueError as exc:
        return erro(str(exc), 400)

    tour = dados.get('tour')
    if tour is not None and not isinstance(tour, str):
        return erro('tour deve ser um texto', 400)

    try:
        empreendimento = atualizar_tour(empreendimento.id, tour)
    except Empreendimento.DoesNotExist:
        return erro(NAO_ENCONTRADO, 404)
    except Exception:
        logger.exception("Erro ao atualizar tour %s", empreendimento_id)
        return erro('Erro interno ao atualizar tour', 500)

    return JsonResponse({'success': True, 'updated': empreendimento.para_json()})
