# apps/indicacoes/views_api.py

"""
API JSON de indicações

POST/OPTIONS /api/indicacao é público (formulário do site) e só aceita
a origem INDICACAO_ALLOWED_ORIGIN. GET e PUT passam pelo
ServiceTokenMiddleware.
"""

import logging
from functools import wraps

from django.conf import settings
from django.http import JsonResponse
from django.utils.dateparse import parse_date
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from apps.core.utils import ler_json
from apps.core.views_api import ERRO_INTERNO, erro

from .models import Indicacao
from .utils import filtrar_indicacoes

logger = logging.getLogger(__name__)

STATUS_VALIDOS = [valor for valor, _rotulo in Indicacao.STATUS_CHOICES]


def com_cors(view_func):
    """Adiciona o header CORS da origem permitida em toda resposta"""

    @wraps(view_func)
    def wrapped_view(request, *args, **kwargs):
        response = view_func(request, *args, **kwargs)
        response['Access-Control-Allow-Origin'] = settings.INDICACAO_ALLOWED_ORIGIN
        response['Vary'] = 'Origin'
        return response

    return wrapped_view


@csrf_exempt
@com_cors
@require_http_methods(['GET', 'POST', 'OPTIONS'])
def api_indicacoes(request):
    if request.method == 'OPTIONS':
        response = JsonResponse({})
        response['Access-Control-Allow-Methods'] = 'POST, OPTIONS'
        response['Access-Control-Allow-Headers'] = 'Content-Type'
        return response

    if request.method == 'POST':
        return _criar_indicacao(request)

    try:
        indicacoes = filtrar_indicacoes(request.GET)
        return JsonResponse([i.para_json() for i in indicacoes], safe=False)
    except Exception:
        logger.exception("Erro ao listar indicações")
        return erro(ERRO_INTERNO, 500)


def _ler_data_nascimento(valor):
    """Aceita AAAA-MM-DD ou um datetime ISO (só a data é usada)"""
    if valor in (None, ''):
        return None
    try:
        data = parse_date(str(valor)[:10])
    except ValueError:
        data = None
    if data is None:
        raise ValueError('birthDate inválida')
    return data


def _criar_indicacao(request):
    origem = request.headers.get('Origin')
    if origem != settings.INDICACAO_ALLOWED_ORIGIN:
        logger.warning("Indicação recusada da origem %s", origem or '-')
        return erro('Forbidden origin', 403)

    try:
        dados = ler_json(request)
        for campo in ('name', 'cpf', 'phone'):
            if not str(dados.get(campo) or '').strip():
                raise ValueError('Campos obrigatórios faltando')

        for campo in ('address', 'property', 'bank', 'indication'):
            if dados.get(campo) is not None and not isinstance(dados[campo], dict):
                raise ValueError(f'{campo} deve ser um objeto')

        nascimento = _ler_data_nascimento(dados.get('birthDate'))
    except ValueError as exc:
        return erro(str(exc), 400)

    try:
        indicacao = Indicacao.objects.create(
            name=str(dados['name']).strip(),
            rg=str(dados.get('rg') or '').strip(),
            cpf=str(dados['cpf']).strip(),
            phone=str(dados['phone']).strip(),
            birth_date=nascimento,
            address=dados.get('address') or {},
            imovel=dados.get('property'),
            bank=dados.get('bank') or {},
            is_client=bool(dados.get('isClient')),
            indication=dados.get('indication') or {},
            status='new',
        )
    except Exception:
        logger.exception("Erro ao salvar indicação")
        return erro('Erro ao salvar indicação', 500)

    logger.info("Indicação %s recebida", indicacao.id)
    return JsonResponse({'success': True, 'data': indicacao.para_json()}, status=201)


@csrf_exempt
@require_http_methods(['GET', 'PUT'])
def api_indicacao_detalhe(request, indicacao_id):
    indicacao = Indicacao.objects.filter(id=indicacao_id).first()
    if indicacao is None:
        return erro('Indicação não encontrada', 404)

    if request.method == 'GET':
        return JsonResponse(indicacao.para_json())

    try:
        dados = ler_json(request)
    except ValueError as exc:
        return erro(str(exc), 400)

    status = dados.get('status')
    if status not in STATUS_VALIDOS:
        return erro('Status inválido', 400)

    try:
        indicacao.status = status
        indicacao.save(update_fields=['status', 'updated_at'])
    except Exception:
        logger.exception("Erro ao atualizar indicação %s", indicacao_id)
        return erro(ERRO_INTERNO, 500)

    logger.info("Indicação %s agora está %s", indicacao.id, status)
    return JsonResponse(indicacao.para_json())
