# apps/core/views_api.py

"""
API JSON de autenticação e usuários

As rotas /api/users passam pelo ServiceTokenMiddleware;
as rotas /api/auth/ são livres.
"""

import logging

from django.db.models import Q
from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from .auth_service import CHAVE_SESSAO, DadosInvalidos, auth_service
from .models import Usuario
from .utils import ler_json, normalizar_cpf

logger = logging.getLogger(__name__)

ERRO_INTERNO = 'Erro interno do servidor'


def erro(mensagem, status):
    return JsonResponse({'error': mensagem}, status=status)


# =================== AUTENTICAÇÃO ===================

@csrf_exempt
@require_POST
def api_login(request):
    """Login por email + CPF; devolve os dados da sessão com o token de serviço"""
    try:
        dados = ler_json(request)
    except ValueError as exc:
        return erro(str(exc), 400)

    email = str(dados.get('email') or '').strip()
    cpf = str(dados.get('cpf') or '').strip()
    if not email or not cpf:
        return erro('Email e CPF são obrigatórios', 400)

    sucesso, _mensagem, sessao = auth_service.fazer_login(request, email, cpf)
    if not sucesso:
        return erro('Credenciais inválidas', 401)

    return JsonResponse(sessao)


@csrf_exempt
@require_POST
def api_logout(request):
    auth_service.fazer_logout(request)
    return JsonResponse({'success': True})


@require_GET
def api_sessao(request):
    """
    Sessão atual (ou 401 se não houver)

    A sessão desliza a cada request, mas o token de serviço expira;
    um token recusado pelo gate é reemitido aqui.
    """
    if not request.user.is_authenticated:
        return erro('Não autenticado', 401)

    sessao = request.session.get(CHAVE_SESSAO)
    if sessao is None or not auth_service.token_da_sessao_valido(sessao):
        sessao = auth_service.emitir_sessao(request.user)
        request.session[CHAVE_SESSAO] = sessao
        logger.info("Sessão de %s reemitida", request.user.email)

    return JsonResponse(sessao)


# =================== USUÁRIOS ===================

@csrf_exempt
@require_http_methods(['GET', 'POST'])
def api_usuarios(request):
    if request.method == 'POST':
        return _criar_usuario(request)
    return _listar_usuarios(request)


def _listar_usuarios(request):
    """
    Lista usuários (clientes por padrão)

    ?role= troca o papel filtrado; ?q= busca por nome, email ou CPF.
    """
    try:
        usuarios = Usuario.objects.filter(role=request.GET.get('role') or 'customer')

        termo = request.GET.get('q', '').strip()
        if termo:
            filtro = Q(name__icontains=termo) | Q(email__icontains=termo)
            cpf = normalizar_cpf(termo)
            if cpf:
                filtro |= Q(cpf__contains=cpf)
            usuarios = usuarios.filter(filtro)

        return JsonResponse([u.para_json() for u in usuarios.order_by('name')], safe=False)

    except Exception:
        logger.exception("Erro ao listar usuários")
        return erro(ERRO_INTERNO, 500)


def _criar_usuario(request):
    try:
        dados = ler_json(request)
    except ValueError as exc:
        return erro(str(exc), 400)

    try:
        usuario = auth_service.criar_usuario(dados)
    except DadosInvalidos as exc:
        return erro(str(exc), 400)
    except Exception:
        logger.exception("Erro ao criar usuário")
        return erro(ERRO_INTERNO, 500)

    return JsonResponse(usuario.para_json(), status=201)


@csrf_exempt
@require_http_methods(['GET', 'PUT'])
def api_usuario_detalhe(request, usuario_id):
    usuario = Usuario.objects.filter(id=usuario_id).first()
    if usuario is None:
        return erro('Usuário não encontrado', 404)

    if request.method == 'GET':
        return JsonResponse(usuario.para_json())

    try:
        dados = ler_json(request)
    except ValueError as exc:
        return erro(str(exc), 400)

    novos = dados.get('metadata')
    if not isinstance(novos, dict):
        return erro('Metadata é obrigatório e deve ser um objeto', 400)

    try:
        # Mescla: chaves não enviadas são preservadas
        metadata = dict(usuario.metadata or {})
        metadata.update(novos)
        usuario.metadata = metadata
        usuario.save(update_fields=['metadata', 'updated_at'])
    except Exception:
        logger.exception("Erro ao atualizar usuário %s", usuario_id)
        return erro(ERRO_INTERNO, 500)

    logger.info("Metadata de %s atualizado", usuario.email)
    return JsonResponse(usuario.para_json())


@require_GET
def api_usuario_empreendimentos(request, usuario_id):
    """Vínculos do usuário enriquecidos com dados do empreendimento"""
    from apps.empreendimentos.services import empreendimentos_do_usuario

    usuario = Usuario.objects.filter(id=usuario_id).first()
    if usuario is None:
        return erro('Usuário não encontrado', 404)

    return JsonResponse(empreendimentos_do_usuario(usuario), safe=False)
