# apps/core/middleware.py

import logging

from django.http import JsonResponse

from .auth_service import TokenServicoInvalido, extrair_bearer, validar_token_servico

logger = logging.getLogger(__name__)

PREFIXO_API = '/api/'

# Login/logout/sessão não exigem token
PREFIXOS_LIVRES = ('/api/auth/',)

# Cadastro público de indicações, protegido por origem (CORS)
ROTAS_PUBLICAS = {
    '/api/indicacao': ('POST', 'OPTIONS'),
}


class ServiceTokenMiddleware:
    """
    Middleware que exige o token de serviço nas rotas /api/

    A lista de permissões é global: qualquer token válido de equipe
    acessa qualquer rota da API. Restrições por página ficam com o
    decorador requer_permissao.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if self._rota_protegida(request):
            try:
                token = extrair_bearer(request.headers.get('Authorization'))
                request.token_servico = validar_token_servico(token)
            except TokenServicoInvalido as exc:
                logger.warning(
                    "Requisição recusada em %s %s: %s",
                    request.method, request.path, exc.mensagem
                )
                return JsonResponse({'error': exc.mensagem}, status=401)

        return self.get_response(request)

    def _rota_protegida(self, request):
        caminho = request.path

        if not caminho.startswith(PREFIXO_API):
            return False

        if caminho.startswith(PREFIXOS_LIVRES):
            return False

        metodos_publicos = ROTAS_PUBLICAS.get(caminho.rstrip('/'))
        if metodos_publicos and request.method in metodos_publicos:
            return False

        return True
