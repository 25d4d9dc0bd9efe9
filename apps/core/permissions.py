# apps/core/permissions.py

from dataclasses import dataclass
from functools import wraps

from django.conf import settings
from django.contrib.auth.views import redirect_to_login
from django.shortcuts import redirect

# Páginas/funcionalidades -> permissões que podem acessá-las
PERMISSOES = {
    'OBRAS': ['admin', 'cac analyst'],
    'ADMIN': ['admin'],
    'USERS': ['admin', 'marketing', 'cac', 'cac analyst'],
    'VIDEO': ['admin', 'marketing'],
    'INDICACOES': ['admin', 'cac', 'cac senior', 'cac analyst'],
    'ANALISE': ['admin', 'marketing'],
}

# Permissões aceitas pelo token de serviço em qualquer rota /api/
PERMISSOES_API = [
    'cac',
    'cac senior',
    'marketing',
    'cac analyst',
    'designer',
    'admin',
]


# Papel informado no cadastro -> (role gravado, permissão em metadata)
MAPA_ROLES = {
    'cac': ('cac', 'cac'),
    'cac senior': ('cac', 'cac senior'),
    'cac analyst': ('cac', 'cac analyst'),
    'designer': ('marketing', 'designer'),
    'admin': ('admin', 'admin'),
    'marketing': ('marketing', 'marketing'),
    'customer': ('customer', None),
}


def derivar_role(papel):
    """
    Converte o papel do cadastro em (role, metadata)

    'cac senior' vira role 'cac' com permission 'cac senior';
    'designer' vira role 'marketing' com permission 'designer'.
    Clientes não recebem permission.
    """
    if papel not in MAPA_ROLES:
        raise KeyError(papel)

    role, permissao = MAPA_ROLES[papel]
    metadata = {'permission': permissao} if permissao else {}
    return role, metadata


@dataclass(frozen=True)
class ContextoAutorizacao:
    """
    Quem está agindo e com qual permissão

    Montado a partir do usuário logado e passado explicitamente
    para as checagens, em vez de cada uma ler o request.
    """

    permissao: str = ''
    role: str = ''
    autenticado: bool = False

    @classmethod
    def do_usuario(cls, usuario):
        if usuario is None or not usuario.is_authenticated:
            return cls()
        return cls(
            permissao=usuario.permissao,
            role=usuario.role,
            autenticado=True,
        )

    def pode(self, chave):
        return PainelPermissions.pode_acessar(chave, self)


class PainelPermissions:
    """
    Sistema de permissões do painel
    Baseado na permissão fina gravada em metadata do usuário
    """

    @staticmethod
    def pode_acessar(chave, contexto):
        """Verifica se o contexto tem acesso à página/funcionalidade"""
        if not contexto.autenticado or not contexto.permissao:
            return False
        return contexto.permissao in PERMISSOES.get(chave, [])

    @staticmethod
    def permissao_valida_api(permissao):
        """Permissão pode receber token de serviço?"""
        return permissao in PERMISSOES_API

    @staticmethod
    def chaves_permitidas(contexto):
        """Todas as chaves que o contexto pode acessar"""
        return [chave for chave in PERMISSOES if PainelPermissions.pode_acessar(chave, contexto)]


# Decoradores para views

def requer_permissao(chave):
    """
    Decorador que protege uma página pela tabela PERMISSOES

    Anônimos vão para o login; quem não tem a permissão vai para
    /unauthorized/ sem a view ser executada. O contexto de autorização
    fica disponível em request.contexto_autorizacao.
    """
    if chave not in PERMISSOES:
        raise KeyError(f"Chave de permissão desconhecida: {chave}")

    def decorator(view_func):
        @wraps(view_func)
        def wrapped_view(request, *args, **kwargs):
            if not request.user.is_authenticated:
                return redirect_to_login(request.get_full_path(), settings.LOGIN_URL)

            contexto = ContextoAutorizacao.do_usuario(request.user)
            if not PainelPermissions.pode_acessar(chave, contexto):
                return redirect('core:unauthorized')

            request.contexto_autorizacao = contexto
            return view_func(request, *args, **kwargs)

        return wrapped_view

    return decorator
