# apps/core/context_processors.py

from .permissions import ContextoAutorizacao

# (nome, url name, chave de permissão)
ITENS_MENU = [
    ('Usuários', 'core:home', 'USERS'),
    ('Obras', 'empreendimentos:obras', 'OBRAS'),
    ('Tour Virtual', 'empreendimentos:tours', 'VIDEO'),
    ('Indicações', 'indicacoes:lista', 'INDICACOES'),
    ('Análise', 'relatorios:analise', 'ANALISE'),
    ('Novo Usuário', 'core:usuario_adicionar', 'ADMIN'),
]


def navegacao(request):
    """Itens da sidebar visíveis para o usuário logado"""
    contexto = getattr(request, 'contexto_autorizacao', None)
    if contexto is None:
        contexto = ContextoAutorizacao.do_usuario(getattr(request, 'user', None))

    return {
        'menu_itens': [
            {'nome': nome, 'url_name': url_name}
            for nome, url_name, chave in ITENS_MENU
            if contexto.pode(chave)
        ],
    }
