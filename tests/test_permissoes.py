import pytest
from django.contrib.auth.models import AnonymousUser
from django.http import HttpResponse

from apps.core.auth_service import DadosInvalidos, auth_service
from apps.core.context_processors import navegacao
from apps.core.permissions import (
    PERMISSOES,
    ContextoAutorizacao,
    PainelPermissions,
    derivar_role,
    requer_permissao,
)


# ── Derivação de role ─────────────────────────────────────────────────────

class TestDerivarRole:

    @pytest.mark.parametrize('papel, role, permissao', [
        ('cac', 'cac', 'cac'),
        ('cac senior', 'cac', 'cac senior'),
        ('cac analyst', 'cac', 'cac analyst'),
        ('designer', 'marketing', 'designer'),
        ('admin', 'admin', 'admin'),
        ('marketing', 'marketing', 'marketing'),
    ])
    def test_papeis_de_equipe(self, papel, role, permissao):
        assert derivar_role(papel) == (role, {'permission': permissao})

    def test_cliente_sem_permissao(self):
        assert derivar_role('customer') == ('customer', {})

    def test_papel_desconhecido(self):
        with pytest.raises(KeyError):
            derivar_role('gerente')


@pytest.mark.django_db
class TestCriarUsuario:

    def test_designer_vira_marketing(self):
        usuario = auth_service.criar_usuario({
            'name': 'Dani Designer', 'email': 'dani@metrocasa.com.br',
            'cpf': '111.222.333-44', 'role': 'designer',
        })

        assert usuario.role == 'marketing'
        assert usuario.metadata == {'permission': 'designer'}
        assert usuario.cpf == '11122233344'
        assert usuario.email_verified is False
        assert not usuario.has_usable_password()

    def test_cac_senior_vira_cac(self):
        usuario = auth_service.criar_usuario({
            'name': 'Bia', 'email': 'bia@metrocasa.com.br', 'cpf': '11122233344', 'role': 'cac senior',
        })

        assert usuario.role == 'cac'
        assert usuario.permissao == 'cac senior'

    @pytest.mark.parametrize('dados, mensagem', [
        ({'email': 'x@y.com', 'cpf': '11122233344', 'role': 'cac'}, 'Campos obrigatórios faltando'),
        ({'name': 'X', 'email': 'x@y.com', 'cpf': '11122233344', 'role': 'gerente'}, 'Papel inválido'),
        ({'name': 'X', 'email': 'x@y.com', 'cpf': '123', 'role': 'cac'}, 'CPF inválido'),
        ({'name': 'X', 'email': 'nao-e-email', 'cpf': '11122233344', 'role': 'cac'}, 'Email inválido'),
    ])
    def test_dados_invalidos(self, dados, mensagem):
        with pytest.raises(DadosInvalidos, match=mensagem):
            auth_service.criar_usuario(dados)

    def test_email_duplicado(self, admin):
        with pytest.raises(DadosInvalidos, match='Email já cadastrado'):
            auth_service.criar_usuario({
                'name': 'Outro', 'email': admin.email, 'cpf': '11122233344', 'role': 'cac',
            })


# ── Tabela de permissões ──────────────────────────────────────────────────

class TestPainelPermissions:

    @pytest.mark.parametrize('chave, permissao, esperado', [
        ('OBRAS', 'admin', True),
        ('OBRAS', 'cac analyst', True),
        ('OBRAS', 'cac', False),
        ('OBRAS', 'marketing', False),
        ('ADMIN', 'admin', True),
        ('ADMIN', 'cac analyst', False),
        ('USERS', 'marketing', True),
        ('USERS', 'cac senior', False),
        ('VIDEO', 'marketing', True),
        ('VIDEO', 'designer', False),
        ('INDICACOES', 'cac senior', True),
        ('ANALISE', 'cac', False),
    ])
    def test_pode_acessar(self, chave, permissao, esperado):
        contexto = ContextoAutorizacao(permissao=permissao, role='x', autenticado=True)
        assert PainelPermissions.pode_acessar(chave, contexto) is esperado

    def test_anonimo_nao_acessa_nada(self):
        contexto = ContextoAutorizacao.do_usuario(AnonymousUser())
        assert PainelPermissions.chaves_permitidas(contexto) == []

    def test_admin_acessa_tudo(self):
        contexto = ContextoAutorizacao(permissao='admin', role='admin', autenticado=True)
        assert PainelPermissions.chaves_permitidas(contexto) == list(PERMISSOES)

    def test_chave_desconhecida_falha_na_decoracao(self):
        with pytest.raises(KeyError):
            requer_permissao('INEXISTENTE')


# ── Decorador de páginas ──────────────────────────────────────────────────

@pytest.mark.django_db
class TestRequerPermissao:

    @pytest.fixture
    def view_obras(self):
        chamadas = []

        @requer_permissao('OBRAS')
        def view(request):
            chamadas.append(request.contexto_autorizacao)
            return HttpResponse('ok')

        view.chamadas = chamadas
        return view

    def test_sem_permissao_redireciona_sem_executar(self, rf, criar_usuario, view_obras):
        request = rf.get('/obras/')
        request.user = criar_usuario('marketing')

        response = view_obras(request)

        assert response.status_code == 302
        assert response.url == '/unauthorized/'
        assert view_obras.chamadas == []

    def test_anonimo_vai_para_login(self, rf, view_obras):
        request = rf.get('/obras/')
        request.user = AnonymousUser()

        response = view_obras(request)

        assert response.status_code == 302
        assert response.url == '/login/?next=/obras/'
        assert view_obras.chamadas == []

    def test_com_permissao_recebe_contexto(self, rf, criar_usuario, view_obras):
        request = rf.get('/obras/')
        request.user = criar_usuario('cac analyst')

        response = view_obras(request)

        assert response.status_code == 200
        assert view_obras.chamadas == [
            ContextoAutorizacao(permissao='cac analyst', role='cac', autenticado=True)
        ]

    def test_cliente_nunca_passa(self, rf, cliente, view_obras):
        request = rf.get('/obras/')
        request.user = cliente

        assert view_obras(request).url == '/unauthorized/'


# ── Sidebar ───────────────────────────────────────────────────────────────

@pytest.mark.django_db
def test_menu_filtrado_pela_permissao(rf, criar_usuario):
    request = rf.get('/home/')
    request.user = criar_usuario('marketing')

    nomes = [item['nome'] for item in navegacao(request)['menu_itens']]

    assert nomes == ['Usuários', 'Tour Virtual', 'Análise']
