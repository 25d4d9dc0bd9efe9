import pytest
from django.contrib.auth import authenticate

from apps.core.auth_service import CHAVE_SESSAO, agora_ms, validar_token_servico

pytestmark = pytest.mark.django_db


# ── Backend email + CPF ───────────────────────────────────────────────────

class TestEmailCpfBackend:

    def test_aceita_cpf_formatado(self, admin):
        assert authenticate(email='ana.admin@metrocasa.com.br', cpf='123.456.789-09') == admin

    def test_aceita_cpf_so_digitos(self, admin):
        assert authenticate(email='ana.admin@metrocasa.com.br', cpf='12345678909') == admin

    def test_cpf_errado(self, admin):
        assert authenticate(email='ana.admin@metrocasa.com.br', cpf='98765432100') is None

    def test_email_errado(self, admin):
        assert authenticate(email='outra@metrocasa.com.br', cpf='12345678909') is None

    def test_usuario_inativo(self, admin):
        admin.is_active = False
        admin.save()
        assert authenticate(email=admin.email, cpf=admin.cpf) is None

    def test_sem_credenciais(self, admin):
        assert authenticate(email='', cpf='') is None

    def test_dominio_com_maiusculas(self, admin):
        assert authenticate(email='ana.admin@Metrocasa.COM.BR', cpf='12345678909') == admin


# ── API de login ──────────────────────────────────────────────────────────

class TestApiLogin:

    def test_login_devolve_sessao_com_token(self, client, criar_usuario):
        usuario = criar_usuario('cac senior', email='bia@metrocasa.com.br', cpf='11122233344')

        response = client.post(
            '/api/auth/login',
            {'email': 'bia@metrocasa.com.br', 'cpf': '111.222.333-44'},
            content_type='application/json',
        )

        assert response.status_code == 200
        dados = response.json()
        assert dados['id'] == str(usuario.id)
        assert dados['role'] == 'cac'
        assert dados['cpf'] == '11122233344'
        assert dados['metadata']['permission'] == 'cac senior'
        assert isinstance(dados['login_timestamp'], int)
        assert validar_token_servico(dados['service_token']).permissao == 'cac senior'

    def test_login_guarda_sessao(self, client, admin):
        client.post(
            '/api/auth/login',
            {'email': admin.email, 'cpf': admin.cpf},
            content_type='application/json',
        )

        assert client.session[CHAVE_SESSAO]['email'] == admin.email

        response = client.get('/api/auth/session')
        assert response.status_code == 200
        assert response.json()['service_token']

    def test_cliente_nao_recebe_token(self, client, cliente):
        response = client.post(
            '/api/auth/login',
            {'email': cliente.email, 'cpf': cliente.cpf},
            content_type='application/json',
        )

        assert response.status_code == 200
        assert response.json()['service_token'] is None

    def test_credenciais_invalidas(self, client, admin):
        response = client.post(
            '/api/auth/login',
            {'email': admin.email, 'cpf': '00000000000'},
            content_type='application/json',
        )

        assert response.status_code == 401
        assert response.json() == {'error': 'Credenciais inválidas'}

    def test_campos_faltando(self, client, db):
        response = client.post('/api/auth/login', {'email': 'x@y.com'}, content_type='application/json')
        assert response.status_code == 400

    def test_json_malformado(self, client, db):
        response = client.post('/api/auth/login', 'nao-e-json', content_type='application/json')
        assert response.status_code == 400
        assert response.json() == {'error': 'JSON inválido'}

    def test_login_com_email_do_cadastro(self, client, api_headers):
        client.post(
            '/api/users',
            {'name': 'Bia', 'email': 'bia@Metrocasa.COM.BR', 'cpf': '11122233344', 'role': 'cac senior'},
            content_type='application/json',
            headers=api_headers,
        )

        response = client.post(
            '/api/auth/login',
            {'email': 'bia@Metrocasa.COM.BR', 'cpf': '11122233344'},
            content_type='application/json',
        )

        assert response.status_code == 200
        assert response.json()['email'] == 'bia@metrocasa.com.br'

    def test_sessao_mantem_token_valido(self, client, admin):
        client.post('/api/auth/login', {'email': admin.email, 'cpf': admin.cpf}, content_type='application/json')
        token = client.session[CHAVE_SESSAO]['service_token']

        assert client.get('/api/auth/session').json()['service_token'] == token

    def test_sessao_renova_token_expirado(self, client, admin, settings, monkeypatch):
        client.post('/api/auth/login', {'email': admin.email, 'cpf': admin.cpf}, content_type='application/json')
        antigo = client.session[CHAVE_SESSAO]['service_token']

        depois = agora_ms() + (settings.SERVICE_TOKEN_MAX_AGE + 60) * 1000
        monkeypatch.setattr('apps.core.auth_service.agora_ms', lambda: depois)

        novo = client.get('/api/auth/session').json()['service_token']

        assert novo != antigo
        assert client.get('/api/users', headers={'Authorization': f'Bearer {antigo}'}).status_code == 401
        assert client.get('/api/users', headers={'Authorization': f'Bearer {novo}'}).status_code == 200
        assert client.session[CHAVE_SESSAO]['service_token'] == novo

    def test_sessao_sem_login(self, client, db):
        assert client.get('/api/auth/session').status_code == 401

    def test_logout(self, client, admin):
        client.force_login(admin)
        response = client.post('/api/auth/logout')

        assert response.status_code == 200
        assert client.get('/api/auth/session').status_code == 401


# ── Páginas de login ──────────────────────────────────────────────────────

class TestPaginaLogin:

    def test_formulario(self, client, db):
        response = client.get('/login/')
        assert response.status_code == 200
        assert 'form' in response.context

    def test_login_redireciona_para_home(self, client, admin):
        response = client.post('/login/', {'email': admin.email, 'cpf': '123.456.789-09'})

        assert response.status_code == 302
        assert response.url == '/home/'

    def test_login_respeita_next(self, client, admin):
        response = client.post('/login/?next=/obras/', {'email': admin.email, 'cpf': admin.cpf})
        assert response.url == '/obras/'

    def test_login_ignora_next_externo(self, client, admin):
        response = client.post(
            '/login/?next=https://evil.example.com/',
            {'email': admin.email, 'cpf': admin.cpf},
        )
        assert response.url == '/home/'

    def test_login_invalido_fica_na_pagina(self, client, admin):
        response = client.post('/login/', {'email': admin.email, 'cpf': '98765432100'})

        assert response.status_code == 200
        assert '_auth_user_id' not in client.session

    def test_logout_volta_para_login(self, cliente_admin):
        response = cliente_admin.get('/logout/')
        assert response.url == '/login/'
