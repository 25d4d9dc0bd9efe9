import uuid

import pytest

from apps.core.models import Usuario

pytestmark = pytest.mark.django_db


class TestCriarUsuarioApi:

    def test_cria_designer(self, client, api_headers):
        response = client.post(
            '/api/users',
            {'name': 'Dani', 'email': 'dani@metrocasa.com.br', 'cpf': '111.222.333-44', 'role': 'designer'},
            content_type='application/json',
            headers=api_headers,
        )

        assert response.status_code == 201
        dados = response.json()
        assert dados['role'] == 'marketing'
        assert dados['metadata'] == {'permission': 'designer'}
        assert Usuario.objects.get(email='dani@metrocasa.com.br').permissao == 'designer'

    def test_cria_cliente(self, client, api_headers):
        response = client.post(
            '/api/users',
            {'name': 'Carla', 'email': 'carla@gmail.com', 'cpf': '11122233344', 'role': 'customer'},
            content_type='application/json',
            headers=api_headers,
        )

        assert response.status_code == 201
        assert response.json()['metadata'] == {}

    @pytest.mark.parametrize('dados', [
        {'email': 'x@y.com', 'cpf': '11122233344', 'role': 'cac'},
        {'name': 'X', 'email': 'x@y.com', 'cpf': '11122233344', 'role': 'supervisor'},
        {'name': 'X', 'email': 'x@y.com', 'cpf': '11122233344'},
    ])
    def test_dados_invalidos(self, client, api_headers, dados):
        response = client.post('/api/users', dados, content_type='application/json', headers=api_headers)

        assert response.status_code == 400
        assert not Usuario.objects.filter(email='x@y.com').exists()

    def test_email_duplicado(self, client, api_headers, admin):
        response = client.post(
            '/api/users',
            {'name': 'X', 'email': admin.email, 'cpf': '11122233344', 'role': 'cac'},
            content_type='application/json',
            headers=api_headers,
        )

        assert response.status_code == 400
        assert response.json() == {'error': 'Email já cadastrado'}

    def test_json_malformado(self, client, api_headers):
        response = client.post('/api/users', '{nome:', content_type='application/json', headers=api_headers)
        assert response.status_code == 400


class TestListarUsuarios:

    def test_lista_so_clientes(self, client, api_headers, admin, criar_usuario):
        criar_usuario('customer', name='Bruno')
        criar_usuario('customer', name='Alice')
        criar_usuario('cac')

        response = client.get('/api/users', headers=api_headers)

        assert response.status_code == 200
        assert [u['name'] for u in response.json()] == ['Alice', 'Bruno']

    def test_filtra_por_role(self, client, api_headers, admin, cliente):
        response = client.get('/api/users?role=admin', headers=api_headers)
        assert [u['email'] for u in response.json()] == [admin.email]

    def test_busca_por_cpf_formatado(self, client, api_headers, criar_usuario):
        criar_usuario('customer', name='Alvo', cpf='98765432100')
        criar_usuario('customer', name='Outro')

        response = client.get('/api/users?q=987.654', headers=api_headers)
        assert [u['name'] for u in response.json()] == ['Alvo']


class TestDetalheUsuario:

    def test_busca_por_id(self, client, api_headers, cliente):
        response = client.get(f'/api/users/{cliente.id}', headers=api_headers)

        assert response.status_code == 200
        dados = response.json()
        assert dados['id'] == str(cliente.id)
        assert dados['email_verified'] is False
        assert 'created_at' in dados

    def test_inexistente(self, client, api_headers):
        response = client.get(f'/api/users/{uuid.uuid4()}', headers=api_headers)

        assert response.status_code == 404
        assert response.json() == {'error': 'Usuário não encontrado'}

    def test_put_mescla_metadata(self, client, api_headers, criar_usuario):
        usuario = criar_usuario('customer', metadata={'properties': [{'property_id': 'a'}], 'origem': 'site'})

        response = client.put(
            f'/api/users/{usuario.id}',
            {'metadata': {'properties': [{'property_id': 'b'}]}},
            content_type='application/json',
            headers=api_headers,
        )

        assert response.status_code == 200
        usuario.refresh_from_db()
        assert usuario.metadata == {'properties': [{'property_id': 'b'}], 'origem': 'site'}

    def test_put_nao_muda_role(self, client, api_headers, criar_usuario):
        usuario = criar_usuario('cac')

        client.put(
            f'/api/users/{usuario.id}',
            {'metadata': {'permission': 'admin'}},
            content_type='application/json',
            headers=api_headers,
        )

        usuario.refresh_from_db()
        assert usuario.role == 'cac'
        assert usuario.permissao == 'admin'

    @pytest.mark.parametrize('corpo', [{}, {'metadata': None}, {'metadata': ['x']}, {'metadata': 'x'}])
    def test_put_sem_metadata(self, client, api_headers, cliente, corpo):
        response = client.put(
            f'/api/users/{cliente.id}', corpo, content_type='application/json', headers=api_headers,
        )
        assert response.status_code == 400

    def test_put_inexistente(self, client, api_headers):
        response = client.put(
            f'/api/users/{uuid.uuid4()}', {'metadata': {}}, content_type='application/json', headers=api_headers,
        )
        assert response.status_code == 404


class TestEmpreendimentosDoUsuario:

    def test_vinculos_enriquecidos(self, client, api_headers, criar_usuario, empreendimento):
        usuario = criar_usuario('customer', metadata={'properties': [
            {'property_id': str(empreendimento.id), 'num_ven': '1234', 'status_ven': 'ativo'},
            {'property_id': 'nao-e-uuid', 'num_ven': '99'},
        ]})

        response = client.get(f'/api/users/{usuario.id}/properties', headers=api_headers)

        assert response.status_code == 200
        primeiro, segundo = response.json()
        assert primeiro['title'] == 'Metrocasa Ipiranga'
        assert primeiro['num_ven'] == '1234'
        assert primeiro['project_status'] == 'under_construction'
        assert primeiro['address']['city'] == 'São Paulo'
        assert segundo['title'] is None
