"""
Fixtures compartilhadas dos testes do painel
"""

import itertools

import pytest

from apps.core.auth_service import gerar_token_servico
from apps.core.models import Usuario
from apps.core.permissions import derivar_role
from apps.empreendimentos.models import Empreendimento


@pytest.fixture
def criar_usuario(db):
    """Fábrica de usuários a partir do papel de cadastro (admin, cac senior, designer...)"""
    sequencia = itertools.count(1)

    def _criar(papel='admin', **extra):
        n = next(sequencia)
        role, metadata = derivar_role(papel)
        dados = {
            'name': f'Usuário {n}',
            'email': f'usuario{n}@metrocasa.com.br',
            'cpf': f'{n:011d}',
            'role': role,
            'metadata': metadata,
        }
        dados.update(extra)
        return Usuario.objects.create_user(**dados)

    return _criar


@pytest.fixture
def admin(criar_usuario):
    return criar_usuario(
        'admin',
        name='Ana Admin',
        email='ana.admin@metrocasa.com.br',
        cpf='123.456.789-09',
    )


@pytest.fixture
def cliente(criar_usuario):
    return criar_usuario('customer', name='Carlos Cliente', email='carlos@gmail.com')


@pytest.fixture
def cliente_admin(client, admin):
    """Test client logado como admin"""
    client.force_login(admin)
    return client


@pytest.fixture
def token_admin(settings):
    return gerar_token_servico('admin')


@pytest.fixture
def api_headers(token_admin):
    return {'Authorization': f'Bearer {token_admin}'}


@pytest.fixture
def empreendimento(db):
    return Empreendimento.objects.create(
        title='Metrocasa Ipiranga',
        project_status='under_construction',
        facade='https://cdn.metrocasa.com.br/ipiranga/fachada.jpg',
        address={'street': 'Rua Bom Pastor', 'number': '1200', 'city': 'São Paulo', 'state': 'SP'},
        project_evolution={'project_percentage': 40, 'structure': 20},
        metadata={'tour': 'https://tour.metrocasa.com.br/ipiranga', 'destaque': True},
    )
