import uuid

import pytest

from apps.empreendimentos.models import Empreendimento
from apps.empreendimentos.services import atualizar_tour, validar_evolucao

pytestmark = pytest.mark.django_db


# ── Tour virtual ──────────────────────────────────────────────────────────

class TestTourApi:

    def test_put_preserva_outras_chaves(self, client, api_headers, empreendimento):
        response = client.put(
            f'/api/properties/tour/{empreendimento.id}',
            {'tour': 'https://tour.metrocasa.com.br/novo'},
            content_type='application/json',
            headers=api_headers,
        )

        assert response.status_code == 200
        assert response.json()['success'] is True
        empreendimento.refresh_from_db()
        assert empreendimento.metadata == {'tour': 'https://tour.metrocasa.com.br/novo', 'destaque': True}

    def test_put_aceita_string_vazia(self, client, api_headers, empreendimento):
        client.put(
            f'/api/properties/tour/{empreendimento.id}',
            {'tour': ''},
            content_type='application/json',
            headers=api_headers,
        )

        empreendimento.refresh_from_db()
        assert empreendimento.metadata == {'tour': '', 'destaque': True}

    def test_put_metadata_nao_objeto(self, empreendimento):
        Empreendimento.objects.filter(id=empreendimento.id).update(metadata=['legado'])

        atualizado = atualizar_tour(empreendimento.id, 'https://x.com')
        assert atualizado.metadata == {'tour': 'https://x.com'}

    def test_put_inexistente(self, client, api_headers):
        response = client.put(
            f'/api/properties/tour/{uuid.uuid4()}', {'tour': 'x'},
            content_type='application/json', headers=api_headers,
        )
        assert response.status_code == 404
        assert response.json() == {'error': 'Empreendimento não encontrado'}

    def test_get_detalhe(self, client, api_headers, empreendimento):
        response = client.get(f'/api/properties/tour/{empreendimento.id}', headers=api_headers)

        assert response.json() == {
            'id': str(empreendimento.id),
            'title': 'Metrocasa Ipiranga',
            'facade': empreendimento.facade,
            'tour': 'https://tour.metrocasa.com.br/ipiranga',
        }

    def test_lista_ordenada_com_tour_padrao(self, client, api_headers, empreendimento):
        Empreendimento.objects.create(title='Metrocasa Butantã')

        response = client.get('/api/properties/tour', headers=api_headers)

        dados = response.json()
        assert [e['title'] for e in dados] == ['Metrocasa Butantã', 'Metrocasa Ipiranga']
        assert dados[0]['tour'] == ''

    def test_lista_limitada(self, client, api_headers, settings):
        settings.PAINEL_TOURS_LIMITE = 3
        for i in range(5):
            Empreendimento.objects.create(title=f'Empreendimento {i}')

        response = client.get('/api/properties/tour', headers=api_headers)
        assert len(response.json()) == 3


# ── Empreendimentos e obras ───────────────────────────────────────────────

class TestEmpreendimentosApi:

    def test_lista_todos(self, client, api_headers, empreendimento):
        Empreendimento.objects.create(title='Metrocasa Butantã', project_status='launch')

        response = client.get('/api/properties', headers=api_headers)
        assert [e['title'] for e in response.json()] == ['Metrocasa Butantã', 'Metrocasa Ipiranga']

    def test_obras_so_em_construcao(self, client, api_headers, empreendimento):
        Empreendimento.objects.create(title='Metrocasa Butantã', project_status='launch')
        Empreendimento.objects.create(title='Metrocasa Tatuapé', project_status='ready_to_move_in')

        response = client.get('/api/properties/obras', headers=api_headers)
        assert [e['title'] for e in response.json()] == ['Metrocasa Ipiranga']

    def test_detalhe(self, client, api_headers, empreendimento):
        response = client.get(f'/api/properties/{empreendimento.id}', headers=api_headers)

        assert response.status_code == 200
        assert response.json()['project_evolution'] == {'project_percentage': 40, 'structure': 20}

    def test_detalhe_inexistente(self, client, api_headers):
        response = client.get(f'/api/properties/{uuid.uuid4()}', headers=api_headers)
        assert response.status_code == 404

    def test_put_mescla_evolucao(self, client, api_headers, empreendimento):
        response = client.put(
            f'/api/properties/{empreendimento.id}',
            {'project_evolution': {'structure': 55, 'project_pdf': 'https://cdn.metrocasa.com.br/p.pdf'}},
            content_type='application/json',
            headers=api_headers,
        )

        assert response.status_code == 200
        empreendimento.refresh_from_db()
        assert empreendimento.project_evolution == {
            'project_percentage': 40,
            'structure': 55,
            'project_pdf': 'https://cdn.metrocasa.com.br/p.pdf',
        }

    @pytest.mark.parametrize('evolucao', [
        {'structure': 101},
        {'structure': -1},
        {'structure': 'muito'},
        {'structure': float('inf')},
        {'structure': 55.9},
        {'structure': True},
        {'telhado': 10},
        'nao-e-objeto',
    ])
    def test_put_invalido(self, client, api_headers, empreendimento, evolucao):
        response = client.put(
            f'/api/properties/{empreendimento.id}',
            {'project_evolution': evolucao},
            content_type='application/json',
            headers=api_headers,
        )

        assert response.status_code == 400
        empreendimento.refresh_from_db()
        assert empreendimento.project_evolution == {'project_percentage': 40, 'structure': 20}

    def test_put_sem_evolucao(self, client, api_headers, empreendimento):
        response = client.put(
            f'/api/properties/{empreendimento.id}', {}, content_type='application/json', headers=api_headers,
        )
        assert response.status_code == 400


def test_validar_evolucao_aceita_texto_numerico():
    assert validar_evolucao({'demolition': '80', 'earthworks': ''}) == {'demolition': 80, 'earthworks': ''}


@pytest.mark.parametrize('valor', [55.9, 100.0, float('inf'), '-5', '7.5', '٣'])
def test_validar_evolucao_recusa_nao_inteiros(valor):
    with pytest.raises(ValueError):
        validar_evolucao({'structure': valor})


# ── Páginas ───────────────────────────────────────────────────────────────

class TestPaginasObras:

    def test_lista_obras(self, cliente_admin, empreendimento):
        Empreendimento.objects.create(title='Metrocasa Butantã', project_status='launch')

        response = cliente_admin.get('/obras/')

        assert response.status_code == 200
        assert list(response.context['obras']) == [empreendimento]

    def test_busca(self, cliente_admin, empreendimento):
        response = cliente_admin.get('/obras/?q=butant')
        assert list(response.context['obras']) == []

    def test_marketing_nao_acessa(self, client, criar_usuario):
        client.force_login(criar_usuario('marketing'))

        response = client.get('/obras/')
        assert response.url == '/unauthorized/'

    def test_editar_evolucao(self, cliente_admin, empreendimento):
        response = cliente_admin.post(f'/obras/editar/{empreendimento.id}/', {
            'project_percentage': '60',
            'structure': '35',
            'project_pdf': 'https://cdn.metrocasa.com.br/projeto.pdf',
        })

        assert response.status_code == 302
        empreendimento.refresh_from_db()
        assert empreendimento.project_evolution['project_percentage'] == 60
        assert empreendimento.project_evolution['structure'] == 35
        assert empreendimento.project_evolution['demolition'] == ''
        assert empreendimento.project_evolution['project_pdf'] == 'https://cdn.metrocasa.com.br/projeto.pdf'

    def test_editar_valor_fora_da_faixa(self, cliente_admin, empreendimento):
        response = cliente_admin.post(f'/obras/editar/{empreendimento.id}/', {'structure': '150'})

        assert response.status_code == 200
        assert 'structure' in response.context['form'].errors


class TestPaginaTour:

    def test_lista(self, client, criar_usuario, empreendimento):
        client.force_login(criar_usuario('marketing'))

        response = client.get('/tour/')

        assert response.status_code == 200
        assert list(response.context['empreendimentos']) == [empreendimento]

    def test_salvar_htmx(self, cliente_admin, empreendimento):
        response = cliente_admin.post(
            f'/tour/{empreendimento.id}/salvar/',
            {'tour': 'https://tour.metrocasa.com.br/v2'},
            headers={'HX-Request': 'true'},
        )

        assert response.status_code == 200
        assert b'<html' not in response.content
        empreendimento.refresh_from_db()
        assert empreendimento.metadata == {'tour': 'https://tour.metrocasa.com.br/v2', 'destaque': True}

    def test_salvar_url_invalida(self, cliente_admin, empreendimento):
        response = cliente_admin.post(
            f'/tour/{empreendimento.id}/salvar/', {'tour': 'nao-e-url'}, headers={'HX-Request': 'true'},
        )

        assert response.context['salvo'] is False
        empreendimento.refresh_from_db()
        assert empreendimento.tour == 'https://tour.metrocasa.com.br/ipiranga'

    def test_cac_nao_acessa(self, client, criar_usuario):
        client.force_login(criar_usuario('cac'))
        assert client.get('/tour/').url == '/unauthorized/'
