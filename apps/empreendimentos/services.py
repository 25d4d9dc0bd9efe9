# apps/empreendimentos/services.py

"""
Regras de escrita dos empreendimentos

Toda atualização de JSON é feita por leitura-mescla-escrita dentro
de uma transação com lock de linha, para que duas edições simultâneas
não apaguem chaves uma da outra.
"""

import logging
from typing import Dict, List

from django.core.exceptions import ValidationError
from django.db import transaction

from apps.core.utils import dict_ou_vazio

from .models import ETAPAS_OBRA, Empreendimento

logger = logging.getLogger(__name__)

CAMPOS_EVOLUCAO = [campo for campo, _rotulo in ETAPAS_OBRA]


def validar_evolucao(dados: Dict) -> Dict:
    """
    Valida o payload de project_evolution

    Etapas aceitam inteiros de 0 a 100 (ou vazio); project_pdf aceita
    uma string. Chaves desconhecidas são rejeitadas.
    Levanta ValueError com a mensagem do primeiro problema.
    """
    if not isinstance(dados, dict):
        raise ValueError('project_evolution deve ser um objeto')

    limpo = {}
    for chave, valor in dados.items():
        if chave == 'project_pdf':
            if valor is not None and not isinstance(valor, str):
                raise ValueError('project_pdf deve ser um texto')
            limpo[chave] = valor or ''
            continue

        if chave not in CAMPOS_EVOLUCAO:
            raise ValueError(f'Etapa desconhecida: {chave}')

        if valor in (None, ''):
            limpo[chave] = ''
            continue

        # Só inteiros (bool não) ou texto com dígitos; float nunca é truncado
        if isinstance(valor, str) and valor.strip().isascii() and valor.strip().isdigit():
            numero = int(valor.strip())
        elif isinstance(valor, int) and not isinstance(valor, bool):
            numero = valor
        else:
            raise ValueError(f'{chave} deve ser um número inteiro entre 0 e 100')

        if not 0 <= numero <= 100:
            raise ValueError(f'{chave} deve ser um número entre 0 e 100')

        limpo[chave] = numero

    return limpo


def atualizar_evolucao(empreendimento_id, dados: Dict) -> Empreendimento:
    """Mescla o andamento validado no project_evolution existente"""
    novos = validar_evolucao(dados)

    with transaction.atomic():
        empreendimento = Empreendimento.objects.select_for_update().get(id=empreendimento_id)
        evolucao = dict(dict_ou_vazio(empreendimento.project_evolution))
        evolucao.update(novos)
        empreendimento.project_evolution = evolucao
        empreendimento.save(update_fields=['project_evolution', 'updated_at'])

    logger.info("Evolução da obra %s atualizada", empreendimento.title)
    return empreendimento


def atualizar_tour(empreendimento_id, tour) -> Empreendimento:
    """
    Grava só metadata['tour']; demais chaves de metadata são mantidas

    String vazia é aceita e limpa o link.
    """
    with transaction.atomic():
        empreendimento = Empreendimento.objects.select_for_update().get(id=empreendimento_id)
        metadata = dict(dict_ou_vazio(empreendimento.metadata))
        metadata['tour'] = tour or ''
        empreendimento.metadata = metadata
        empreendimento.save(update_fields=['metadata', 'updated_at'])

    logger.info("Tour de %s atualizado", empreendimento.title)
    return empreendimento


def empreendimentos_do_usuario(usuario) -> List[Dict]:
    """
    Vínculos do usuário com título, status, fachada e endereço

    Vínculos apontando para empreendimentos inexistentes voltam
    com os campos do empreendimento nulos.
    """
    vinculos = [v for v in usuario.empreendimentos_vinculados if isinstance(v, dict)]

    ids = [v.get('property_id') for v in vinculos if v.get('property_id')]
    encontrados = {}
    if ids:
        validos = []
        for pk in ids:
            try:
                validos.append(Empreendimento._meta.pk.to_python(pk))
            except ValidationError:
                logger.warning("property_id inválido no usuário %s: %s", usuario.email, pk)
        encontrados = {
            str(e.id): e for e in Empreendimento.objects.filter(id__in=validos)
        }

    resultado = []
    for vinculo in vinculos:
        empreendimento = encontrados.get(str(vinculo.get('property_id')))
        resultado.append({
            **vinculo,
            'title': empreendimento.title if empreendimento else None,
            'project_status': empreendimento.project_status if empreendimento else None,
            'facade': empreendimento.facade if empreendimento else None,
            'address': empreendimento.address if empreendimento else None,
        })

    return resultado
