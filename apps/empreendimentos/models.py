# apps/empreendimentos/models.py

import uuid

from django.db import models

from apps.core.utils import dict_ou_vazio

# Etapas da obra na ordem exibida no formulário
ETAPAS_OBRA = [
    ('project_percentage', 'Percentual da Obra'),
    ('demolition', 'Demolição'),
    ('earthworks', 'Terraplanagem'),
    ('shallow_foundation', 'Fundação Rasa'),
    ('deep_foundation', 'Fundação Profunda'),
    ('structure', 'Estrutura'),
    ('finishing', 'Fechamento'),
    ('enclosure', 'Acabamento'),
]


class Empreendimento(models.Model):
    """
    Empreendimento imobiliário

    `project_evolution` guarda o andamento de cada etapa (0-100) e o
    link do PDF do projeto; `metadata` guarda o link do tour virtual.
    """

    STATUS_CHOICES = [
        ('under_construction', 'Em Obras'),
        ('launch', 'Lançamento'),
        ('ready_to_move_in', 'Pronto para Morar'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=200)
    address = models.JSONField(default=dict, blank=True, help_text="street, number, neighborhood, city, state")
    project_status = models.CharField(max_length=30, choices=STATUS_CHOICES, null=True, blank=True)

    # === IMAGENS ===
    facade = models.URLField(max_length=500, blank=True)
    logo = models.URLField(max_length=500, blank=True)
    images = models.JSONField(default=list, blank=True)

    # === ANDAMENTO ===
    project_evolution = models.JSONField(default=dict, blank=True)
    metadata = models.JSONField(default=dict, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'empreendimento'
        ordering = ['title']
        indexes = [
            models.Index(fields=['project_status'], name='empreendimento_status_idx'),
        ]

    def __str__(self):
        return self.title

    @property
    def tour(self):
        """Link do tour virtual ("" quando não cadastrado)"""
        return dict_ou_vazio(self.metadata).get('tour') or ''

    @property
    def evolucao(self):
        return dict_ou_vazio(self.project_evolution)

    @property
    def percentual(self):
        try:
            return int(self.evolucao.get('project_percentage') or 0)
        except (TypeError, ValueError):
            return 0

    @property
    def endereco_formatado(self):
        endereco = dict_ou_vazio(self.address)
        partes = [
            ', '.join(filter(None, [endereco.get('street'), str(endereco.get('number') or '')])),
            endereco.get('neighborhood'),
            ' - '.join(filter(None, [endereco.get('city'), endereco.get('state')])),
        ]
        return ' | '.join(p for p in partes if p)

    def para_json(self):
        """Representação completa devolvida pela API"""
        return {
            'id': self.id,
            'title': self.title,
            'address': self.address,
            'project_status': self.project_status,
            'facade': self.facade,
            'logo': self.logo,
            'images': self.images,
            'project_evolution': self.project_evolution,
            'metadata': self.metadata,
            'created_at': self.created_at,
            'updated_at': self.updated_at,
        }

    def para_json_tour(self):
        return {
            'id': self.id,
            'title': self.title,
            'facade': self.facade,
            'tour': self.tour,
        }
