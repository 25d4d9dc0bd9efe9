# apps/indicacoes/models.py

import uuid

from django.db import models

from apps.core.utils import dict_ou_vazio


class Indicacao(models.Model):
    """
    Indicação de cliente recebida pelo site

    Os dados de quem indicou ficam em `indication` (name, cpf, phone);
    `bank` guarda a conta para pagamento da bonificação.
    """

    STATUS_CHOICES = [
        ('new', 'Novo'),
        ('pending', 'Pendente'),
        ('approved', 'Aprovado'),
        ('rejected', 'Rejeitado'),
        ('processing', 'Processando'),
    ]

    CORES_STATUS = {
        'new': 'bg-blue-100 text-blue-800',
        'pending': 'bg-yellow-100 text-yellow-800',
        'approved': 'bg-green-100 text-green-800',
        'rejected': 'bg-red-100 text-red-800',
        'processing': 'bg-purple-100 text-purple-800',
    }

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # === INDICADO ===
    name = models.CharField(max_length=200)
    rg = models.CharField(max_length=30)
    cpf = models.CharField(max_length=14, db_index=True)
    phone = models.CharField(max_length=30)
    birth_date = models.DateField(null=True, blank=True)
    address = models.JSONField(default=dict, blank=True, help_text="cep, number")
    imovel = models.JSONField(null=True, blank=True, db_column='property', help_text="empreendimento de interesse")
    bank = models.JSONField(default=dict, blank=True, help_text="bank, agency, account")
    is_client = models.BooleanField(default=False)

    # === QUEM INDICOU ===
    indication = models.JSONField(default=dict, blank=True, help_text="name, cpf, phone")

    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='new')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'indicacao'
        ordering = ['-created_at']
        verbose_name = 'Indicação'
        verbose_name_plural = 'Indicações'
        indexes = [
            models.Index(fields=['status'], name='indicacao_status_idx'),
            models.Index(fields=['created_at'], name='indicacao_criada_idx'),
        ]

    def __str__(self):
        return f"{self.name} ({self.get_status_display()})"

    @property
    def cor_status(self):
        return self.CORES_STATUS.get(self.status, 'bg-gray-100 text-gray-800')

    @property
    def indicador(self):
        return dict_ou_vazio(self.indication)

    def para_json(self):
        """Representação devolvida pela API (chaves no formato do site)"""
        return {
            'id': self.id,
            'name': self.name,
            'rg': self.rg,
            'cpf': self.cpf,
            'phone': self.phone,
            'birthDate': self.birth_date,
            'address': self.address,
            'property': self.imovel,
            'bank': self.bank,
            'isClient': self.is_client,
            'indication': self.indication,
            'status': self.status,
            'createdAt': self.created_at,
            'updatedAt': self.updated_at,
        }
