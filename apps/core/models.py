# apps/core/models.py

import uuid

from django.contrib.auth.models import AbstractUser, BaseUserManager
from django.db import models

from .utils import normalizar_cpf


class UsuarioManager(BaseUserManager):
    """
    Manager do Usuario identificado por email

    O painel não usa senha: o login é feito por email + CPF.
    Senha só existe para superusuários que entram no /admin/.
    """

    use_in_migrations = True

    def create_user(self, email, cpf, password=None, **extra_fields):
        if not email:
            raise ValueError('Email é obrigatório')

        usuario = self.model(
            email=self.normalize_email(email),
            cpf=cpf,
            **extra_fields
        )
        if password:
            usuario.set_password(password)
        else:
            usuario.set_unusable_password()
        usuario.save(using=self._db)
        return usuario

    def create_superuser(self, email, cpf, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('role', 'admin')
        extra_fields.setdefault('metadata', {'permission': 'admin'})
        return self.create_user(email, cpf, password, **extra_fields)


class Usuario(AbstractUser):
    """
    Modelo de usuário do painel

    O campo `role` é o papel amplo (customer, admin, cac, marketing).
    A permissão fina fica em `metadata['permission']`, junto com os
    vínculos do usuário com empreendimentos em `metadata['properties']`.
    """

    ROLE_CHOICES = [
        ('customer', 'Cliente'),
        ('admin', 'Administrador'),
        ('cac', 'CAC'),
        ('marketing', 'Marketing'),
    ]

    # Campos do AbstractUser que o painel não usa
    username = None
    first_name = None
    last_name = None
    date_joined = None

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # === IDENTIDADE ===
    name = models.CharField(max_length=200)
    email = models.EmailField(unique=True)
    cpf = models.CharField(max_length=11, db_index=True, help_text="Somente dígitos")
    role = models.CharField(max_length=30, choices=ROLE_CHOICES, default='customer')
    email_verified = models.BooleanField(default=False)

    # === METADADOS ===
    metadata = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['cpf', 'name']

    objects = UsuarioManager()

    class Meta:
        db_table = 'usuario'
        ordering = ['name']
        indexes = [
            models.Index(fields=['role'], name='usuario_role_idx'),
        ]

    def save(self, *args, **kwargs):
        """CPF é sempre gravado só com dígitos"""
        self.cpf = normalizar_cpf(self.cpf)
        if self.metadata is None:
            self.metadata = {}
        super().save(*args, **kwargs)

    @property
    def permissao(self):
        """Permissão fina gravada em metadata"""
        metadata = self.metadata if isinstance(self.metadata, dict) else {}
        return metadata.get('permission') or ''

    @property
    def empreendimentos_vinculados(self):
        """Lista de vínculos `{property_id, num_ven, ...}` do usuário"""
        metadata = self.metadata if isinstance(self.metadata, dict) else {}
        vinculos = metadata.get('properties')
        return vinculos if isinstance(vinculos, list) else []

    def get_full_name(self):
        return self.name

    def get_short_name(self):
        return self.name.split(' ')[0] if self.name else self.email

    def para_json(self):
        """Representação devolvida pela API de usuários"""
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'cpf': self.cpf,
            'role': self.role,
            'email_verified': self.email_verified,
            'created_at': self.created_at,
            'updated_at': self.updated_at,
            'metadata': self.metadata or {},
        }

    def __str__(self):
        return f"{self.name} <{self.email}>"
