# apps/core/backends.py

from django.contrib.auth.backends import BaseBackend

from .models import Usuario
from .utils import normalizar_cpf


class EmailCpfBackend(BaseBackend):
    """
    Autentica pelo par email + CPF

    O CPF funciona como segredo compartilhado: não há senha nem hash.
    Só passam registros ativos que tenham CPF e role preenchidos.
    """

    def authenticate(self, request, email=None, cpf=None, **kwargs):
        if not email or not cpf:
            return None

        cpf_normalizado = normalizar_cpf(cpf)
        if not cpf_normalizado:
            return None

        # Mesma normalização do cadastro (domínio em minúsculas)
        usuario = Usuario.objects.filter(
            email=Usuario.objects.normalize_email(email.strip()),
            cpf=cpf_normalizado,
            is_active=True,
        ).first()

        if usuario is None or not usuario.cpf or not usuario.role:
            return None

        return usuario

    def get_user(self, user_id):
        try:
            return Usuario.objects.get(pk=user_id, is_active=True)
        except Usuario.DoesNotExist:
            return None
