# apps/core/forms.py

from django import forms
from django.core.exceptions import ValidationError

from .models import Usuario
from .permissions import MAPA_ROLES
from .utils import normalizar_cpf

CLASSE_INPUT = 'form-input w-full px-4 py-2 border rounded-lg'


class LoginForm(forms.Form):
    """Formulário de login por email + CPF"""

    email = forms.EmailField(
        label='Email',
        widget=forms.EmailInput(attrs={
            'class': CLASSE_INPUT,
            'placeholder': 'seu.email@metrocasa.com.br',
            'autofocus': True
        })
    )

    cpf = forms.CharField(
        label='CPF',
        max_length=14,
        widget=forms.TextInput(attrs={
            'class': CLASSE_INPUT,
            'placeholder': '000.000.000-00',
            'inputmode': 'numeric'
        })
    )

    def clean_cpf(self):
        cpf = normalizar_cpf(self.cleaned_data.get('cpf'))
        if len(cpf) != 11:
            raise ValidationError("CPF deve ter 11 dígitos")
        return cpf


class UsuarioForm(forms.Form):
    """
    Cadastro de usuário pelo painel

    As regras de derivação de role ficam no auth_service;
    aqui só a validação de formato.
    """

    name = forms.CharField(
        label='Nome',
        max_length=200,
        widget=forms.TextInput(attrs={'class': CLASSE_INPUT, 'placeholder': 'Nome completo'})
    )

    email = forms.EmailField(
        label='Email',
        widget=forms.EmailInput(attrs={'class': CLASSE_INPUT, 'placeholder': 'email@exemplo.com'})
    )

    cpf = forms.CharField(
        label='CPF',
        max_length=14,
        widget=forms.TextInput(attrs={'class': CLASSE_INPUT, 'placeholder': '000.000.000-00'})
    )

    role = forms.ChoiceField(
        label='Papel',
        choices=[(papel, papel.title()) for papel in MAPA_ROLES],
        widget=forms.Select(attrs={'class': CLASSE_INPUT})
    )

    def clean_cpf(self):
        cpf = normalizar_cpf(self.cleaned_data.get('cpf'))
        if len(cpf) != 11:
            raise ValidationError("CPF deve ter 11 dígitos")
        return cpf

    def clean_email(self):
        """Valida se email já não está em uso"""
        email = self.cleaned_data.get('email')
        if Usuario.objects.filter(email=email).exists():
            raise ValidationError("Este email já está em uso")
        return email


class UsuarioEmpreendimentoForm(forms.Form):
    """Troca o empreendimento vinculado a um cliente"""

    property_id = forms.ChoiceField(
        label='Empreendimento',
        widget=forms.Select(attrs={'class': CLASSE_INPUT})
    )

    num_ven = forms.CharField(
        label='Número da venda',
        max_length=50,
        required=False,
        widget=forms.TextInput(attrs={'class': CLASSE_INPUT})
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        from apps.empreendimentos.models import Empreendimento

        self.fields['property_id'].choices = [
            (str(pk), titulo)
            for pk, titulo in Empreendimento.objects.order_by('title').values_list('id', 'title')
        ]
