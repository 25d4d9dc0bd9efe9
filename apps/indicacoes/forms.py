# apps/indicacoes/forms.py

from django import forms

from apps.core.forms import CLASSE_INPUT

from .models import Indicacao
from .utils import CAMPOS_ORDENACAO


class FiltroIndicacoesForm(forms.Form):
    """Filtros da página de indicações (GET)"""

    q = forms.CharField(
        label='Buscar',
        required=False,
        widget=forms.TextInput(attrs={
            'class': CLASSE_INPUT,
            'placeholder': 'Nome, CPF, telefone ou indicador'
        })
    )

    status = forms.ChoiceField(
        label='Status',
        required=False,
        choices=[('all', 'Todos os status')] + Indicacao.STATUS_CHOICES,
        widget=forms.Select(attrs={'class': CLASSE_INPUT})
    )

    client = forms.ChoiceField(
        label='Cliente',
        required=False,
        choices=[('all', 'Todos'), ('client', 'Clientes'), ('non-client', 'Não Clientes')],
        widget=forms.Select(attrs={'class': CLASSE_INPUT})
    )

    date_from = forms.DateField(
        label='De',
        required=False,
        widget=forms.DateInput(attrs={'class': CLASSE_INPUT, 'type': 'date'})
    )

    date_to = forms.DateField(
        label='Até',
        required=False,
        widget=forms.DateInput(attrs={'class': CLASSE_INPUT, 'type': 'date'})
    )

    sort = forms.ChoiceField(
        required=False,
        choices=[(campo, campo) for campo in CAMPOS_ORDENACAO],
        widget=forms.HiddenInput
    )

    dir = forms.ChoiceField(
        required=False,
        choices=[('asc', 'asc'), ('desc', 'desc')],
        widget=forms.HiddenInput
    )

    def tem_filtro(self):
        """Algum filtro além de ordenação está ativo?"""
        if not self.is_bound:
            return False
        return any(
            self.data.get(campo) not in (None, '', 'all')
            for campo in ('q', 'status', 'client', 'date_from', 'date_to')
        )
