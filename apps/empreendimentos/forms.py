# apps/empreendimentos/forms.py

from django import forms

from apps.core.forms import CLASSE_INPUT

from .models import ETAPAS_OBRA


class EvolucaoObraForm(forms.Form):
    """
    Formulário de andamento da obra

    Os campos das etapas são gerados a partir de ETAPAS_OBRA.
    """

    project_pdf = forms.URLField(
        label='Documento do Projeto',
        required=False,
        max_length=500,
        widget=forms.URLInput(attrs={
            'class': CLASSE_INPUT,
            'placeholder': 'https://...'
        })
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for campo, rotulo in ETAPAS_OBRA:
            self.fields[campo] = forms.IntegerField(
                label=rotulo,
                min_value=0,
                max_value=100,
                required=False,
                widget=forms.NumberInput(attrs={'class': CLASSE_INPUT, 'min': 0, 'max': 100})
            )

        # PDF por último no formulário
        self.order_fields([campo for campo, _ in ETAPAS_OBRA] + ['project_pdf'])

    def para_evolucao(self):
        """cleaned_data no formato de project_evolution"""
        dados = {}
        for campo, _rotulo in ETAPAS_OBRA:
            valor = self.cleaned_data.get(campo)
            dados[campo] = '' if valor is None else valor
        dados['project_pdf'] = self.cleaned_data.get('project_pdf') or ''
        return dados


class TourForm(forms.Form):
    tour = forms.URLField(
        label='Link do Tour',
        required=False,
        max_length=500,
        widget=forms.URLInput(attrs={
            'class': CLASSE_INPUT,
            'placeholder': 'https://...'
        })
    )
