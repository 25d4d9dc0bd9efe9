# apps/core/utils.py

import json
import re
from typing import Dict, Optional


def normalizar_cpf(cpf: Optional[str]) -> str:
    """
    Remove pontuação do CPF
    Ex: "123.456.789-09" -> "12345678909"
    """
    if not cpf:
        return ''
    return re.sub(r'\D', '', str(cpf))


def formatar_cpf(cpf: Optional[str]) -> str:
    """
    Formata CPF para exibição
    Ex: "12345678909" -> "123.456.789-09"
    """
    if not cpf:
        return ''

    numeros = normalizar_cpf(cpf)
    if len(numeros) != 11:
        return cpf

    return f"{numeros[:3]}.{numeros[3:6]}.{numeros[6:9]}-{numeros[9:]}"


def ler_json(request) -> Dict:
    """
    Lê o corpo JSON de um request

    Levanta ValueError se o corpo não for um objeto JSON válido.
    """
    try:
        dados = json.loads(request.body or b'{}')
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ValueError('JSON inválido') from exc

    if not isinstance(dados, dict):
        raise ValueError('JSON inválido')

    return dados


def dict_ou_vazio(valor) -> Dict:
    """Campos JSON podem vir como lista, string ou nulo do banco legado"""
    return valor if isinstance(valor, dict) else {}
