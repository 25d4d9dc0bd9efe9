# apps/indicacoes/__init__.py

"""
Indicações - Cadastro público e análise de indicações de clientes
"""
