# apps/__init__.py

"""
Painel Metrocasa - Aplicações Django

Este pacote contém todas as aplicações do sistema:
- core: Usuários, autenticação, token de serviço e permissões
- empreendimentos: Obras, evolução de obra e links de tour virtual
- indicacoes: Cadastro público e acompanhamento de indicações
- relatorios: Página de análise e exportações CSV, Excel e PDF
"""

__version__ = '0.1.0'
__author__ = 'Equipe Metrocasa'
