# apps/core/__init__.py

"""
Core - Aplicação principal do Painel

Contém:
- Model Usuario com metadata de permissão
- Backend de autenticação por email + CPF
- Token de serviço das chamadas /api/ e middleware que o valida
- Tabela de permissões por página
"""
