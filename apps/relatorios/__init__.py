# apps/relatorios/__init__.py

"""
Relatórios - Análise e exportações do Painel

Funcionalidades:
- Página de análise com relatório externo embutido
- Exportação de indicações em CSV/Excel
- Relatório de evolução das obras em PDF (ReportLab)
"""
