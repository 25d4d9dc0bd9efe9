# apps/empreendimentos/__init__.py

"""
Empreendimentos - Obras e tour virtual

Funcionalidades:
- Acompanhamento da evolução das obras por etapa
- Links de tour virtual guardados em metadata
- API JSON de empreendimentos
"""
