# src/column_resolver/core/__init__.py
"""
Core do column_resolver.

O core é projetado para ser:
    - determinístico (mesma entrada → mesmas colunas)
    - puro (sem estado global, sem I/O durante a resolução)
    - tolerante (configuração malformada degrada, nunca derruba o grid)

Componentes principais:
    - config   → carregamento de grid config, deep-merge, hashing, serialização
    - columns  → resolução de colunas (width, lookup, apply, tipos, loader)
    - context  → LoadContext (eventos e warnings por passagem)
"""
