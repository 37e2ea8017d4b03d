# src/column_resolver/core/config/__init__.py

"""
Camada de configuração do column_resolver.

Responsabilidades do pacote:
    - Carregamento de grid config (defaults + overrides locais, YAML/JSON)
    - Resolução via deep-merge determinístico
    - Serialização do mapeamento de colunas para o blob JSON do widget
    - Hash canônico para rastreabilidade

Invariantes:
    - A configuração final é um dicionário puro (dict)
    - Erros de arquivo e de serialização são exceções tipadas (`ConfigError`)

Limites explícitos:
    - Não resolve colunas
    - Não interpreta o blob no lado consumidor (ver `core.columns.loader`)
"""
