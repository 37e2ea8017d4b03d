# src/column_resolver/__init__.py
"""
column_resolver — resolução determinística de colunas para grids interativos.

Dado o schema de um dataset tabular, um blob opcional de configuração por
coluna e a política global do widget, o column_resolver produz a lista
final e ordenada de colunas prontas para renderização e edição.

Arquitetura em alto nível:
    - core.config   → grid config em arquivo, merge, hashing e serialização
    - core.columns  → descritores, lookup/aplicação de overrides, tipos e loader
    - core.context  → log estruturado de eventos de uma passagem do loader

Limites explícitos:
    - Não renderiza nem edita células (apenas descreve as colunas)
    - Não valida semântica de negócio dos valores
    - Não persiste configuração
"""
# src/column_resolver/__init__.py
from .core.columns import (
    BaseColumn,
    ColumnConfig,
    ColumnProps,
    ColumnTypeRegistry,
    EditingMode,
    WidgetPolicy,
    load_columns,
)
from .core.context import LoadContext

__all__ = [
    "BaseColumn",
    "ColumnConfig",
    "ColumnProps",
    "ColumnTypeRegistry",
    "EditingMode",
    "LoadContext",
    "WidgetPolicy",
    "load_columns",
]
