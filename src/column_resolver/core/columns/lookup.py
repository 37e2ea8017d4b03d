# src/column_resolver/core/columns/lookup.py
"""
Localização do override aplicável a uma coluna.

Um mapeamento de configuração pode endereçar colunas de três formas:

    - pelo nome literal da coluna (`"price"`)
    - pela posição ordinal, com o prefixo `_pos:` (`"_pos:0"` = primeira coluna)
    - pelo identificador reservado `"index"`, que vale para todas as colunas
      de índice (inclusive índices multinível)

Precedência (a primeira que casar vence):
    1. nome: apenas para colunas que não são índice e cujo nome não é `"index"`
    2. posição: independente do papel da coluna
    3. `"index"`: apenas para colunas de índice

Uma chave literal que coincide com o nome de uma coluna e com a posição de
outra (ex.: coluna chamada `"_pos:1"`) é resolvida por esta mesma ordem.
"""

from __future__ import annotations

from typing import Mapping, Optional

from .types import ColumnConfig, ColumnProps


# Usando este ID como chave, a configuração vale para todas as colunas de índice
INDEX_IDENTIFIER = "index"
# Prefixo usado para referenciar uma coluna pela posição numérica
COLUMN_POSITION_PREFIX = "_pos:"


def position_key(index_number: int) -> str:
    """Retorna a chave de configuração para a coluna na posição informada."""
    return f"{COLUMN_POSITION_PREFIX}{index_number}"


def get_column_config(
    column: ColumnProps,
    column_config_mapping: Optional[Mapping[str, ColumnConfig]],
) -> Optional[ColumnConfig]:
    """
    Resolve o registro de override aplicável a `column`.

    Returns:
        Optional[ColumnConfig]: O override encontrado, ou None quando nenhuma
        regra casa (ou o mapeamento está ausente).
    """
    if not column_config_mapping:
        return None

    if (
        not column.is_index
        and column.name != INDEX_IDENTIFIER
        and column.name in column_config_mapping
    ):
        return column_config_mapping[column.name]

    key = position_key(column.index_number)
    if key in column_config_mapping:
        return column_config_mapping[key]

    if column.is_index and INDEX_IDENTIFIER in column_config_mapping:
        return column_config_mapping[INDEX_IDENTIFIER]

    return None
