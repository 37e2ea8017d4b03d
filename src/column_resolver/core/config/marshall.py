# src/column_resolver/core/config/marshall.py
"""
Serialização do mapeamento de colunas para o blob JSON do widget.

Lado produtor da gramática de chaves de configuração:

    - `str`  → nome literal da coluna (ou `"index"` para colunas de índice)
    - `int`  → posição ordinal, convertida para `"_pos:<n>"`

Registros são reduzidos aos campos conhecidos e presentes; `width` precisa
ser um tamanho nomeado ou um número.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional, Union

from column_resolver.core.columns.lookup import position_key
from column_resolver.core.columns.types import ColumnConfig
from column_resolver.core.columns.width import COLUMN_WIDTH_MAPPING

from .errors import InvalidColumnConfigError


ColumnKey = Union[str, int]


def _normalize_key(key: ColumnKey) -> str:
    if isinstance(key, bool):
        raise InvalidColumnConfigError(f"Chave de coluna inválida: {key!r}")
    if isinstance(key, int):
        if key < 0:
            raise InvalidColumnConfigError(f"Posição de coluna negativa: {key}")
        return position_key(key)
    if isinstance(key, str):
        return key
    raise InvalidColumnConfigError(f"Chave de coluna inválida: {key!r}")


def _normalize_record(key: str, record: Any) -> Dict[str, Any]:
    if isinstance(record, ColumnConfig):
        out = record.to_dict()
    elif isinstance(record, Mapping):
        out = ColumnConfig.from_dict(record).to_dict()
    else:
        raise InvalidColumnConfigError(
            f"Config da coluna '{key}' deve ser dict, recebido: {type(record).__name__}"
        )

    width = out.get("width")
    if width is not None:
        valid_number = isinstance(width, (int, float)) and not isinstance(width, bool)
        if not valid_number and width not in COLUMN_WIDTH_MAPPING:
            raise InvalidColumnConfigError(
                f"Width inválido para a coluna '{key}': {width!r} "
                f"(esperado número ou um de {sorted(COLUMN_WIDTH_MAPPING)})"
            )
    return out


def marshall_column_config(
    column_config: Optional[Mapping[ColumnKey, Union[ColumnConfig, Mapping[str, Any]]]],
) -> str:
    """
    Converte um mapeamento de colunas no blob JSON consumido por `load_columns`.

    Returns:
        str: JSON de um objeto chave → registro (vazio: `"{}"`).

    Raises:
        InvalidColumnConfigError: Para chaves, registros ou larguras inválidos.
    """
    payload: Dict[str, Any] = {}
    for raw_key, record in (column_config or {}).items():
        key = _normalize_key(raw_key)
        payload[key] = _normalize_record(key, record)
    return json.dumps(payload, ensure_ascii=False, default=str)
