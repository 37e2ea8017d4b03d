# src/column_resolver/core/columns/schema.py
"""Extração de descritores base a partir de um DataFrame pandas.

Responsabilidades:
- Produzir um `ColumnProps` por nível de índice e por coluna de dados.
- Inferir a tag de tipo nativo de cada coluna a partir do dtype pandas
  (e, para dtype `object`, do primeiro valor não-nulo).

Princípios:
- OBSERVAR sem mutar: o DataFrame nunca é alterado.

Tags nativas (v1):
  integer | float | decimal | boolean | datetime | date | time | timedelta |
  categorical | string | list | object | empty
"""

from __future__ import annotations

from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, List

import numpy as np
import pandas as pd
from pandas.api.types import (
    is_bool_dtype,
    is_datetime64_any_dtype,
    is_float_dtype,
    is_integer_dtype,
    is_object_dtype,
    is_timedelta64_dtype,
)

from .types import ColumnProps


def as_dataframe(table: Any) -> pd.DataFrame:
    """Aceita um DataFrame ou qualquer estrutura aceita por `pd.DataFrame(...)`."""
    if isinstance(table, pd.DataFrame):
        return table
    return pd.DataFrame(table)


def _first_valid(values: pd.Series) -> Any:
    for v in values.tolist():
        if v is None:
            continue
        if isinstance(v, (list, tuple, np.ndarray)):
            return v
        if pd.isna(v):
            continue
        return v
    return None


def native_type_for_values(values: pd.Series) -> str:
    """Infere a tag de tipo nativo de uma série (coluna ou nível de índice)."""
    dtype = values.dtype

    if isinstance(dtype, pd.CategoricalDtype):
        return "categorical"
    if is_bool_dtype(dtype):
        return "boolean"
    if is_integer_dtype(dtype):
        return "integer"
    if is_float_dtype(dtype):
        return "float"
    if is_datetime64_any_dtype(dtype):
        return "datetime"
    if is_timedelta64_dtype(dtype):
        return "timedelta"
    if isinstance(dtype, pd.StringDtype):
        return "string"
    if not is_object_dtype(dtype):
        return "object"

    sample = _first_valid(values)
    if sample is None:
        return "empty"
    # bool antes de int; datetime antes de date (datetime é subclasse de date)
    if isinstance(sample, (bool, np.bool_)):
        return "boolean"
    if isinstance(sample, str):
        return "string"
    if isinstance(sample, Decimal):
        return "decimal"
    if isinstance(sample, (int, np.integer)):
        return "integer"
    if isinstance(sample, (float, np.floating)):
        return "float"
    if isinstance(sample, datetime):
        return "datetime"
    if isinstance(sample, date):
        return "date"
    if isinstance(sample, time):
        return "time"
    if isinstance(sample, (list, tuple, np.ndarray)):
        return "list"
    return "object"


def _index_levels(df: pd.DataFrame) -> List[pd.Series]:
    index = df.index
    return [
        pd.Series(index.get_level_values(level), copy=False)
        for level in range(index.nlevels)
    ]


def _series_at(df: pd.DataFrame, position: int) -> pd.Series:
    levels = _index_levels(df)
    if position < 0 or position >= len(levels) + df.shape[1]:
        raise IndexError(f"column position out of range: {position}")
    if position < len(levels):
        return levels[position]
    return df.iloc[:, position - len(levels)]


def get_native_type(table: Any, position: int) -> str:
    """Retorna a tag nativa da coluna na posição ordinal (índices primeiro)."""
    return native_type_for_values(_series_at(as_dataframe(table), position))


def _type_options(values: pd.Series) -> dict:
    dtype = values.dtype
    if isinstance(dtype, pd.CategoricalDtype):
        return {"options": [c.item() if isinstance(c, np.generic) else c for c in dtype.categories]}
    return {}


def get_all_columns_from_dataframe(table: Any) -> List[ColumnProps]:
    """
    Deriva um descritor base por nível de índice e por coluna de dados.

    Colunas de índice vêm primeiro e não são editáveis; colunas de dados são
    editáveis por padrão. `index_number` é contíguo a partir de 0.
    """
    df = as_dataframe(table)
    columns: List[ColumnProps] = []

    for level, values in enumerate(_index_levels(df)):
        level_name = df.index.names[level]
        name = "" if level_name is None else str(level_name)
        columns.append(
            ColumnProps(
                name=name,
                index_number=level,
                is_index=True,
                native_type=native_type_for_values(values),
                dtype=str(values.dtype),
                title=name,
                is_editable=False,
                column_type_options=_type_options(values),
            )
        )

    offset = len(columns)
    for i in range(df.shape[1]):
        values = df.iloc[:, i]
        name = str(df.columns[i])
        columns.append(
            ColumnProps(
                name=name,
                index_number=offset + i,
                is_index=False,
                native_type=native_type_for_values(values),
                dtype=str(values.dtype),
                title=name,
                is_editable=True,
                column_type_options=_type_options(values),
            )
        )

    return columns


def get_empty_index_column() -> ColumnProps:
    """Coluna de índice sintética usada quando nenhuma coluna sobrevive aos filtros."""
    return ColumnProps(
        name="",
        index_number=0,
        is_index=True,
        native_type="object",
        title="",
        is_editable=False,
    )
