# src/column_resolver/core/columns/kinds.py
"""
Tipos concretos de coluna (v1).

Cada tipo de coluna é uma subclasse de `BaseColumn` construída a partir de
um `ColumnProps` final. O contrato comum é:

    - `render(value)` → `Cell` pronto para exibição
    - `get_cell_value(cell)` → valor editado (apenas tipos editáveis)
    - `is_editable_type` (ClassVar) → se o tipo admite edição

O conjunto de tipos é fechado e conhecido: o registro em
`column_resolver.core.columns.registry` mapeia cada `kind` para sua classe.

Limites explícitos:
    - Não valida regras de negócio dos valores
    - Não converte o conteúdo do dataset; apenas formata para exibição
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any, ClassVar, Iterable, List, Mapping, Optional

import numpy as np
import pandas as pd

from .types import ColumnProps


@dataclass(frozen=True)
class Cell:
    """Célula renderizada (apenas apresentação)."""

    kind: str
    data: Any
    display_data: str
    read_only: bool
    is_missing: bool = False
    is_missing_value_error: bool = False
    content_align: Optional[str] = None


def is_missing_value(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (list, tuple, set, dict, np.ndarray)):
        return False
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _to_python(value: Any) -> Any:
    if isinstance(value, np.generic):
        return value.item()
    return value


@dataclass(frozen=True)
class BaseColumn:
    """
    Coluna de runtime construída a partir de um descritor final.

    A instância é imutável; todas as propriedades são lidas do `ColumnProps`.
    Assim como o descritor, não é hashável.
    """

    props: ColumnProps

    __hash__ = None  # type: ignore[assignment]

    kind: ClassVar[str] = "object"
    is_editable_type: ClassVar[bool] = True

    # -----------------------------
    # Propriedades do descritor
    # -----------------------------
    @property
    def name(self) -> str:
        return self.props.name

    @property
    def title(self) -> str:
        return self.props.title

    @property
    def index_number(self) -> int:
        return self.props.index_number

    @property
    def is_index(self) -> bool:
        return self.props.is_index

    @property
    def is_hidden(self) -> bool:
        return self.props.is_hidden

    @property
    def is_editable(self) -> bool:
        return self.props.is_editable

    @property
    def is_required(self) -> bool:
        return self.props.is_required

    @property
    def is_stretched(self) -> bool:
        return self.props.is_stretched

    @property
    def width(self) -> Optional[float]:
        return self.props.width

    @property
    def icon(self) -> Optional[str]:
        return self.props.icon

    @property
    def help(self) -> Optional[str]:
        return self.props.help

    @property
    def content_alignment(self) -> Optional[str]:
        return self.props.content_alignment

    @property
    def default_value(self) -> Any:
        return self.props.default_value

    @property
    def type_options(self) -> Mapping[str, Any]:
        return self.props.column_type_options

    # -----------------------------
    # Renderização & edição
    # -----------------------------
    def render(self, value: Any) -> Cell:
        missing = is_missing_value(value)
        return Cell(
            kind=self.kind,
            data=None if missing else _to_python(value),
            display_data="" if missing else self.format_value(_to_python(value)),
            read_only=not self.is_editable,
            is_missing=missing,
            is_missing_value_error=missing and self.is_required and self.is_editable,
            content_align=self.content_alignment,
        )

    def format_value(self, value: Any) -> str:
        return str(value)

    def get_cell_value(self, cell: Cell) -> Any:
        """Retorna o valor de uma célula editada (None para célula vazia)."""
        if cell.is_missing:
            return None
        return cell.data


class ObjectColumn(BaseColumn):
    """Coluna genérica somente-leitura (fallback para tipos desconhecidos)."""

    kind: ClassVar[str] = "object"
    is_editable_type: ClassVar[bool] = False


class TextColumn(BaseColumn):
    kind: ClassVar[str] = "text"

    def get_cell_value(self, cell: Cell) -> Any:
        value = super().get_cell_value(cell)
        if value is None:
            return None
        text = str(value)

        max_chars = self.type_options.get("max_chars")
        if isinstance(max_chars, int) and max_chars > 0:
            text = text[:max_chars]

        pattern = self.type_options.get("validate")
        if isinstance(pattern, str) and re.fullmatch(pattern, text) is None:
            return None
        return text


class NumberColumn(BaseColumn):
    """Coluna numérica; `format` aceita estilo printf (ex.: "%.2f")."""

    kind: ClassVar[str] = "number"

    def format_value(self, value: Any) -> str:
        fmt = self.type_options.get("format")
        if isinstance(fmt, str) and fmt:
            try:
                return fmt % value
            except (TypeError, ValueError):
                pass
        return str(value)

    def get_cell_value(self, cell: Cell) -> Any:
        value = super().get_cell_value(cell)
        if value is None or isinstance(value, bool):
            return None
        if not isinstance(value, (int, float)):
            try:
                value = float(value)
            except (TypeError, ValueError):
                return None

        lower = self.type_options.get("min")
        upper = self.type_options.get("max")
        if isinstance(lower, (int, float)) and value < lower:
            value = lower
        if isinstance(upper, (int, float)) and value > upper:
            value = upper
        return value


class CheckboxColumn(BaseColumn):
    kind: ClassVar[str] = "checkbox"

    def format_value(self, value: Any) -> str:
        return "true" if bool(value) else "false"

    def get_cell_value(self, cell: Cell) -> Any:
        value = super().get_cell_value(cell)
        return None if value is None else bool(value)


class SelectboxColumn(BaseColumn):
    kind: ClassVar[str] = "selectbox"

    @property
    def options(self) -> List[Any]:
        raw = self.type_options.get("options")
        if isinstance(raw, Iterable) and not isinstance(raw, (str, bytes)):
            return list(raw)
        return []

    def get_cell_value(self, cell: Cell) -> Any:
        value = super().get_cell_value(cell)
        if value is None or value not in self.options:
            return None
        return value


class ListColumn(BaseColumn):
    kind: ClassVar[str] = "list"
    is_editable_type: ClassVar[bool] = False

    def format_value(self, value: Any) -> str:
        if isinstance(value, (list, tuple, set, np.ndarray)):
            return ", ".join(str(_to_python(v)) for v in value)
        return str(value)


class _TemporalColumn(BaseColumn):
    default_format: ClassVar[str] = ""

    def format_value(self, value: Any) -> str:
        if not isinstance(value, (datetime, date, time)):
            return str(value)
        fmt = self.type_options.get("format") or self.default_format
        try:
            return value.strftime(fmt) if fmt else value.isoformat()
        except (TypeError, ValueError):
            return str(value)


class DateTimeColumn(_TemporalColumn):
    kind: ClassVar[str] = "datetime"
    default_format: ClassVar[str] = "%Y-%m-%d %H:%M:%S"


class DateColumn(_TemporalColumn):
    kind: ClassVar[str] = "date"
    default_format: ClassVar[str] = "%Y-%m-%d"


class TimeColumn(_TemporalColumn):
    kind: ClassVar[str] = "time"
    default_format: ClassVar[str] = "%H:%M:%S"
