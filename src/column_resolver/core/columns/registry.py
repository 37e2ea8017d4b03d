# src/column_resolver/core/columns/registry.py
"""
ColumnTypeRegistry v1 — catálogo determinístico de tipos de coluna.

Tipos de coluna suportados são centralizados e explícitos: não há discovery
automático nem plugins. O registry resolve um tipo de duas formas:

    - por nome explícito (`type_config.type` do override)
    - pela tag de tipo nativo inferida do schema (função total, com fallback
      para `object`)

Este módulo fornece:
- ColumnTypeSpec: handle de um tipo de coluna (construção + editabilidade)
- ColumnTypeRegistry: ponto único de verdade para tipos de coluna (v1)
- get_column_type: resolução do tipo de uma coluna configurada
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Type

from column_resolver.core.context import LoadContext

from .kinds import (
    BaseColumn,
    CheckboxColumn,
    DateColumn,
    DateTimeColumn,
    ListColumn,
    NumberColumn,
    ObjectColumn,
    SelectboxColumn,
    TextColumn,
    TimeColumn,
)
from .types import ColumnProps


FALLBACK_COLUMN_TYPE = "object"

_NATIVE_TYPE_TO_COLUMN_TYPE: Dict[str, str] = {
    "integer": "number",
    "float": "number",
    "decimal": "number",
    "boolean": "checkbox",
    "datetime": "datetime",
    "date": "date",
    "time": "time",
    "categorical": "selectbox",
    "string": "text",
    "list": "list",
}


@dataclass(frozen=True)
class ColumnTypeSpec:
    """Handle canônico de um tipo de coluna registrado."""

    type_id: str
    column_cls: Type[BaseColumn]

    @property
    def is_editable_type(self) -> bool:
        return self.column_cls.is_editable_type

    def build(self, props: ColumnProps) -> BaseColumn:
        """Instancia a coluna de runtime a partir do descritor final."""
        return self.column_cls(props)


class ColumnTypeRegistry:
    """Registry determinístico de ColumnTypeSpec.

    Extensibilidade é explícita: novos tipos podem ser registrados via `register()`.
    """

    def __init__(self, specs: Optional[Iterable[ColumnTypeSpec]] = None):
        self._specs: Dict[str, ColumnTypeSpec] = {}
        if specs:
            for s in specs:
                self.register(s)

    @classmethod
    def v1(cls) -> "ColumnTypeRegistry":
        """Factory do catálogo v1."""
        return cls(specs=_default_specs_v1())

    def register(self, spec: ColumnTypeSpec) -> None:
        if not isinstance(spec, ColumnTypeSpec):
            raise TypeError("spec must be a ColumnTypeSpec")
        if not isinstance(spec.type_id, str) or not spec.type_id.strip():
            raise ValueError("type_id must be a non-empty string")
        if spec.type_id in self._specs:
            raise ValueError(f"type_id already registered: {spec.type_id}")
        self._specs[spec.type_id] = spec

    def has(self, type_id: object) -> bool:
        return isinstance(type_id, str) and type_id in self._specs

    def list_ids(self) -> List[str]:
        return sorted(self._specs.keys())

    def get(self, type_id: str) -> ColumnTypeSpec:
        if type_id not in self._specs:
            raise KeyError(f"unknown column type: {type_id}")
        return self._specs[type_id]

    def from_native_type(self, native_type: Optional[str]) -> ColumnTypeSpec:
        """Resolve o tipo a partir da tag nativa; nunca falha (fallback `object`)."""
        type_id = _NATIVE_TYPE_TO_COLUMN_TYPE.get(native_type or "", FALLBACK_COLUMN_TYPE)
        if type_id in self._specs:
            return self._specs[type_id]
        return self.get(FALLBACK_COLUMN_TYPE)


def _default_specs_v1() -> List[ColumnTypeSpec]:
    classes = [
        ObjectColumn,
        TextColumn,
        NumberColumn,
        CheckboxColumn,
        SelectboxColumn,
        ListColumn,
        DateTimeColumn,
        DateColumn,
        TimeColumn,
    ]
    return [ColumnTypeSpec(type_id=c.kind, column_cls=c) for c in classes]


def get_column_type(
    column: ColumnProps,
    registry: Optional[ColumnTypeRegistry] = None,
    ctx: Optional[LoadContext] = None,
) -> ColumnTypeSpec:
    """
    Resolve o tipo de coluna que governa `column`.

    Um `type` explícito em `column_type_options` tem precedência quando
    registrado. Um nome desconhecido gera warning no contexto e a resolução
    cai para a inferência pela tag nativa.
    """
    registry = registry if registry is not None else ColumnTypeRegistry.v1()

    custom_type = column.column_type_options.get("type")
    if custom_type is not None:
        if registry.has(custom_type):
            return registry.get(custom_type)
        if ctx is not None:
            ctx.log_warning(
                step_id="columns.type",
                message=f"Unknown column type configured in column configuration: {custom_type}",
                column=column.name,
                index_number=column.index_number,
            )

    return registry.from_native_type(column.native_type)
