# src/column_resolver/core/columns/apply.py
"""
Aplicação de overrides sobre descritores de coluna.

O merge é uma cópia condicional campo a campo: apenas campos presentes
(não-None) no override substituem o valor do descritor. Campos não
mapeados abaixo nunca são tocados.

Mapeamento override → descritor:
    - label       → title
    - width       → width (via `parse_width_config`)
    - disabled    → is_editable = not disabled
    - hidden      → is_hidden
    - required    → is_required
    - type_config → column_type_options (deep-merge leniente)
    - alignment   → content_alignment
    - default     → default_value
    - help        → help

Invariantes:
    - merge(d, ColumnConfig()) == d
    - merge(merge(d, c), c) == merge(d, c)
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from column_resolver.core.config.merge import deep_merge

from .lookup import get_column_config
from .types import ColumnConfig, ColumnProps
from .width import parse_width_config


def merge_column_config(column: ColumnProps, config: Optional[ColumnConfig]) -> ColumnProps:
    """Aplica um override já resolvido sobre `column`, retornando um novo snapshot."""
    if config is None:
        return column

    updates: Dict[str, Any] = {}

    if config.label is not None:
        updates["title"] = config.label

    width = parse_width_config(config.width)
    if width is not None:
        updates["width"] = width

    if config.disabled is not None:
        updates["is_editable"] = not config.disabled

    if config.hidden is not None:
        updates["is_hidden"] = config.hidden

    if config.required is not None:
        updates["is_required"] = config.required

    if config.type_config is not None:
        updates["column_type_options"] = deep_merge(
            column.column_type_options, config.type_config, strict=False
        )

    if config.alignment is not None:
        updates["content_alignment"] = config.alignment

    if config.default is not None:
        updates["default_value"] = config.default

    if config.help is not None:
        updates["help"] = config.help

    if not updates:
        return column
    return column.with_updates(**updates)


def apply_column_config(
    column: ColumnProps,
    column_config_mapping: Optional[Mapping[str, ColumnConfig]],
) -> ColumnProps:
    """
    Aplica a configuração do usuário a `column`, se houver override aplicável.

    Args:
        column (ColumnProps): Descritor base da coluna.
        column_config_mapping: Mapeamento chave → override (pode ser None).

    Returns:
        ColumnProps: O descritor com o override aplicado, ou o próprio
        `column` quando nenhum override se aplica.
    """
    return merge_column_config(column, get_column_config(column, column_config_mapping))
