# src/column_resolver/core/columns/loader.py
"""
Loader de colunas — orquestrador da resolução.

Transforma (schema, blob de configuração, política do widget) em uma lista
ordenada e não-vazia de colunas construídas.

Etapas, em ordem:
    1. Desserializa o blob em mapeamento chave → `ColumnConfig`
       (mapeamento vazio em caso de falha, com erro registrado)
    2. Calcula `stretch_columns` a partir da política
    3. Deriva um descritor base por coluna do schema (índices incluídos)
    4. Para cada descritor, em ordem original:
        a. aplica o override e define `is_stretched`
        b. resolve o tipo de coluna
        c. força `is_editable = False` se o widget é read-only, está
           desabilitado ou o tipo não é editável (precedência absoluta)
        d. marca o ícone "editable" em colunas editáveis
        e. constrói a coluna via o tipo resolvido
    5. Remove colunas ocultas
    6. Reordena pela `column_order` da política, se houver
    7. Substitui resultado vazio por uma coluna de índice sintética

Princípios fundamentais:
    - Função pura sobre (schema, config, política): sem estado global
    - Nenhuma condição é fatal: o resultado é sempre renderizável
    - Cada etapa produz novos snapshots imutáveis
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Sequence

from column_resolver.core.config.hashing import compute_config_hash
from column_resolver.core.context import LoadContext

from .apply import apply_column_config
from .kinds import BaseColumn, ObjectColumn
from .registry import ColumnTypeRegistry, get_column_type
from .schema import get_all_columns_from_dataframe, get_empty_index_column
from .types import ColumnConfig, ColumnConfigMapping, ColumnProps, WidgetPolicy


EDITABLE_ICON = "editable"
# Profundidade máxima de aninhamento aceita em um registro de override
MAX_CONFIG_DEPTH = 64


def parse_column_config(
    raw_config: Optional[str],
    ctx: Optional[LoadContext] = None,
) -> ColumnConfigMapping:
    """
    Desserializa o blob de configuração de colunas.

    - None ou string vazia → mapeamento vazio (sem log)
    - JSON inválido ou root que não é objeto → mapeamento vazio, erro registrado
    - registro individual que não é objeto, ou aninhado além de
      `MAX_CONFIG_DEPTH` → registro descartado, erro registrado
    """
    if not raw_config:
        return {}

    try:
        parsed = json.loads(raw_config)
        if not isinstance(parsed, dict):
            raise TypeError(
                f"Column config root must be a JSON object, got: {type(parsed).__name__}"
            )
    except (TypeError, ValueError, RecursionError) as e:
        if ctx is not None:
            ctx.log_error(step_id="columns.config", error=e, message="invalid column config")
        return {}

    mapping: ColumnConfigMapping = {}
    for key, record in parsed.items():
        try:
            if _nesting_depth(record) > MAX_CONFIG_DEPTH:
                raise ValueError(f"Column config nested deeper than {MAX_CONFIG_DEPTH} levels")
            mapping[str(key)] = ColumnConfig.from_dict(record)
        except (TypeError, ValueError) as e:
            if ctx is not None:
                ctx.log_error(
                    step_id="columns.config",
                    error=e,
                    message=f"invalid column config for key: {key}",
                )
    return mapping


def enforce_editing_policy(
    column: ColumnProps,
    policy: WidgetPolicy,
    is_editable_type: bool,
) -> ColumnProps:
    """Aplica a política de edição do widget (etapas 4c e 4d)."""
    if policy.is_read_only or policy.disabled or not is_editable_type:
        column = column.with_updates(is_editable=False)

    if not policy.is_read_only and column.is_editable:
        column = column.with_updates(icon=EDITABLE_ICON)

    return column


def reorder_columns(
    columns: Sequence[BaseColumn],
    column_order: Optional[Sequence[str]],
) -> List[BaseColumn]:
    """
    Reordena colunas pela ordem explícita configurada.

    Colunas de índice vêm primeiro, em sua ordem relativa original; em seguida
    as colunas não-índice na ordem de `column_order`. Nomes que casam primeiro
    com uma coluna de índice são ignorados, e colunas ausentes da ordem são
    descartadas. Sem ordem configurada, a lista é mantida.
    """
    if not column_order:
        return list(columns)

    ordered = [c for c in columns if c.is_index]
    for name in column_order:
        match = next((c for c in columns if c.name == name), None)
        if match is not None and not match.is_index:
            ordered.append(match)
    return ordered


def load_columns(
    table: Any,
    raw_config: Optional[str] = None,
    policy: Optional[WidgetPolicy] = None,
    ctx: Optional[LoadContext] = None,
    registry: Optional[ColumnTypeRegistry] = None,
) -> List[BaseColumn]:
    """
    Carrega e configura todas as colunas do grid a partir do schema.

    Args:
        table: DataFrame pandas (ou estrutura aceita por `pd.DataFrame`).
        raw_config: Blob JSON chave → override (opcional, tolerante a erros).
        policy: Política do widget (default: `WidgetPolicy()`).
        ctx: Contexto de eventos (um novo é criado se omitido).
        registry: Catálogo de tipos (default: `ColumnTypeRegistry.v1()`).

    Returns:
        List[BaseColumn]: Colunas finais, ordenadas e nunca vazias.
    """
    policy = policy if policy is not None else WidgetPolicy()
    ctx = ctx if ctx is not None else LoadContext()
    registry = registry if registry is not None else ColumnTypeRegistry.v1()

    column_config_mapping = parse_column_config(raw_config, ctx)
    stretch_columns = policy.stretch_columns

    configured: List[BaseColumn] = []
    for column in get_all_columns_from_dataframe(table):
        updated = apply_column_config(column, column_config_mapping).with_updates(
            is_stretched=stretch_columns
        )
        column_type = get_column_type(updated, registry=registry, ctx=ctx)
        updated = enforce_editing_policy(updated, policy, column_type.is_editable_type)
        configured.append(column_type.build(updated))

    visible = [c for c in configured if not c.is_hidden]
    ordered = reorder_columns(visible, policy.column_order)

    # Sem colunas o grid não renderiza: usa um índice vazio sintético.
    columns: List[BaseColumn] = ordered if ordered else [ObjectColumn(get_empty_index_column())]

    ctx.log(
        step_id="columns.load",
        level="info",
        message="columns resolved",
        columns=len(configured),
        visible=len(visible),
        returned=len(columns),
        config_hash=compute_config_hash(_hashable_mapping(column_config_mapping)),
    )
    return columns


def _hashable_mapping(mapping: ColumnConfigMapping) -> Dict[str, Any]:
    return {key: config.to_dict() for key, config in mapping.items()}


def _nesting_depth(value: Any) -> int:
    """Profundidade de aninhamento de dicts/listas, calculada sem recursão."""
    depth = 0
    stack = [(value, 0)]
    while stack:
        node, level = stack.pop()
        if isinstance(node, dict):
            children = list(node.values())
        elif isinstance(node, list):
            children = node
        else:
            continue
        depth = max(depth, level + 1)
        stack.extend((child, level + 1) for child in children)
    return depth
