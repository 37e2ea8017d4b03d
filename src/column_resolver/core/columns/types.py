# src/column_resolver/core/columns/types.py
"""
Tipos canônicos da resolução de colunas.

Este módulo define as estruturas imutáveis trocadas entre os componentes
do resolver:

    - ColumnProps   → descritor de coluna (antes e depois da configuração)
    - ColumnConfig  → registro de override esparso escrito pelo usuário
    - EditingMode   → modo de edição do widget
    - WidgetPolicy  → política global do widget (read-only, disabled, ordem)

Princípios fundamentais:
    - Todos os tipos são frozen: cada etapa do pipeline produz um novo snapshot
    - Campos ausentes de um override são representados por `None`
    - Nenhuma lógica de resolução vive neste módulo

Limites explícitos:
    - Não interpreta o blob de configuração
    - Não infere tipos a partir do schema
    - Não constrói colunas
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Union


ColumnWidth = Union[str, int, float]

# Campos aceitos em um registro de override (nomes em snake_case, alinhados
# com o backend que serializa a configuração).
COLUMN_CONFIG_FIELDS: Tuple[str, ...] = (
    "label",
    "width",
    "help",
    "hidden",
    "disabled",
    "required",
    "default",
    "alignment",
    "type_config",
)


class EditingMode(str, Enum):
    """
    Modos de edição do widget de grid.

    - READ_ONLY: nenhuma coluna é editável, independente de overrides
    - FIXED: células editáveis, número de linhas fixo
    - DYNAMIC: células editáveis, linhas podem ser adicionadas/removidas
    """

    READ_ONLY = "read_only"
    FIXED = "fixed"
    DYNAMIC = "dynamic"


@dataclass(frozen=True)
class ColumnProps:
    """
    Descritor canônico de uma coluna.

    Existe exatamente um descritor por coluna do schema mais um por nível
    de índice. `index_number` é a posição ordinal original (contígua a
    partir de 0, índices primeiro) e nunca muda com reordenações.

    Campos:
        - name: identificador da coluna (`""` para índices sem nome)
        - index_number: posição ordinal no schema original
        - is_index: True para colunas que representam o índice de linhas
        - native_type: tag de tipo inferida do schema (fallback de tipo)
        - dtype: dtype pandas de origem (apenas informativo)
        - title: título exibido no cabeçalho
        - width: largura em pixels (None = automática)
        - help: texto de ajuda do cabeçalho
        - is_editable / is_hidden / is_required: flags de comportamento
        - default_value: valor padrão para novas linhas
        - content_alignment: "left" | "center" | "right"
        - column_type_options: opções livres do tipo de coluna (ex.: `type`, `options`)
        - is_stretched: se a coluna ocupa o espaço disponível
        - icon: tag de ícone do cabeçalho (ex.: "editable")

    Snapshots comparam por valor, mas não são hasháveis: `column_type_options`
    aceita valores arbitrários (listas, dicts).
    """

    name: str
    index_number: int
    is_index: bool = False
    native_type: str = "object"
    dtype: Optional[str] = None
    title: str = ""
    width: Optional[Union[int, float]] = None
    help: Optional[str] = None
    is_editable: bool = False
    is_hidden: bool = False
    is_required: bool = False
    default_value: Any = None
    content_alignment: Optional[str] = None
    column_type_options: Mapping[str, Any] = field(default_factory=dict)
    is_stretched: bool = False
    icon: Optional[str] = None

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        options = self.column_type_options or {}
        object.__setattr__(self, "column_type_options", MappingProxyType(dict(options)))

    def with_updates(self, **changes: Any) -> "ColumnProps":
        """Retorna um novo snapshot com os campos informados substituídos."""
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        out = {f.name: getattr(self, f.name) for f in fields(self)}
        out["column_type_options"] = dict(self.column_type_options)
        return out


@dataclass(frozen=True)
class ColumnConfig:
    """
    Registro de override esparso para uma coluna (ou papel de coluna).

    Todos os campos são opcionais; `None` significa "ausente" e nunca
    participa do merge.
    Não hashável, pelo mesmo motivo de `ColumnProps`.
    """

    label: Optional[str] = None
    width: Optional[ColumnWidth] = None
    help: Optional[str] = None
    hidden: Optional[bool] = None
    disabled: Optional[bool] = None
    required: Optional[bool] = None
    default: Any = None
    alignment: Optional[str] = None
    type_config: Optional[Mapping[str, Any]] = None

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if isinstance(self.type_config, Mapping):
            object.__setattr__(self, "type_config", MappingProxyType(dict(self.type_config)))

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "ColumnConfig":
        """Constrói o registro a partir de um dict; chaves desconhecidas são ignoradas."""
        if not isinstance(raw, Mapping):
            raise TypeError(f"Column config must be a mapping, got: {type(raw).__name__}")
        return cls(**{k: raw[k] for k in COLUMN_CONFIG_FIELDS if k in raw})

    def to_dict(self) -> Dict[str, Any]:
        """Retorna apenas os campos presentes (não-None)."""
        out: Dict[str, Any] = {}
        for name in COLUMN_CONFIG_FIELDS:
            value = getattr(self, name)
            if value is None:
                continue
            out[name] = dict(value) if isinstance(value, Mapping) else value
        return out


ColumnConfigMapping = Dict[str, ColumnConfig]


@dataclass(frozen=True)
class WidgetPolicy:
    """
    Política global do widget, aplicada a todas as colunas.

    Campos:
        - use_container_width: colunas esticam para a largura do container
        - width: largura explícita do widget (> 0 também estica as colunas)
        - editing_mode: modo de edição (READ_ONLY desativa toda edição)
        - disabled: widget desabilitado globalmente
        - column_order: ordem explícita de exibição (nomes de colunas não-índice)
    """

    use_container_width: bool = False
    width: Optional[Union[int, float]] = None
    editing_mode: EditingMode = EditingMode.READ_ONLY
    disabled: bool = False
    column_order: Optional[Tuple[str, ...]] = None

    def __post_init__(self) -> None:
        if not isinstance(self.editing_mode, EditingMode):
            object.__setattr__(self, "editing_mode", EditingMode(str(self.editing_mode).lower()))
        if self.column_order is not None:
            object.__setattr__(self, "column_order", tuple(str(c) for c in self.column_order))

    @property
    def is_read_only(self) -> bool:
        return self.editing_mode is EditingMode.READ_ONLY

    @property
    def stretch_columns(self) -> bool:
        return bool(self.use_container_width) or (
            self.width is not None and self.width > 0
        )

    @classmethod
    def from_config(cls, config: Optional[Mapping[str, Any]]) -> "WidgetPolicy":
        """
        Constrói a política a partir da seção `policy` de um grid config.

        Chaves ausentes assumem os defaults da dataclass.

        Raises:
            ValueError: Se `editing_mode` não for um modo conhecido.
        """
        if not config:
            return cls()
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config.items() if k in known and v is not None})
