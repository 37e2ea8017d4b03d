# src/column_resolver/core/columns/__init__.py
from .apply import apply_column_config, merge_column_config
from .kinds import BaseColumn, Cell, ObjectColumn
from .loader import load_columns, parse_column_config, reorder_columns
from .lookup import COLUMN_POSITION_PREFIX, INDEX_IDENTIFIER, get_column_config
from .registry import ColumnTypeRegistry, ColumnTypeSpec, get_column_type
from .schema import get_all_columns_from_dataframe, get_empty_index_column, get_native_type
from .types import ColumnConfig, ColumnProps, EditingMode, WidgetPolicy
from .width import COLUMN_WIDTH_MAPPING, parse_width_config

__all__ = [
    "COLUMN_POSITION_PREFIX",
    "COLUMN_WIDTH_MAPPING",
    "INDEX_IDENTIFIER",
    "BaseColumn",
    "Cell",
    "ColumnConfig",
    "ColumnProps",
    "ColumnTypeRegistry",
    "ColumnTypeSpec",
    "EditingMode",
    "ObjectColumn",
    "WidgetPolicy",
    "apply_column_config",
    "get_all_columns_from_dataframe",
    "get_column_config",
    "get_column_type",
    "get_empty_index_column",
    "get_native_type",
    "load_columns",
    "merge_column_config",
    "parse_column_config",
    "parse_width_config",
    "reorder_columns",
]
