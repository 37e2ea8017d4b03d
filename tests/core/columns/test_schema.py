# tests/core/columns/test_schema.py
"""
Testes da extração de descritores base a partir de DataFrames pandas.
"""

from datetime import date, datetime, time
from decimal import Decimal

import pandas as pd
import pytest

from column_resolver.core.columns.schema import (
    get_all_columns_from_dataframe,
    get_empty_index_column,
    get_native_type,
    native_type_for_values,
)


def test_index_columns_come_first_with_contiguous_positions(simple_df):
    columns = get_all_columns_from_dataframe(simple_df)

    assert [c.name for c in columns] == ["id", "A", "B", "C"]
    assert [c.index_number for c in columns] == [0, 1, 2, 3]
    assert [c.is_index for c in columns] == [True, False, False, False]


def test_base_descriptor_defaults(simple_df):
    index, a, b, c = get_all_columns_from_dataframe(simple_df)

    assert index.is_editable is False
    assert a.is_editable is True
    assert a.title == "A"
    assert a.is_hidden is False
    assert a.is_stretched is False
    assert a.width is None
    assert (index.native_type, a.native_type, b.native_type, c.native_type) == (
        "integer",
        "integer",
        "string",
        "float",
    )
    assert a.dtype == "int64"


def test_multi_index_yields_one_column_per_level(multi_index_df):
    columns = get_all_columns_from_dataframe(multi_index_df)

    assert [(c.name, c.is_index, c.index_number) for c in columns] == [
        ("group", True, 0),
        ("item", True, 1),
        ("value", False, 2),
    ]
    assert columns[0].native_type == "string"
    assert columns[1].native_type == "integer"


def test_unnamed_index_and_non_string_column_names():
    df = pd.DataFrame({0: [1], 1: ["a"]})
    columns = get_all_columns_from_dataframe(df)
    assert [c.name for c in columns] == ["", "0", "1"]


def test_categorical_column_carries_options():
    df = pd.DataFrame({"status": pd.Categorical(["open", "closed"], categories=["open", "closed"])})
    status = get_all_columns_from_dataframe(df)[1]

    assert status.native_type == "categorical"
    assert dict(status.column_type_options) == {"options": ["open", "closed"]}


def test_accepts_row_records():
    columns = get_all_columns_from_dataframe([{"x": 1, "y": "a"}, {"x": 2, "y": "b"}])
    assert [c.name for c in columns] == ["", "x", "y"]


@pytest.mark.parametrize(
    "values, expected",
    [
        (pd.Series([True, False]), "boolean"),
        (pd.Series([1, 2], dtype="Int64"), "integer"),
        (pd.Series([1.0, None]), "float"),
        (pd.Series(pd.to_datetime(["2026-01-01"])), "datetime"),
        (pd.Series(pd.to_timedelta(["1 day"])), "timedelta"),
        (pd.Series(["a", None], dtype="string"), "string"),
        (pd.Series([None, "a"], dtype=object), "string"),
        (pd.Series([Decimal("1.5")], dtype=object), "decimal"),
        (pd.Series([date(2026, 1, 1)], dtype=object), "date"),
        (pd.Series([datetime(2026, 1, 1, 8)], dtype=object), "datetime"),
        (pd.Series([time(8, 30)], dtype=object), "time"),
        (pd.Series([[1, 2], [3]], dtype=object), "list"),
        (pd.Series([None, None], dtype=object), "empty"),
        (pd.Series([{"a": 1}], dtype=object), "object"),
    ],
)
def test_native_type_for_values(values, expected):
    assert native_type_for_values(values) == expected


def test_get_native_type_by_position(simple_df):
    assert get_native_type(simple_df, 0) == "integer"
    assert get_native_type(simple_df, 2) == "string"
    with pytest.raises(IndexError):
        get_native_type(simple_df, 4)


def test_schema_extraction_does_not_mutate(simple_df):
    before = simple_df.copy()
    get_all_columns_from_dataframe(simple_df)
    pd.testing.assert_frame_equal(simple_df, before)


def test_empty_index_column():
    column = get_empty_index_column()
    assert column.name == ""
    assert column.index_number == 0
    assert column.is_index is True
    assert column.is_editable is False
    assert column.native_type == "object"
