# tests/core/columns/test_column_loader.py
"""
Testes do loader de colunas (load_columns) e de suas etapas auxiliares.

Os testes asseguram que:
- blobs malformados degradam para configuração vazia, com erro registrado
- a política de edição do widget tem precedência absoluta sobre overrides
- colunas ocultas são removidas e a ordem explícita é autoritativa
- o resultado nunca é vazio
"""

import json

import pandas as pd
import pytest

from column_resolver.core.columns.kinds import (
    NumberColumn,
    ObjectColumn,
    SelectboxColumn,
    TextColumn,
)
from column_resolver.core.columns.loader import (
    EDITABLE_ICON,
    enforce_editing_policy,
    load_columns,
    parse_column_config,
    reorder_columns,
)
from column_resolver.core.columns.schema import get_all_columns_from_dataframe
from column_resolver.core.columns.types import (
    ColumnConfig,
    ColumnProps,
    EditingMode,
    WidgetPolicy,
)
from column_resolver.core.config.marshall import marshall_column_config


# -----------------------------
# parse_column_config
# -----------------------------
def test_parse_valid_blob(ctx):
    raw = json.dumps({"A": {"label": "a", "width": "small"}, "_pos:0": {"hidden": True}})
    mapping = parse_column_config(raw, ctx)

    assert mapping == {
        "A": ColumnConfig(label="a", width="small"),
        "_pos:0": ColumnConfig(hidden=True),
    }
    assert ctx.events == []


@pytest.mark.parametrize("raw", [None, ""])
def test_parse_absent_blob_is_silent(ctx, raw):
    assert parse_column_config(raw, ctx) == {}
    assert ctx.events == []


@pytest.mark.parametrize("raw", ["not json", "{", "[1, 2]", "42", "null"])
def test_parse_malformed_blob_logs_error(ctx, raw):
    assert parse_column_config(raw, ctx) == {}
    errors = ctx.events_at("error")
    assert len(errors) == 1
    assert errors[0]["step_id"] == "columns.config"


def test_parse_deeply_nested_blob_logs_error(ctx):
    assert parse_column_config("[" * 100000, ctx) == {}
    errors = ctx.events_at("error")
    assert len(errors) == 1
    assert errors[0]["error_type"] == "RecursionError"


def test_parse_drops_records_nested_too_deep(ctx):
    depth = 500
    nested = '{"k": ' * depth + "1" + "}" * depth
    raw = '{"A": {"type_config": ' + nested + '}, "B": {"label": "b"}}'
    mapping = parse_column_config(raw, ctx)

    assert mapping == {"B": ColumnConfig(label="b")}
    assert len(ctx.events_at("error")) == 1


def test_deeply_nested_blob_does_not_break_load(simple_df, ctx):
    baseline = load_columns(simple_df, None)
    degraded = load_columns(simple_df, "[" * 100000, None, ctx)

    assert [c.props for c in degraded] == [c.props for c in baseline]


def test_parse_drops_only_malformed_records(ctx):
    raw = json.dumps({"A": {"label": "a"}, "B": "oops"})
    mapping = parse_column_config(raw, ctx)

    assert list(mapping) == ["A"]
    assert len(ctx.events_at("error")) == 1


# -----------------------------
# enforce_editing_policy
# -----------------------------
def _props(**overrides) -> ColumnProps:
    base = dict(name="A", index_number=1, is_editable=True)
    base.update(overrides)
    return ColumnProps(**base)


def test_read_only_policy_wins_over_override():
    out = enforce_editing_policy(_props(), WidgetPolicy(editing_mode=EditingMode.READ_ONLY), True)
    assert out.is_editable is False
    assert out.icon is None


def test_disabled_widget_forces_non_editable():
    policy = WidgetPolicy(editing_mode=EditingMode.FIXED, disabled=True)
    out = enforce_editing_policy(_props(), policy, True)
    assert out.is_editable is False
    assert out.icon is None


def test_non_editable_type_forces_non_editable(editable_policy):
    out = enforce_editing_policy(_props(), editable_policy, False)
    assert out.is_editable is False


def test_editable_column_gets_icon(editable_policy):
    out = enforce_editing_policy(_props(), editable_policy, True)
    assert out.is_editable is True
    assert out.icon == EDITABLE_ICON


# -----------------------------
# reorder_columns
# -----------------------------
def _built(df, **policy):
    return load_columns(df, None, WidgetPolicy(**policy))


def test_reorder_puts_index_first_and_drops_unlisted(simple_df):
    columns = _built(simple_df)
    ordered = reorder_columns(columns, ["C", "A"])
    assert [c.name for c in ordered] == ["id", "C", "A"]


def test_reorder_without_order_keeps_list(simple_df):
    columns = _built(simple_df)
    assert reorder_columns(columns, None) == columns
    assert reorder_columns(columns, []) == columns


def test_reorder_skips_unknown_names_and_index_names(simple_df):
    columns = _built(simple_df)
    ordered = reorder_columns(columns, ["missing", "id", "B"])
    assert [c.name for c in ordered] == ["id", "B"]


def test_reorder_name_shared_with_index_is_skipped():
    df = pd.DataFrame({"A": [1], "B": [2]}, index=pd.Index([0], name="A"))
    ordered = reorder_columns(_built(df), ["A", "B"])

    assert [(c.name, c.is_index) for c in ordered] == [("A", True), ("B", False)]


# -----------------------------
# load_columns
# -----------------------------
def test_load_without_config_reproduces_schema(simple_df, ctx):
    columns = load_columns(simple_df, None, WidgetPolicy(use_container_width=True), ctx)
    base = get_all_columns_from_dataframe(simple_df)

    assert [c.name for c in columns] == ["id", "A", "B", "C"]
    for column, expected in zip(columns, base):
        # READ_ONLY por padrão: edição desativada; demais campos idênticos
        assert column.props == expected.with_updates(is_stretched=True, is_editable=False)


def test_load_resolves_types_from_schema(simple_df):
    columns = load_columns(simple_df)
    assert [type(c) for c in columns] == [NumberColumn, NumberColumn, TextColumn, NumberColumn]


def test_malformed_blob_equals_no_config(simple_df, ctx):
    policy = WidgetPolicy(editing_mode=EditingMode.DYNAMIC)
    baseline = load_columns(simple_df, None, policy)
    degraded = load_columns(simple_df, "this is not json", policy, ctx)

    assert [c.props for c in degraded] == [c.props for c in baseline]
    assert len(ctx.events_at("error")) == 1


def test_stretch_from_explicit_width(simple_df):
    assert all(c.is_stretched for c in _built(simple_df, width=600))
    assert not any(c.is_stretched for c in _built(simple_df, width=0))
    assert not any(c.is_stretched for c in _built(simple_df))


def test_override_applied_by_name_position_and_index(simple_df):
    raw = marshall_column_config(
        {
            "index": {"label": "#"},
            "A": {"label": "Alpha", "width": "medium"},
            2: {"help": "second data column"},
        }
    )
    columns = load_columns(simple_df, raw, WidgetPolicy())
    by_name = {c.name: c for c in columns}

    assert by_name["id"].title == "#"
    assert by_name["A"].title == "Alpha"
    assert by_name["A"].width == 200
    assert by_name["B"].help == "second data column"
    assert by_name["C"].title == "C"


def test_read_only_policy_beats_disabled_false(simple_df):
    raw = json.dumps({"A": {"disabled": False}})
    columns = load_columns(simple_df, raw, WidgetPolicy(editing_mode=EditingMode.READ_ONLY))
    a = next(c for c in columns if c.name == "A")

    assert a.is_editable is False
    assert a.icon is None


def test_editable_icon_and_index_not_editable(simple_df, editable_policy):
    columns = load_columns(simple_df, None, editable_policy)
    by_name = {c.name: c for c in columns}

    assert by_name["id"].is_editable is False
    assert by_name["id"].icon is None
    assert by_name["A"].is_editable is True
    assert by_name["A"].icon == EDITABLE_ICON


def test_disabled_override_removes_icon(simple_df, editable_policy):
    raw = json.dumps({"B": {"disabled": True}})
    b = next(c for c in load_columns(simple_df, raw, editable_policy) if c.name == "B")
    assert b.is_editable is False
    assert b.icon is None


def test_index_can_be_made_editable_by_override(simple_df, editable_policy):
    raw = json.dumps({"index": {"disabled": False}})
    index = load_columns(simple_df, raw, editable_policy)[0]
    assert index.is_index is True
    assert index.is_editable is True


def test_explicit_type_changes_column_class_and_editability(simple_df, editable_policy, ctx):
    raw = json.dumps(
        {
            "A": {"type_config": {"type": "object"}},
            "B": {"type_config": {"type": "selectbox", "options": ["x", "y"]}},
            "C": {"type_config": {"type": "sparkline"}},
        }
    )
    by_name = {c.name: c for c in load_columns(simple_df, raw, editable_policy, ctx)}

    assert isinstance(by_name["A"], ObjectColumn)
    assert by_name["A"].is_editable is False
    assert isinstance(by_name["B"], SelectboxColumn)
    assert by_name["B"].options == ["x", "y"]
    assert isinstance(by_name["C"], NumberColumn)
    assert len(ctx.warnings["columns.type"]) == 1


def test_hidden_columns_are_filtered(simple_df):
    raw = json.dumps({"B": {"hidden": True}, "index": {"hidden": True}})
    columns = load_columns(simple_df, raw)
    assert [c.name for c in columns] == ["A", "C"]


def test_column_order_from_policy(simple_df):
    columns = load_columns(simple_df, None, WidgetPolicy(column_order=["C", "A"]))
    assert [c.name for c in columns] == ["id", "C", "A"]


def test_column_order_applies_after_hiding(simple_df):
    raw = json.dumps({"C": {"hidden": True}})
    columns = load_columns(simple_df, raw, WidgetPolicy(column_order=["C", "B"]))
    assert [c.name for c in columns] == ["id", "B"]


def test_all_hidden_yields_synthetic_index_column(ctx):
    df = pd.DataFrame({"only": [1, 2]})
    raw = json.dumps({"only": {"hidden": True}, "index": {"hidden": True}})

    columns = load_columns(df, raw, WidgetPolicy(), ctx)

    assert len(columns) == 1
    fallback = columns[0]
    assert isinstance(fallback, ObjectColumn)
    assert fallback.is_index is True
    assert fallback.name == ""
    assert fallback.is_editable is False
    assert ctx.events_at("error") == []


def test_order_with_no_matches_and_no_index_yields_fallback():
    df = pd.DataFrame({"x": [1]})
    raw = json.dumps({"index": {"hidden": True}})
    columns = load_columns(df, raw, WidgetPolicy(column_order=["nope"]))
    assert len(columns) == 1
    assert columns[0].is_index is True


def test_multi_index_shares_index_config(multi_index_df):
    raw = json.dumps({"index": {"width": "small"}})
    columns = load_columns(multi_index_df, raw)
    assert [(c.name, c.width) for c in columns] == [
        ("group", 75),
        ("item", 75),
        ("value", None),
    ]


def test_load_logs_summary_event_with_config_hash(simple_df, ctx):
    raw = json.dumps({"B": {"hidden": True}})
    load_columns(simple_df, raw, WidgetPolicy(), ctx)

    info = ctx.events_at("info")
    assert len(info) == 1
    assert info[0]["step_id"] == "columns.load"
    assert info[0]["columns"] == 4
    assert info[0]["visible"] == 3
    assert info[0]["returned"] == 3
    assert len(info[0]["config_hash"]) == 64


def test_load_is_deterministic(simple_df):
    raw = json.dumps({"A": {"label": "Alpha"}})
    policy = WidgetPolicy(editing_mode=EditingMode.FIXED, column_order=["A", "B"])
    first = load_columns(simple_df, raw, policy)
    second = load_columns(simple_df, raw, policy)
    assert [c.props for c in first] == [c.props for c in second]


def test_load_accepts_grid_config_policy_section(simple_df):
    policy = WidgetPolicy.from_config(
        {"editing_mode": "DYNAMIC", "use_container_width": True, "column_order": ["B"]}
    )
    columns = load_columns(simple_df, None, policy)

    assert policy.editing_mode is EditingMode.DYNAMIC
    assert [c.name for c in columns] == ["id", "B"]
    assert columns[1].is_stretched is True
    assert columns[1].is_editable is True
