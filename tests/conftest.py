"""
Fixtures compartilhados para testes do column_resolver.

Este módulo define fixtures reutilizáveis que fornecem:
- DataFrames pequenos e determinísticos (índice simples, multi-índice)
- contexto de eventos isolado (LoadContext)
- políticas de widget prontas para os cenários mais comuns

Invariantes:
    - Nenhuma fixture realiza I/O
    - Todas as fixtures retornam objetos novos a cada teste
"""

import pandas as pd
import pytest


@pytest.fixture
def simple_df() -> pd.DataFrame:
    """
    DataFrame com índice nomeado e três colunas de tipos distintos.

    Posições ordinais resultantes:
        0 → índice "id" (integer)
        1 → "A" (integer)
        2 → "B" (string)
        3 → "C" (float)
    """
    return pd.DataFrame(
        {
            "A": [1, 2, 3],
            "B": ["x", "y", "z"],
            "C": [1.5, 2.5, None],
        },
        index=pd.Index([10, 20, 30], name="id"),
    )


@pytest.fixture
def multi_index_df() -> pd.DataFrame:
    """DataFrame com índice de dois níveis e uma coluna de dados."""
    index = pd.MultiIndex.from_tuples(
        [("a", 1), ("a", 2), ("b", 1)],
        names=["group", "item"],
    )
    return pd.DataFrame({"value": [0.1, 0.2, 0.3]}, index=index)


@pytest.fixture
def ctx():
    """LoadContext novo e isolado para inspeção de eventos."""
    from column_resolver.core.context import LoadContext

    return LoadContext(load_id="load-test-001", meta={"source": "pytest"})


@pytest.fixture
def editable_policy():
    """Política com edição habilitada (modo FIXED) e widget ativo."""
    from column_resolver.core.columns.types import EditingMode, WidgetPolicy

    return WidgetPolicy(editing_mode=EditingMode.FIXED)
