# src/column_resolver/core/columns/width.py
"""Resolução do especificador de largura de coluna para pixels."""

from __future__ import annotations

from typing import Dict, Optional, Union

from .types import ColumnWidth


# Larguras pré-definidas configuráveis pelo usuário
COLUMN_WIDTH_MAPPING: Dict[str, int] = {
    "small": 75,
    "medium": 200,
    "large": 400,
}


def parse_width_config(width: Optional[ColumnWidth]) -> Optional[Union[int, float]]:
    """
    Converte o `width` de um override para largura em pixels.

    - None → None (sem override)
    - número → repassado sem validação de limites
    - "small" | "medium" | "large" → 75 | 200 | 400
    - qualquer outro valor → None (ignorado silenciosamente)
    """
    if width is None or isinstance(width, bool):
        return None

    if isinstance(width, (int, float)):
        return width

    if isinstance(width, str) and width in COLUMN_WIDTH_MAPPING:
        return COLUMN_WIDTH_MAPPING[width]

    return None
