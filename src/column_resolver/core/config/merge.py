# src/column_resolver/core/config/merge.py
"""
Utilitário canônico de deep-merge de configuração.

Este módulo implementa a política de deep-merge utilizada em dois pontos
do column_resolver:

    - resolução de arquivos de grid config (defaults + local), em modo estrito
    - aplicação de `type_config` sobre as opções de tipo derivadas do schema,
      em modo leniente

Política de merge (v1):
    - dict → merge recursivo por chave
    - list → sobrescrita total (sem merge elemento a elemento)
    - escalar → sobrescrita direta
    - override `None` → ignorado (nunca apaga o valor base)
    - conflito de tipos → erro estrutural (estrito) ou sobrescrita (leniente)

Invariantes:
    - A mesma entrada sempre produz a mesma saída
    - Chaves não sobrescritas são preservadas
    - Nenhum input é mutado durante o processo
"""

from copy import deepcopy
from typing import Any, Dict, Mapping

from .errors import ConfigTypeConflictError


def deep_merge(
    base: Mapping[str, Any],
    override: Mapping[str, Any],
    *,
    strict: bool = True,
) -> Dict[str, Any]:
    """
    Realiza um deep-merge determinístico entre dois mapeamentos.

    Combina uma configuração base com overrides explícitos, produzindo
    um novo dicionário sem mutar nenhum dos inputs.

    Decisões arquiteturais:
        - Valores `None` no override são tratados como ausentes
        - No modo estrito, conflitos de tipo interrompem o merge
        - No modo leniente, o override sempre vence em caso de conflito
        - Listas do override substituem as da base por inteiro; não há
          merge por índice como no `merge` do lodash

    Args:
        base (Mapping[str, Any]): Configuração base (ex.: defaults, opções do schema).
        override (Mapping[str, Any]): Overrides explícitos.
        strict (bool): Se True, conflitos de tipo levantam erro.

    Returns:
        Dict[str, Any]: Novo dicionário resultante do deep-merge.

    Raises:
        ConfigTypeConflictError: Em modo estrito, se base e override
            possuírem tipos incompatíveis para a mesma chave (ou no root).
    """

    if not isinstance(base, Mapping) or not isinstance(override, Mapping):
        if strict:
            raise ConfigTypeConflictError(
                f"Deep-merge requer dicts no nível raiz, recebido: "
                f"{type(base).__name__} vs {type(override).__name__}"
            )
        if isinstance(override, Mapping):
            return deepcopy(dict(override))
        return deepcopy(dict(base)) if isinstance(base, Mapping) else {}

    result: Dict[str, Any] = deepcopy(dict(base))

    for key, override_value in override.items():
        if override_value is None:
            continue

        if key not in result or result[key] is None:
            result[key] = deepcopy(override_value)
            continue

        base_value = result[key]

        # dict -> merge recursivo
        if isinstance(base_value, Mapping) and isinstance(override_value, Mapping):
            result[key] = deep_merge(base_value, override_value, strict=strict)
            continue

        # list -> sobrescrita total
        if isinstance(override_value, list):
            result[key] = deepcopy(override_value)
            continue

        if strict and not _compatible(base_value, override_value):
            raise ConfigTypeConflictError(
                f"Conflito de tipo na chave '{key}': "
                f"{type(base_value).__name__} vs {type(override_value).__name__}"
            )

        # escalar -> sobrescrita
        result[key] = deepcopy(override_value)

    return result


def _compatible(base_value: Any, override_value: Any) -> bool:
    # int e float são intercambiáveis (ex.: width: 100 -> 120.5)
    numeric = (int, float)
    if (
        isinstance(base_value, numeric)
        and isinstance(override_value, numeric)
        and not isinstance(base_value, bool)
        and not isinstance(override_value, bool)
    ):
        return True
    return type(base_value) is type(override_value)
