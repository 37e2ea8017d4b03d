# src/column_resolver/core/config/loader.py
"""
Loader de arquivos de grid config.

Um grid config descreve, de forma declarativa, a política do widget e os
overrides de colunas de um grid:

    policy:
      use_container_width: true
      editing_mode: fixed
      column_order: [price, name]
    columns:
      index:
        label: "#"
      price:
        width: small
        type_config:
          format: "%.2f"

A configuração é resolvida a partir de:
    - um arquivo de defaults (obrigatório)
    - um arquivo local de overrides (opcional)

Princípios fundamentais:
    - Erros estruturais de arquivo são falhas explícitas (exceções tipadas)
    - O override local sempre tem prioridade sobre defaults
    - A mesma entrada sempre produz a mesma configuração final

Limites explícitos:
    - Não interpreta os overrides de coluna (isso é papel do loader de colunas)
    - Não persiste configuração
"""

from pathlib import Path
from typing import Any, Dict, Optional
import json

import yaml  # PyYAML

from .errors import (
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .merge import deep_merge


GRID_CONFIG_SECTIONS = ("policy", "columns")


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de configuração e valida sua estrutura básica.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)

    Arquivos vazios são interpretados como dicionários vazios.

    Raises:
        DefaultsNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    if not path.exists():
        raise DefaultsNotFoundError(f"Arquivo de defaults não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def _validate_sections(config: Dict[str, Any]) -> Dict[str, Any]:
    for section in GRID_CONFIG_SECTIONS:
        value = config.get(section)
        if value is None:
            config[section] = {}
        elif not isinstance(value, dict):
            raise InvalidConfigRootTypeError(
                f"Seção '{section}' deve ser dict, recebido: {type(value).__name__}"
            )
    return config


def load_grid_config(
    *,
    defaults_path: str,
    local_path: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Carrega e resolve o grid config efetivo.

    Política de resolução:
        - O arquivo de defaults é obrigatório
        - O arquivo local é opcional e ignorado se não existir
        - Quando presente, o local é aplicado via `deep_merge` estrito

    Args:
        defaults_path (str): Caminho para o arquivo de configuração base.
        local_path (Optional[str]): Caminho opcional para overrides locais.

    Returns:
        Dict[str, Any]: Configuração final, sempre com as seções
        `policy` e `columns` presentes (como dicts).

    Raises:
        DefaultsNotFoundError: Se o arquivo de defaults não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o root ou uma seção não for dicionário.
        ConfigTypeConflictError: Se ocorrer conflito estrutural durante o merge.
    """

    defaults = _load_file(Path(defaults_path))

    effective = defaults

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            local = _load_file(local_file)
            effective = deep_merge(defaults, local)

    return _validate_sections(dict(effective))
