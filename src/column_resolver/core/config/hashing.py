# src/column_resolver/core/config/hashing.py
"""
Hashing canônico de configuração de colunas.

Gera um identificador determinístico para o mapeamento de configuração
efetivamente aplicado em uma passagem de resolução, permitindo associar
o resultado do loader à configuração que o produziu (eventos do
`LoadContext`, testes de regressão, cache do chamador).

Política de hashing (v1):
    - Serialização JSON canônica (chaves ordenadas, separadores compactos)
    - Codificação UTF-8
    - Algoritmo SHA-256

Invariantes:
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres
    - Mapeamentos estruturalmente equivalentes produzem o mesmo hash
"""

import hashlib
import json
from typing import Any, Dict


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Gera um hash determinístico de um mapeamento de configuração.

    Valores não serializáveis em JSON são convertidos via `str`, de forma
    que o hash nunca falha para configurações vindas de blobs JSON ou de
    arquivos YAML.

    Args:
        config (Dict[str, Any]): Configuração (ou mapeamento de colunas) efetiva.

    Returns:
        str: Hash SHA-256 hexadecimal da configuração.

    Raises:
        TypeError: Se o objeto fornecido não for um dicionário.
    """
    if not isinstance(config, dict):
        raise TypeError(
            f"Config para hashing deve ser dict, recebido: {type(config).__name__}"
        )

    canonical_json = json.dumps(
        config,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
