# src/stagegraph/core/config/hashing.py
"""
Hashing canônico de estruturas JSON-compatíveis.

Usado tanto para a configuração efetiva quanto para o fingerprint de
grafos (`stagegraph.core.graph.describe`).

Política de hashing (v1):
    - Serialização JSON canônica
    - Ordenação estável de chaves
    - Separadores compactos
    - Codificação UTF-8
    - Algoritmo SHA-256
"""

import hashlib
import json
from typing import Any, Dict


def canonical_json(data: Dict[str, Any]) -> str:
    """Serializa `data` em JSON canônico (chaves ordenadas, sem espaços)."""
    return json.dumps(
        data,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Gera um hash determinístico da configuração efetiva.

    Invariantes:
        - O valor retornado é uma string hexadecimal de 64 caracteres
        - Configurações estruturalmente equivalentes produzem o mesmo hash
        - Nenhuma mutação ocorre sobre o input

    Args:
        config (Dict[str, Any]): Configuração efetiva.

    Returns:
        str: Hash SHA-256 hexadecimal da configuração.

    Raises:
        TypeError: Se o objeto fornecido não for um dicionário.
    """
    if not isinstance(config, dict):
        raise TypeError(
            f"Config para hashing deve ser dict, recebido: {type(config).__name__}"
        )

    return hashlib.sha256(canonical_json(config).encode("utf-8")).hexdigest()
