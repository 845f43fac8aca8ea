# src/stagegraph/core/config/__init__.py
"""
Camada de configuração do stagegraph.

Responsabilidades do pacote:
    - Carregamento de arquivos de configuração (defaults + overrides locais)
    - Resolução de configuração final via deep-merge determinístico
    - Hash canônico para rastreabilidade
    - Interpretação tipada da seção `graph` (`GraphSettings`)

Limites explícitos:
    - Não constrói grafos
    - Não interage com o engine de execução
"""

from .errors import (
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidGraphSettingsError,
    UnsupportedConfigFormatError,
)
from .hashing import canonical_json, compute_config_hash
from .loader import load_config
from .merge import deep_merge
from .settings import GraphSettings

__all__ = [
    "ConfigError",
    "ConfigTypeConflictError",
    "DefaultsNotFoundError",
    "InvalidConfigRootTypeError",
    "InvalidGraphSettingsError",
    "UnsupportedConfigFormatError",
    "GraphSettings",
    "canonical_json",
    "compute_config_hash",
    "deep_merge",
    "load_config",
]
