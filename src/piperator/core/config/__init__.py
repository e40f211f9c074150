# src/piperator/core/config/__init__.py

"""
Camada de configuração do Piperator.

Carrega, mescla e identifica configurações usadas na montagem
declarativa de pipelines (`piperator.core.assembly`).

Responsabilidades do pacote:
    - Carregamento de defaults + overrides locais (YAML ou JSON)
    - Deep-merge determinístico
    - Hash canônico para rastreabilidade

Limites explícitos:
    - Não executa pipeline
    - Não valida semântica da seção `pipeline`
"""

from .errors import (
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash
from .loader import load_config
from .merge import deep_merge

__all__ = [
    "ConfigError",
    "ConfigTypeConflictError",
    "DefaultsNotFoundError",
    "InvalidConfigRootTypeError",
    "UnsupportedConfigFormatError",
    "compute_config_hash",
    "load_config",
    "deep_merge",
]
