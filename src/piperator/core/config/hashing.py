# src/piperator/core/config/hashing.py
"""
Identidade estrutural da configuração de montagem.

O hash é gravado em `RunContext.meta["config_hash"]` pela montagem
declarativa, permitindo associar eventos de execução à configuração
que produziu o Pipeline.
"""

import hashlib
import json
from typing import Any, Dict


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    SHA-256 hexadecimal da serialização JSON canônica de `config`.

    Serialização: chaves ordenadas, separadores compactos, UTF-8. A ordem
    original das chaves não influencia o resultado.

    Raises:
        TypeError: se `config` não for um dict.
    """
    if not isinstance(config, dict):
        raise TypeError(
            f"Config para hashing deve ser dict, recebido: {type(config).__name__}"
        )

    canonical = json.dumps(config, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
