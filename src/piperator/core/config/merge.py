# src/piperator/core/config/merge.py
"""
Deep-merge de configuração.

Política (v1):
    - dict + dict → merge recursivo por chave
    - list        → substituição total (ex.: `pipeline.steps` local
                    substitui a lista inteira dos defaults)
    - escalar     → substituição direta
    - tipos distintos → ConfigTypeConflictError

O merge é puramente funcional: nenhum input é mutado.
"""

from copy import deepcopy
from typing import Any, Dict

from .errors import ConfigTypeConflictError


def _merge_value(path: str, old: Any, new: Any) -> Any:
    if isinstance(old, dict) and isinstance(new, dict):
        return _merge_dicts(path, old, new)
    if isinstance(new, list) or type(old) is type(new):
        return deepcopy(new)
    raise ConfigTypeConflictError(
        f"Conflito de tipo em '{path}': "
        f"{type(old).__name__} vs {type(new).__name__}"
    )


def _merge_dicts(prefix: str, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged: Dict[str, Any] = {}
    for key, value in base.items():
        if key in override:
            path = f"{prefix}.{key}" if prefix else str(key)
            merged[key] = _merge_value(path, value, override[key])
        else:
            merged[key] = deepcopy(value)
    for key, value in override.items():
        if key not in base:
            merged[key] = deepcopy(value)
    return merged


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Combina `override` sobre `base`, devolvendo um novo dicionário.

    Conflitos reportam o caminho completo da chave (ex.: `steps.double.enabled`).

    Args:
        base: configuração base (defaults).
        override: overrides explícitos (local).

    Returns:
        Novo dicionário resultante.

    Raises:
        ConfigTypeConflictError: se a mesma chave tiver tipos incompatíveis,
            ou se algum dos argumentos não for um dict.
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            "Deep-merge requer dicts no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )
    return _merge_dicts("", base, override)
