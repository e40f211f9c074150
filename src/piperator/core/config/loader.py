# src/piperator/core/config/loader.py
"""
Loader de configuração de montagem do Piperator.

A configuração efetiva é resolvida a partir de:
    - um arquivo de defaults (obrigatório)
    - um arquivo local de overrides (opcional; ausente é ignorado)

Formatos suportados (v1): YAML (.yaml, .yml) via PyYAML e JSON (.json).

Invariantes:
    - O resultado é sempre um dicionário puro (`dict`)
    - Overrides nunca mutam os defaults
    - A mesma entrada sempre produz a mesma configuração final

Limites explícitos:
    - Não valida a seção `pipeline` (responsabilidade de `core.assembly`)
    - Não monta nem executa pipelines
"""

from pathlib import Path
from typing import IO, Any, Callable, Dict, Optional
import json

import yaml  # PyYAML

from .merge import deep_merge
from .errors import (
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)


_PARSERS: Dict[str, Callable[[IO[str]], Any]] = {
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
    ".json": json.load,
}


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Lê um arquivo de configuração e valida o tipo raiz.

    Arquivos vazios são interpretados como `{}`.

    Raises:
        DefaultsNotFoundError: se o arquivo não existir.
        UnsupportedConfigFormatError: se a extensão não for suportada.
        InvalidConfigRootTypeError: se a raiz não for um dicionário.
    """
    if not path.exists():
        raise DefaultsNotFoundError(f"Arquivo de defaults não encontrado: {path}")

    parser = _PARSERS.get(path.suffix.lower())
    if parser is None:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    with path.open("r", encoding="utf-8") as f:
        data = parser(f)

    data = {} if data is None else data
    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )
    return data


def load_config(
    *,
    defaults_path: str,
    local_path: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Carrega e resolve a configuração efetiva de montagem.

    Política de resolução:
        - defaults é obrigatório
        - local é opcional; quando o arquivo existe, tem prioridade
        - a combinação usa `deep_merge` (listas são substituídas por inteiro)

    Args:
        defaults_path (str): caminho do arquivo de defaults.
        local_path (Optional[str]): caminho opcional de overrides locais.

    Returns:
        Dict[str, Any]: configuração final resolvida.

    Raises:
        DefaultsNotFoundError: se o arquivo de defaults não existir.
        UnsupportedConfigFormatError: se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: se o conteúdo não for um dicionário.
        ConfigTypeConflictError: se ocorrer conflito estrutural durante o merge.
    """
    config = _load_file(Path(defaults_path))

    if local_path is not None and Path(local_path).exists():
        config = deep_merge(config, _load_file(Path(local_path)))

    return config
