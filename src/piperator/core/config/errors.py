# src/piperator/core/config/errors.py
"""
Exceções da camada de configuração do Piperator.

Cobrem apenas falhas estruturais ao carregar e mesclar arquivos de
configuração de montagem. Erros de execução de pipeline não pertencem
a esta hierarquia.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
"""


class ConfigError(Exception):
    """
    Exceção base para erros de configuração.

    Permite capturar de forma genérica qualquer falha de load ou merge,
    separando-as de falhas de execução do pipeline.
    """


class DefaultsNotFoundError(ConfigError):
    """
    O arquivo de defaults não existe no caminho informado.

    O arquivo de defaults é obrigatório: sem ele não há configuração
    efetiva, e nenhum default implícito é inventado.
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Extensão de arquivo não suportada.

    Formatos aceitos (v1): YAML (.yaml, .yml) e JSON (.json). O formato
    nunca é inferido pelo conteúdo.
    """


class InvalidConfigRootTypeError(ConfigError):
    """O conteúdo raiz do arquivo não é um mapa chave-valor (`dict`)."""


class ConfigTypeConflictError(ConfigError):
    """
    Conflito de tipos para a mesma chave durante o deep-merge.

    Exemplo:
        - base:     {"pipeline": {"trace": false}}
        - override: {"pipeline": "off"}

    Nenhum merge parcial é produzido e nenhuma coerção é tentada.
    """
