# src/piperator/core/builder/__init__.py
"""
DSL de construção de Pipelines.

- `Builder`: acumulador de `pipe`/`wrap` com dispatch para o contexto capturado
- `build`: ponto de entrada que cria o Builder, executa o bloco e devolve o Pipeline
"""

from .builder import Builder, build, dsl_method

__all__ = ["Builder", "build", "dsl_method"]
