# src/piperator/core/pipeline/__init__.py
"""
# Pipeline Core: Piperator

Este pacote define os contratos e as estruturas que compõem um pipeline.

Um pipeline é uma **composição ordenada de Steps** que se comporta, ele
próprio, como um Step. Isso permite aninhar pipelines arbitrariamente.

## Componentes

- **types**
  - `StepStatus`: estados finais (success, failed)
  - `StepResult`: variante imutável de sucesso/falha

- **step**
  - `Step` / `WrappingStep` (Protocol): contratos mínimos
  - `resolve_callable`: resolução tardia da operação de chamada

- **pipeline**
  - `Pipeline`: composição via `pipe` e `wrap`, execução fail-fast

- **registry**
  - `StepRegistry`: Steps nomeados para montagem declarativa

- **context** / **tracing**
  - `RunContext`: eventos estruturados e warnings
  - `TraceWrapper` / `traced`: instrumentação como wrapper

## Invariantes

- Composição nunca muta um Pipeline existente
- Falhas trafegam como StepResult, nunca como exceção
- Exceções de Steps propagam sem tradução
"""

from .types import StepResult, StepStatus
from .step import Step, WrappingStep, resolve_callable
from .pipeline import Pipeline
from .registry import StepRegistry, DuplicateStepIdError, UnknownStepIdError
from .context import RunContext
from .tracing import TraceWrapper, traced

__all__ = [
    "StepResult",
    "StepStatus",
    "Step",
    "WrappingStep",
    "resolve_callable",
    "Pipeline",
    "StepRegistry",
    "DuplicateStepIdError",
    "UnknownStepIdError",
    "RunContext",
    "TraceWrapper",
    "traced",
]
