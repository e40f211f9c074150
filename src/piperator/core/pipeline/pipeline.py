# src/piperator/core/pipeline/pipeline.py
"""
Pipeline canônico do Piperator.

Um Pipeline é uma sequência ordenada e imutável de unidades que, em
conjunto, satisfaz o próprio contrato de Step: `call(input) -> StepResult`.
Por isso Pipelines podem ser compostos dentro de outros Pipelines.

Composição:
    - pipe(step) → novo Pipeline: unidades atuais seguidas de `step`
    - wrap(step) → novo Pipeline com uma única unidade: `step` envolvendo
      o Pipeline atual (cebola: o wrap mais recente executa primeiro)

Execução (`call`):
    - a entrada atravessa as unidades em ordem
    - o `value` de cada sucesso alimenta a unidade seguinte
    - a primeira falha é devolvida imediatamente (fail-fast)
    - unidades envolventes recebem `(input, inner)` e decidem tudo

Invariantes:
    - Nenhuma operação de composição muta o Pipeline receptor
    - Pipeline vazio é a identidade: `call(x)` devolve success(x)
    - Exceções levantadas por Steps propagam sem tradução

Limites explícitos:
    - Não valida Steps durante a composição
    - Não agenda, não paraleliza, não faz retry
    - Não registra eventos (instrumentação é responsabilidade de wrappers)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple

from ..errors import invalid_result
from ..exceptions import InvalidResultError
from .step import resolve_callable
from .types import StepResult


@dataclass(frozen=True)
class _WrappedUnit:
    """Unidade interna: `wrapper` envolvendo o Pipeline `inner`."""

    wrapper: Any
    inner: "Pipeline"


@dataclass(frozen=True)
class Pipeline:
    """
    Composição ordenada e imutável de Steps.

    Decisões arquiteturais:
        - Os Steps são armazenados em tupla; cada `pipe`/`wrap` cria um
          novo valor, de modo que Pipelines entregues podem ser
          compartilhados livremente (inclusive entre threads)
        - A validação da operação de chamada é tardia (late binding)

    Exemplo:
        >>> double = lambda x: StepResult.success(x * 2)
        >>> Pipeline().pipe(double).pipe(double).call(3).value
        12
    """

    steps: Tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "steps", tuple(self.steps))

    @classmethod
    def of(cls, *steps: Any) -> "Pipeline":
        """Cria um Pipeline a partir de Steps encadeados via `pipe`."""
        pipeline = cls()
        for step in steps:
            pipeline = pipeline.pipe(step)
        return pipeline

    def __len__(self) -> int:
        return len(self.steps)

    def __bool__(self) -> bool:
        # Pipeline vazio ainda é um Step válido (identidade)
        return True

    # -----------------------------
    # Composição
    # -----------------------------
    def pipe(self, step: Any) -> "Pipeline":
        return Pipeline(steps=self.steps + (step,))

    def wrap(self, step: Any) -> "Pipeline":
        return Pipeline(steps=(_WrappedUnit(wrapper=step, inner=self),))

    # -----------------------------
    # Execução
    # -----------------------------
    def call(self, input: Any = None) -> StepResult:
        current = input
        for position, unit in enumerate(self.steps):
            result = self._run_unit(position, unit, current)
            if not result.ok:
                return result
            current = result.value
        return StepResult.success(current)

    __call__ = call

    def _run_unit(self, position: int, unit: Any, current: Any) -> StepResult:
        if isinstance(unit, _WrappedUnit):
            role = "wrapper"
            run = resolve_callable(unit.wrapper, role=role, position=position)
            result = run(current, unit.inner)
        else:
            role = "step"
            run = resolve_callable(unit, role=role, position=position)
            result = run(current)

        if not isinstance(result, StepResult):
            raise InvalidResultError.from_payload(
                invalid_result(role=role, received=type(result).__name__, position=position)
            )
        return result
