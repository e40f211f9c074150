# src/piperator/core/pipeline/tracing.py
"""
Instrumentação de pipelines via `wrap`.

`TraceWrapper` é um WrappingStep que registra no RunContext o início e o
desfecho da execução do Pipeline que envolve. Ele sempre continua para o
Pipeline interno e devolve o resultado interno sem alteração.

Eventos registrados (campo `message`):
    - pipeline.start      (INFO)
    - pipeline.success    (INFO)
    - pipeline.failure    (ERROR, com `error`; também vira warning)
    - pipeline.exception  (ERROR, com `exc_type`; a exceção é relançada)
"""

from __future__ import annotations

from typing import Any

from .context import RunContext
from .pipeline import Pipeline
from .types import StepResult


class TraceWrapper:
    """Wrapper de instrumentação que registra eventos em um RunContext."""

    def __init__(self, ctx: RunContext, step_id: str):
        self.ctx = ctx
        self.step_id = step_id

    def call(self, input: Any, inner: Pipeline) -> StepResult:
        self.ctx.log(step_id=self.step_id, level="INFO", message="pipeline.start")
        try:
            result = inner.call(input)
        except Exception as e:
            self.ctx.log(
                step_id=self.step_id,
                level="ERROR",
                message="pipeline.exception",
                exc_type=e.__class__.__name__,
                exc_message=str(e),
            )
            raise

        if result.ok:
            self.ctx.log(step_id=self.step_id, level="INFO", message="pipeline.success")
        else:
            self.ctx.log(
                step_id=self.step_id,
                level="ERROR",
                message="pipeline.failure",
                error=result.error,
            )
            self.ctx.add_warning(step_id=self.step_id, message=str(result.error))
        return result


def traced(pipeline: Pipeline, ctx: RunContext, step_id: str) -> Pipeline:
    """Envolve `pipeline` com um TraceWrapper."""
    return pipeline.wrap(TraceWrapper(ctx, step_id))
