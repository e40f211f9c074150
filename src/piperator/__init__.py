# src/piperator/__init__.py
"""
Piperator: composição de Steps em Pipelines.

Um Pipeline encadeia Steps com `pipe` (sequência, fail-fast) e `wrap`
(envolvimento, estilo middleware) e é, ele próprio, um Step. O `Builder`
permite montar Pipelines de forma declarativa e condicional, com acesso
aos helpers do chamador.

    >>> from piperator import Pipeline, StepResult
    >>> double = lambda x: StepResult.success(x * 2)
    >>> Pipeline.of(double).call(3).value
    6
"""

from .core.pipeline import (
    Pipeline,
    RunContext,
    Step,
    StepRegistry,
    StepResult,
    StepStatus,
    TraceWrapper,
    WrappingStep,
    traced,
)
from .core.builder import Builder, build
from .core.assembly import assemble_pipeline
from .core.config import load_config
from .core.exceptions import (
    AssemblyError,
    InvalidResultError,
    InvalidStepError,
    NoSuchMethodError,
    PiperatorException,
)

__all__ = [
    "Pipeline",
    "RunContext",
    "Step",
    "StepRegistry",
    "StepResult",
    "StepStatus",
    "TraceWrapper",
    "WrappingStep",
    "traced",
    "Builder",
    "build",
    "assemble_pipeline",
    "load_config",
    "AssemblyError",
    "InvalidResultError",
    "InvalidStepError",
    "NoSuchMethodError",
    "PiperatorException",
]
