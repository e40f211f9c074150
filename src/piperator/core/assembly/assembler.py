# src/piperator/core/assembly/assembler.py
"""
Montagem declarativa de Pipelines a partir de configuração.

A seção `pipeline` descreve a ordem e o modo de composição; a seção
`steps` permite ligar/desligar Steps por id (mesma convenção de toggles
usada pelos arquivos de defaults + local):

    pipeline:
      trace: true
      steps:
        - validate               # atalho para {id: validate}
        - id: audit
          mode: wrap
        - id: double
          when: should_double    # helper resolvido no contexto do Builder
    steps:
      double:
        enabled: false

Regras:
    - `mode` é `pipe` (padrão) ou `wrap`
    - `steps.<id>.enabled` tem precedência sobre `enabled` da entrada
    - `when` nomeia um helper do contexto; a entrada só é composta se o
      helper retornar valor verdadeiro
    - entradas desligadas são registradas no RunContext como
      "skipped by config" quando um contexto de execução é fornecido
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from ..builder.builder import Builder
from ..config.hashing import compute_config_hash
from ..errors import assembly_configuration_error
from ..exceptions import AssemblyError
from ..pipeline.context import RunContext
from ..pipeline.pipeline import Pipeline
from ..pipeline.registry import StepRegistry
from ..pipeline.tracing import traced

MODES = ("pipe", "wrap")
DEFAULT_TRACE_ID = "pipeline"
BUILDER_STATE = ("_pipeline", "_context")


def _fail(message: str, **details: Any) -> AssemblyError:
    return AssemblyError.from_payload(
        assembly_configuration_error(message=message, details=details)
    )


def _parse_entry(position: int, entry: Any) -> Tuple[str, str, bool, Optional[str]]:
    if isinstance(entry, str):
        entry = {"id": entry}

    if not isinstance(entry, dict):
        raise _fail(
            "Entrada de pipeline.steps deve ser string ou dict",
            position=position,
            received=type(entry).__name__,
        )

    step_id = entry.get("id")
    if not isinstance(step_id, str) or not step_id.strip():
        raise _fail("Entrada de pipeline.steps sem id", position=position)

    mode = entry.get("mode", "pipe")
    if mode not in MODES:
        raise _fail(
            f"Modo de composição inválido: {mode}",
            position=position,
            step_id=step_id,
            allowed=list(MODES),
        )

    when = entry.get("when")
    if when is not None and not isinstance(when, str):
        raise _fail("`when` deve nomear um helper", position=position, step_id=step_id)

    if when is not None and (hasattr(Builder, when) or when in BUILDER_STATE):
        raise _fail(
            f"`when` não pode nomear atributo do próprio Builder: {when}",
            position=position,
            step_id=step_id,
        )

    return step_id, mode, bool(entry.get("enabled", True)), when


def _is_enabled(config: Dict[str, Any], step_id: str, inline: bool) -> bool:
    steps_cfg = config.get("steps", {}) or {}
    if not isinstance(steps_cfg, dict):
        raise _fail("Seção `steps` deve ser um dict", received=type(steps_cfg).__name__)

    step_cfg = steps_cfg.get(step_id, {}) or {}
    if not isinstance(step_cfg, dict):
        raise _fail(
            f"`steps.{step_id}` deve ser um dict",
            step_id=step_id,
            received=type(step_cfg).__name__,
        )
    return bool(step_cfg.get("enabled", inline))


def assemble_pipeline(
    config: Dict[str, Any],
    registry: StepRegistry,
    *,
    ctx: Optional[RunContext] = None,
    context: Any = None,
    pipeline: Optional[Pipeline] = None,
) -> Pipeline:
    """
    Monta um Pipeline conforme a seção `pipeline` da configuração.

    Args:
        config: configuração efetiva (ex.: retorno de `load_config`).
        registry: Steps disponíveis por id.
        ctx: RunContext opcional para eventos, `config_hash` e tracing.
        context: contexto de helpers do Builder (usado por `when`).
        pipeline: Pipeline inicial (padrão: vazio).

    Returns:
        Pipeline montado.

    Raises:
        AssemblyError: se a seção `pipeline` for estruturalmente inválida.
        UnknownStepIdError: se uma entrada referenciar id não registrado.
        NoSuchMethodError: se `when` nomear helper inexistente no contexto.
    """
    config = config or {}
    section = config.get("pipeline", {}) or {}
    if not isinstance(section, dict):
        raise _fail("Seção `pipeline` deve ser um dict", received=type(section).__name__)

    entries = section.get("steps", []) or []
    if not isinstance(entries, list):
        raise _fail("`pipeline.steps` deve ser uma lista", received=type(entries).__name__)

    builder = Builder(context, pipeline)

    for position, entry in enumerate(entries):
        step_id, mode, inline_enabled, when = _parse_entry(position, entry)

        if not _is_enabled(config, step_id, inline_enabled):
            if ctx is not None:
                ctx.log(step_id=step_id, level="INFO", message="skipped by config")
            continue

        if when is not None and not getattr(builder, when)():
            if ctx is not None:
                ctx.log(step_id=step_id, level="INFO", message="skipped by predicate", when=when)
            continue

        step = registry.get(step_id)
        getattr(builder, mode)(step)

    assembled = builder.to_pipeline()

    if ctx is not None:
        ctx.meta["config_hash"] = compute_config_hash(config)

    if ctx is not None and section.get("trace", False):
        assembled = traced(assembled, ctx, str(section.get("trace_id", DEFAULT_TRACE_ID)))

    return assembled
