# tests/core/pipeline/test_pipeline_laws.py
"""
Testes das leis de composição do Pipeline.

Este módulo valida as propriedades que tornam o Pipeline previsível:

- identidade: Pipeline vazio devolve success(x) inalterado
- associatividade: o agrupamento de `pipe` não altera o comportamento
- fail-fast: a primeira falha é devolvida e nada mais executa
- imutabilidade: `pipe` nunca muta o receptor
- Pipeline é Step: pode ser aninhado via `pipe`

Decisões arquiteturais:
    - Steps de teste gravam suas execuções em `calls`
    - Falhas são verificadas por identidade (`is`), não apenas igualdade

Limites explícitos:
    - Não valida `wrap` (ver test_pipeline_wrap.py)
    - Não valida erros de Step inválido (ver test_pipeline_invalid_step.py)
"""

import pytest

try:
    from piperator.core.pipeline.pipeline import Pipeline
    from piperator.core.pipeline.types import StepResult, StepStatus
except Exception as e:  # noqa: BLE001
    Pipeline = None
    StepResult = None
    StepStatus = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing pipeline core modules. Implement:\n"
            "- src/piperator/core/pipeline/pipeline.py (Pipeline)\n"
            "- src/piperator/core/pipeline/types.py (StepResult, StepStatus)\n"
            f"Import error: {_IMPORT_ERR}"
        )


@pytest.mark.parametrize("value", [0, "x", None, [1, 2], {"k": "v"}])
def test_empty_pipeline_is_identity(value):
    """
    Verifica que um Pipeline sem Steps devolve success(x) com x inalterado.

    Invariantes:
        - O resultado é sucesso
        - O valor devolvido é o próprio objeto de entrada
    """
    _require_imports()
    result = Pipeline().call(value)

    assert result.ok
    assert result.status == StepStatus.SUCCESS
    assert result.value is value


def test_scenario_reject_negative_then_double(reject_negative, double, calls):
    """
    Cenário canônico: pipe(reject_negative).pipe(double).

    - call(3) → success(6)
    - call(-1) → failure("negative"), sem executar `double`
    """
    _require_imports()
    pipeline = Pipeline().pipe(reject_negative).pipe(double)

    assert pipeline.call(3) == StepResult.success(6)
    assert calls == ["reject_negative", "double"]

    calls.clear()
    result = pipeline.call(-1)

    assert result == StepResult.failure("negative")
    assert calls == ["reject_negative"]


def test_fail_fast_returns_exact_failure(RecordingStep, calls):
    """
    Verifica que a falha do primeiro Step é devolvida exatamente e que
    os Steps seguintes nunca são executados.
    """
    _require_imports()
    failure = StepResult.failure({"reason": "boom"})

    class _Failing:
        def call(self, x):
            calls.append("s1")
            return failure

    pipeline = Pipeline().pipe(_Failing()).pipe(RecordingStep("s2")).pipe(RecordingStep("s3"))
    result = pipeline.call(10)

    assert result is failure
    assert calls == ["s1"]


@pytest.mark.parametrize("value", [-5, 0, 1, 7])
def test_pipe_is_associative(RecordingStep, value):
    """
    (p.pipe(a)).pipe(b) se comporta como p.pipe(Pipeline de a seguido de b).
    """
    _require_imports()
    inc = RecordingStep("inc", fn=lambda x: x + 1)
    triple = RecordingStep("triple", fn=lambda x: x * 3)
    guard = lambda x: StepResult.failure("neg") if x < 0 else StepResult.success(x)

    p = Pipeline().pipe(guard)
    left = p.pipe(inc).pipe(triple)
    right = p.pipe(Pipeline().pipe(inc).pipe(triple))

    assert left.call(value) == right.call(value)


def test_pipe_does_not_mutate_receiver(double):
    _require_imports()
    base = Pipeline().pipe(double)
    extended = base.pipe(double)

    assert len(base.steps) == 1
    assert len(extended.steps) == 2
    assert base.call(1).value == 2
    assert extended.call(1).value == 4


def test_len_counts_units_and_pipeline_is_always_truthy(double):
    """
    `len()` conta as unidades de topo; `wrap` colapsa tudo em uma unidade.
    Um Pipeline vazio continua verdadeiro em contexto booleano.
    """
    _require_imports()
    empty = Pipeline()
    piped = empty.pipe(double).pipe(double)
    wrapped = piped.wrap(lambda x, inner: inner.call(x))

    assert len(empty) == 0
    assert len(piped) == 2
    assert len(wrapped) == 1
    assert bool(empty) is True
    assert bool(piped) is True


def test_branching_from_shared_pipeline(RecordingStep):
    """Dois Pipelines derivados do mesmo base não interferem entre si."""
    _require_imports()
    base = Pipeline().pipe(RecordingStep("inc", fn=lambda x: x + 1))
    a = base.pipe(RecordingStep("neg", fn=lambda x: -x))
    b = base.pipe(RecordingStep("sq", fn=lambda x: x * x))

    assert a.call(2).value == -3
    assert b.call(2).value == 9
    assert base.call(2).value == 3


def test_nested_pipeline_failure_short_circuits_outer(RecordingStep, calls):
    _require_imports()
    inner = Pipeline().pipe(RecordingStep("inner", fail_with="inner failed"))
    outer = Pipeline().pipe(inner).pipe(RecordingStep("after"))

    result = outer.call(1)

    assert result.failed
    assert result.error == "inner failed"
    assert calls == ["inner"]


def test_plain_functions_are_steps():
    _require_imports()
    pipeline = Pipeline.of(
        lambda x: StepResult.success(x + 1),
        lambda x: StepResult.success(x * 10),
    )

    assert pipeline(2).value == 30
    assert pipeline.call(2) == pipeline(2)


def test_step_exceptions_propagate_unchanged():
    _require_imports()

    class _Boom(Exception):
        pass

    def explode(x):
        raise _Boom("boom")

    with pytest.raises(_Boom, match="boom"):
        Pipeline().pipe(explode).call(1)
