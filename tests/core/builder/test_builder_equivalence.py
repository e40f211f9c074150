# tests/core/builder/test_builder_equivalence.py
"""
Testes de equivalência entre Builder e encadeamento direto.

Os testes asseguram que:
- qualquer sequência de `pipe`/`wrap` via Builder produz Pipeline com o
  mesmo comportamento do encadeamento direto
- `pipe`/`wrap` devolvem o novo estado do Builder
- `to_pipeline` é uma leitura não destrutiva
- `build` executa o bloco e devolve o Pipeline resultante
"""

import pytest

try:
    from piperator.core.builder.builder import Builder, build
    from piperator.core.pipeline.pipeline import Pipeline
    from piperator.core.pipeline.types import StepResult
except Exception as e:  # noqa: BLE001
    Builder = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing Builder. Implement:\n"
            "- src/piperator/core/builder/builder.py (Builder, build)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def _inc(x):
    return StepResult.success(x + 1)


def _guard(x):
    return StepResult.failure("too big") if x > 100 else StepResult.success(x)


def _times10(input, inner):
    result = inner.call(input)
    return StepResult.success(result.value * 10) if result.ok else result


OPERATIONS = [
    [("pipe", _inc)],
    [("pipe", _inc), ("pipe", _guard)],
    [("pipe", _inc), ("wrap", _times10), ("pipe", _guard)],
    [("wrap", _times10), ("wrap", _times10), ("pipe", _inc)],
    [("pipe", _guard), ("wrap", _times10), ("pipe", _inc), ("wrap", _times10)],
]


@pytest.mark.parametrize("operations", OPERATIONS)
@pytest.mark.parametrize("value", [0, 5, 50, 200])
def test_builder_matches_direct_chaining(operations, value):
    _require_imports()
    builder = Builder()
    direct = Pipeline()
    for name, step in operations:
        getattr(builder, name)(step)
        direct = getattr(direct, name)(step)

    assert builder.to_pipeline().call(value) == direct.call(value)
    assert builder.to_pipeline() == direct


def test_pipe_and_wrap_return_new_state():
    _require_imports()
    builder = Builder()

    after_pipe = builder.pipe(_inc)
    assert isinstance(after_pipe, Pipeline)
    assert after_pipe is builder.to_pipeline()

    after_wrap = builder.wrap(_times10)
    assert after_wrap is builder.to_pipeline()
    assert after_wrap is not after_pipe


def test_to_pipeline_before_any_operation_returns_initial():
    _require_imports()
    assert Builder().to_pipeline() == Pipeline()

    start = Pipeline().pipe(_inc)
    assert Builder(None, start).to_pipeline() is start


def test_to_pipeline_is_not_destructive():
    _require_imports()
    builder = Builder()
    builder.pipe(_inc)
    first = builder.to_pipeline()

    builder.pipe(_inc)

    assert first.call(0).value == 1
    assert builder.to_pipeline().call(0).value == 2


def test_initial_pipeline_is_not_mutated():
    _require_imports()
    start = Pipeline().pipe(_inc)
    builder = Builder(None, start)
    builder.pipe(_inc)

    assert start.call(0).value == 1


def test_builder_forwards_arguments_as_given():
    _require_imports()
    with pytest.raises(TypeError):
        Builder().pipe(_inc, _inc)


def test_build_runs_block_and_returns_pipeline(reject_negative, double):
    _require_imports()

    def assemble(b):
        b.pipe(reject_negative)
        b.pipe(double)

    pipeline = build(assemble)

    assert pipeline.call(3) == StepResult.success(6)
    assert pipeline.call(-1) == StepResult.failure("negative")


def test_build_with_initial_pipeline():
    _require_imports()
    pipeline = build(lambda b: b.pipe(_inc), pipeline=Pipeline().pipe(_inc))
    assert pipeline.call(0).value == 2
