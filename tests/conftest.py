# tests/conftest.py
"""
Fixtures compartilhados para testes do Piperator.

Este módulo define fixtures reutilizáveis que fornecem:
- Steps mínimos e determinísticos (double, reject_negative)
- um gravador de chamadas para verificar ordem e short-circuit
- contexto de execução controlado (RunContext)
- conteúdos YAML de configuração para loader e montagem

Decisões arquiteturais:
    - Steps de teste usam duck typing (objetos com `call`) ou funções puras
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture executa pipeline real
    - Nenhuma fixture realiza I/O
"""

import pytest
from datetime import datetime, timezone


# =====================================================
# Steps
# =====================================================

@pytest.fixture
def calls():
    """Lista compartilhada onde os Steps de teste registram suas execuções."""
    return []


@pytest.fixture
def RecordingStep(calls):
    """
    Fixture factory que fornece uma classe de Step duck-typed que grava
    seu nome em `calls` e aplica uma função ao valor de entrada.

    Returns:
        type: classe `_RecordingStep(name, fn=None, fail_with=None)`.
    """
    from piperator.core.pipeline.types import StepResult

    class _RecordingStep:
        def __init__(self, name, fn=None, fail_with=None):
            self.name = name
            self.fn = fn or (lambda x: x)
            self.fail_with = fail_with

        def call(self, input):
            calls.append(self.name)
            if self.fail_with is not None:
                return StepResult.failure(self.fail_with)
            return StepResult.success(self.fn(input))

    return _RecordingStep


@pytest.fixture
def double(RecordingStep):
    """Step `call(x) -> success(x * 2)`."""
    return RecordingStep("double", fn=lambda x: x * 2)


@pytest.fixture
def reject_negative(calls):
    """Step `call(x) -> failure("negative")` se x < 0, senão success(x)."""
    from piperator.core.pipeline.types import StepResult

    class _RejectNegative:
        def call(self, x):
            calls.append("reject_negative")
            if x < 0:
                return StepResult.failure("negative")
            return StepResult.success(x)

    return _RejectNegative()


# =====================================================
# RunContext
# =====================================================

@pytest.fixture
def dummy_config() -> dict:
    """Configuração mínima já resolvida, sem loader nem merge."""
    return {
        "pipeline": {"trace": False, "steps": ["reject_negative", "double"]},
        "steps": {"double": {"enabled": True}},
    }


@pytest.fixture
def dummy_ctx(dummy_config):
    """RunContext determinístico para testes."""
    from piperator.core.pipeline.context import RunContext
    return RunContext(
        run_id="run-test-001",
        created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
        config=dummy_config,
        meta={"source": "pytest"},
    )


# =====================================================
# Config Loader fixtures
# =====================================================

@pytest.fixture
def project_like_config_defaults_yaml() -> str:
    """
    YAML de defaults semelhante ao uso real: ordem completa de Steps,
    todos habilitados.

    Returns:
        str: conteúdo YAML dos defaults.
    """
    return """\
pipeline:
  trace: false
  steps:
    - reject_negative
    - id: double
    - id: audit
      mode: wrap
steps:
  double:
    enabled: true
  audit:
    enabled: true
"""


@pytest.fixture
def project_like_config_local_yaml() -> str:
    """
    YAML local de override: liga tracing e desliga `double`.

    Returns:
        str: conteúdo YAML de override.
    """
    return """\
pipeline:
  trace: true
steps:
  double:
    enabled: false
"""
