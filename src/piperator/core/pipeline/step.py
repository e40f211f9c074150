# src/piperator/core/pipeline/step.py
"""
Contrato canônico de Step do Piperator.

Este módulo define os protocolos que um valor deve satisfazer para ser
executado dentro de um Pipeline, além da resolução tardia (late binding)
da operação de chamada.

Dois papéis existem:
    - Step: unidade sequencial, `call(input) -> StepResult`
    - WrappingStep: unidade envolvente, `call(input, inner) -> StepResult`,
      onde `inner` é o Pipeline envolvido (ele próprio um Step)

Princípios fundamentais:
    - Conformidade por duck typing (@runtime_checkable), sem herança
    - Funções e lambdas Python são aceitas diretamente como Steps
    - A composição nunca valida; a validação ocorre no ponto de uso

Invariantes:
    - Um valor é resolvido para `step.call` quando esse atributo é callable
    - Caso contrário, o próprio valor é usado quando é callable
    - Qualquer outro valor resulta em InvalidStepError no momento da execução

Limites explícitos:
    - Não executa Steps
    - Não define retry, timeout ou tratamento de exceções
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, runtime_checkable

from ..errors import invalid_step
from ..exceptions import InvalidStepError
from .types import StepResult


@runtime_checkable
class Step(Protocol):
    """
    Contrato de uma unidade sequencial do pipeline.

    O valor retornado por `call` decide a continuação: sucesso alimenta
    o próximo Step com `result.value`; falha encerra a cadeia.

    Limites explícitos:
        - Não conhece o Pipeline que o contém
        - Não controla a ordem de execução
    """

    def call(self, input: Any) -> StepResult:
        """Executa o Step sobre `input`."""
        ...


@runtime_checkable
class WrappingStep(Protocol):
    """
    Contrato de uma unidade envolvente (middleware).

    O wrapper recebe a entrada e o Pipeline interno e detém controle total:
    pode continuar (`inner.call(input)`), não continuar, continuar com
    outra entrada ou traduzir o resultado interno.

    Invariantes:
        - O Pipeline interno só executa se o wrapper o chamar explicitamente
        - O retorno do wrapper é o resultado da unidade inteira
    """

    def call(self, input: Any, inner: Any) -> StepResult:
        """Executa o wrapper em torno de `inner`."""
        ...


def resolve_callable(step: Any, *, role: str = "step", position: Optional[int] = None) -> Callable[..., Any]:
    """
    Resolve a operação de chamada de um Step no momento da execução.

    Args:
        step: valor composto via `pipe` ou `wrap`.
        role: "step" ou "wrapper", usado apenas em diagnóstico.
        position: posição da unidade no Pipeline, quando conhecida.

    Returns:
        Callable que executa o Step.

    Raises:
        InvalidStepError: se o valor não expõe `call` nem é callable.
    """
    call = getattr(step, "call", None)
    if callable(call):
        return call
    if callable(step):
        return step
    raise InvalidStepError.from_payload(
        invalid_step(role=role, received=type(step).__name__, position=position)
    )
