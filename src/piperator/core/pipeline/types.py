# src/piperator/core/pipeline/types.py
"""
Tipos canônicos do pipeline do Piperator.

Este módulo define o resultado que trafega entre Steps e que permite ao
Pipeline decidir se continua ou interrompe a execução.

Componentes principais:
    - StepStatus → enum de estados finais (SUCCESS, FAILED)
    - StepResult → variante imutável (sucesso com valor, falha com erro)

Princípios fundamentais:
    - O resultado é uma variante explícita, não um valor duck-typed
    - A falha é um valor de primeira classe, nunca uma exceção
    - Nenhuma lógica de execução vive neste módulo

Invariantes:
    - Todo StepResult é exatamente sucesso ou falha
    - StepResult é imutável e seguro para compartilhamento

Limites explícitos:
    - Não executa Steps
    - Não impõe formato ao payload de sucesso ou de falha
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class StepStatus(str, Enum):
    """
    Estados finais possíveis de um StepResult.

    Os valores são strings para facilitar serialização em JSON e
    inspeção em eventos do RunContext.

    Estados definidos:
        - SUCCESS: o Step produziu um valor e o pipeline pode continuar
        - FAILED: o Step sinalizou falha e o pipeline deve interromper

    Invariantes:
        - O valor textual do enum é estável e canônico
    """
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class StepResult:
    """
    Resultado imutável da execução de um Step.

    Esta classe é o valor threaded pelo Pipeline: o `value` de um sucesso
    torna-se a entrada do próximo Step; uma falha encerra a cadeia e é
    devolvida exatamente como foi produzida.

    Campos:
        - status: SUCCESS ou FAILED
        - value: payload de sucesso (livre)
        - error: payload de falha (livre; ex.: mensagem ou dict)

    Decisões arquiteturais:
        - Construção preferencial via `success()` / `failure()`
        - A imutabilidade permite devolver a mesma instância de falha
          ao chamador sem cópia

    Invariantes:
        - Uma instância nunca é alterada após criada
        - `ok` é verdadeiro se e somente se `status` é SUCCESS

    Limites explícitos:
        - Não executa persistência
        - Não valida semântica do payload
    """
    status: StepStatus
    value: Any = None
    error: Any = None

    @classmethod
    def success(cls, value: Any = None) -> "StepResult":
        return cls(status=StepStatus.SUCCESS, value=value)

    @classmethod
    def failure(cls, error: Any = None) -> "StepResult":
        return cls(status=StepStatus.FAILED, error=error)

    @property
    def ok(self) -> bool:
        return self.status == StepStatus.SUCCESS

    @property
    def failed(self) -> bool:
        return self.status == StepStatus.FAILED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": StepStatus(self.status).value,
            "value": self.value,
            "error": self.error,
        }
