# src/piperator/core/pipeline/registry.py
"""
Registro nomeado de Steps.

Este módulo define o `StepRegistry`, que associa identificadores estáveis
a Steps para que pipelines possam ser montados de forma declarativa
(ver `piperator.core.assembly`).

Responsabilidades do módulo:
    - Validar unicidade e formato do identificador
    - Preservar ordem de registro dos Steps
    - Expor acesso controlado aos Steps registrados

Decisões arquiteturais:
    - A validação de identificadores ocorre no registro
    - O Step em si não é validado (late binding do Pipeline)

Limites explícitos:
    - Não monta nem executa pipeline
    - Não interage com RunContext
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..errors import duplicate_step_id, unknown_step_id, DUPLICATE_STEP_ID, UNKNOWN_STEP_ID
from ..exceptions import PiperatorException


class DuplicateStepIdError(PiperatorException, ValueError):
    """
    Exceção levantada ao registrar dois Steps com o mesmo identificador.

    Invariantes:
        - O registry permanece inalterado após a tentativa
    """

    code = DUPLICATE_STEP_ID


class UnknownStepIdError(PiperatorException, KeyError):
    """Exceção levantada ao buscar um identificador não registrado."""

    code = UNKNOWN_STEP_ID


@dataclass
class StepRegistry:
    """
    Registro de Steps por identificador, em ordem de inserção.

    Invariantes:
        - Cada id é uma string não vazia e única no registry
        - `list()` reflete exatamente a ordem de registro
    """

    _steps: Dict[str, Any] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)

    def add(self, step_id: str, step: Any) -> None:
        if not isinstance(step_id, str) or not step_id.strip():
            raise ValueError("step_id must be a non-empty string")

        if step_id in self._steps:
            raise DuplicateStepIdError.from_payload(duplicate_step_id(step_id=step_id))

        self._steps[step_id] = step
        self._order.append(step_id)

    def get(self, step_id: str) -> Any:
        if step_id not in self._steps:
            raise UnknownStepIdError.from_payload(
                unknown_step_id(step_id=step_id, known_ids=list(self._order))
            )
        return self._steps[step_id]

    def ids(self) -> List[str]:
        return list(self._order)

    def list(self) -> List[Any]:
        return [self._steps[sid] for sid in self._order]

    def __contains__(self, step_id: object) -> bool:
        return step_id in self._steps
