"""
Piperator: Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros do Piperator.
Erros de composição e de dispatch são artefatos explícitos do contrato
da biblioteca, devendo ser:

- explícitos
- serializáveis
- acionáveis

Falhas de Step (StepResult.failure) **não** pertencem a este catálogo:
elas trafegam pelo canal de resultado e nunca são levantadas.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PiperatorErrorPayload:
    """
    Payload canônico de erro do Piperator.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao chamador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Execução de pipeline
INVALID_STEP = "INVALID_STEP"
INVALID_RESULT = "INVALID_RESULT"

# Builder / dispatch
NO_SUCH_METHOD = "NO_SUCH_METHOD"

# Registro e montagem declarativa
DUPLICATE_STEP_ID = "DUPLICATE_STEP_ID"
UNKNOWN_STEP_ID = "UNKNOWN_STEP_ID"
ASSEMBLY_CONFIGURATION_ERROR = "ASSEMBLY_CONFIGURATION_ERROR"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def invalid_step(
    *,
    role: str,
    received: str,
    position: Optional[int] = None,
    hint: str = "Forneça um objeto com método `call` ou um callable Python antes de executar o pipeline.",
) -> PiperatorErrorPayload:
    return PiperatorErrorPayload(
        type=INVALID_STEP,
        message="Step não expõe operação de chamada",
        details={
            "role": role,
            "received": received,
            "position": position,
        },
        hint=hint,
    )


def invalid_result(
    *,
    role: str,
    received: str,
    position: Optional[int] = None,
    hint: str = "Ajuste o Step para retornar StepResult.success(...) ou StepResult.failure(...).",
) -> PiperatorErrorPayload:
    return PiperatorErrorPayload(
        type=INVALID_RESULT,
        message="Step retornou tipo inválido",
        details={
            "role": role,
            "expected": "StepResult",
            "received": received,
            "position": position,
        },
        hint=hint,
    )


def no_such_method(
    *,
    method_name: str,
    context_type: Optional[str] = None,
    hint: str = "Defina o helper no contexto capturado pelo Builder ou registre-o explicitamente.",
) -> PiperatorErrorPayload:
    return PiperatorErrorPayload(
        type=NO_SUCH_METHOD,
        message=f"Método não suportado: {method_name}",
        details={
            "method_name": method_name,
            "context_type": context_type,
        },
        hint=hint,
    )


def duplicate_step_id(
    *,
    step_id: str,
    hint: str = "Use identificadores únicos ao registrar Steps.",
) -> PiperatorErrorPayload:
    return PiperatorErrorPayload(
        type=DUPLICATE_STEP_ID,
        message=f"Duplicate step id: {step_id}",
        details={"step_id": step_id},
        hint=hint,
    )


def unknown_step_id(
    *,
    step_id: str,
    known_ids: List[str],
    hint: str = "Registre o Step no StepRegistry ou corrija o id na configuração.",
) -> PiperatorErrorPayload:
    return PiperatorErrorPayload(
        type=UNKNOWN_STEP_ID,
        message=f"Unknown step id: {step_id}",
        details={"step_id": step_id, "known_ids": known_ids},
        hint=hint,
    )


def assembly_configuration_error(
    *,
    message: str = "Configuração inválida para montagem do pipeline",
    details: Optional[Dict[str, Any]] = None,
    hint: str = "Revise a seção `pipeline.steps` da configuração antes de montar o pipeline.",
) -> PiperatorErrorPayload:
    return PiperatorErrorPayload(
        type=ASSEMBLY_CONFIGURATION_ERROR,
        message=message,
        details=details or {},
        hint=hint,
    )
