"""
Piperator: Canonical Exceptions (v1)

Este módulo define exceções tipadas internas do Piperator.

Objetivo:
- Sinalizar falhas de composição no ponto de uso (late binding)
- Sinalizar dispatch inexistente no Builder de forma síncrona e explícita
- Facilitar o mapeamento determinístico para PiperatorErrorPayload

Regras:
- Exceções levantadas por Steps do usuário nunca são encapsuladas aqui.
- Cada exceção também herda da exceção builtin equivalente, para que
  `hasattr`, `except TypeError` etc. continuem funcionando.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from . import errors
from .errors import PiperatorErrorPayload


class PiperatorException(Exception):
    """Base class para exceções internas do Piperator.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """

    code: str = "PIPERATOR_ERROR"

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = dict(details or {})
        self.hint = hint

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_payload(cls, payload: PiperatorErrorPayload) -> "PiperatorException":
        return cls(payload.message, details=payload.details, hint=payload.hint)

    def to_payload(self) -> PiperatorErrorPayload:
        return PiperatorErrorPayload(
            type=self.code,
            message=self.message,
            details=dict(self.details),
            hint=self.hint,
        )


# ---------------------------------------------------------------------------
# Execução
# ---------------------------------------------------------------------------

class InvalidStepError(PiperatorException, TypeError):
    """Valor composto no pipeline não expõe operação de chamada."""

    code = errors.INVALID_STEP


class InvalidResultError(PiperatorException, TypeError):
    """Step executado retornou algo que não é StepResult."""

    code = errors.INVALID_RESULT


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------

class NoSuchMethodError(PiperatorException, AttributeError):
    """Nem o Builder nem o contexto capturado suportam o método pedido."""

    code = errors.NO_SUCH_METHOD

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message, details=details, hint=hint)
        # AttributeError.name participa de mensagens de sugestão do interpretador
        self.name = self.details.get("method_name")

    @property
    def method_name(self) -> Optional[str]:
        return self.details.get("method_name")


# ---------------------------------------------------------------------------
# Montagem declarativa
# ---------------------------------------------------------------------------

class AssemblyError(PiperatorException, ValueError):
    """Configuração de montagem estruturalmente inválida."""

    code = errors.ASSEMBLY_CONFIGURATION_ERROR
