# src/piperator/core/builder/builder.py
"""
Builder declarativo de Pipelines.

Com o Builder, um Pipeline pode ser montado sem encadeamento explícito de
`pipe`, o que facilita incluir Steps apenas sob certas condições:

    def assemble(b):
        b.pipe(reject_negative)
        if b.should_double():       # helper do contexto capturado
            b.pipe(double)

    pipeline = build(assemble, context=service)

Dispatch de fallback:
    Qualquer atributo que o Builder não conhece é resolvido no contexto
    capturado na criação. O contexto é passado explicitamente:
        - um `Mapping` funciona como registro de helpers por nome
        - qualquer outro objeto é consultado via `getattr`, inclusive
          membros `_privados`
    Nomes dunder nunca são encaminhados. Sem resolução, o acesso falha com
    `NoSuchMethodError` (um `AttributeError`), de forma síncrona.

Invariantes:
    - O Builder detém exatamente um Pipeline corrente
    - `pipe`/`wrap` substituem o Pipeline corrente e o devolvem
    - `to_pipeline` é uma leitura não destrutiva

Limites explícitos:
    - Não é thread-safe: um Builder não deve ser compartilhado entre threads
    - Não valida Steps (late binding do Pipeline)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, List, Optional, Tuple

from ..errors import no_such_method
from ..exceptions import NoSuchMethodError
from ..pipeline.pipeline import Pipeline

_MISSING = object()


def dsl_method(method_name: str) -> Callable[..., Pipeline]:
    """Expõe um método encadeável de Pipeline na DSL do Builder.

    O método gerado chama `Pipeline.<method_name>` com os argumentos
    recebidos e usa o retorno como novo estado do Builder.
    """

    def method(self: "Builder", *arguments: Any) -> Pipeline:
        self._pipeline = getattr(self._pipeline, method_name)(*arguments)
        return self._pipeline

    method.__name__ = method_name
    method.__qualname__ = f"Builder.{method_name}"
    method.__doc__ = (
        f"Chama Pipeline.{method_name} com os argumentos dados e usa o "
        "retorno como estado do Builder."
    )
    return method


class Builder:
    """Acumulador mutável de um Pipeline com dispatch para o contexto do chamador."""

    DSL_METHODS: Tuple[str, ...] = ("pipe", "wrap", "to_pipeline")

    pipe = dsl_method("pipe")
    wrap = dsl_method("wrap")

    def __init__(self, context: Any = None, pipeline: Optional[Pipeline] = None):
        self._pipeline = pipeline if pipeline is not None else Pipeline()
        self._context = context

    def to_pipeline(self) -> Pipeline:
        """Retorna o Pipeline construído até aqui."""
        return self._pipeline

    # -----------------------------
    # Dispatch de fallback
    # -----------------------------
    def _lookup(self, name: str) -> Any:
        context = self.__dict__.get("_context")
        if context is None:
            return _MISSING
        if isinstance(context, Mapping):
            return context.get(name, _MISSING)
        return getattr(context, name, _MISSING)

    def __getattr__(self, name: str) -> Any:
        # só é chamado quando a busca normal de atributo falha
        if name.startswith("__") and name.endswith("__"):
            raise AttributeError(name)

        value = self._lookup(name)
        if value is _MISSING:
            context = self.__dict__.get("_context")
            raise NoSuchMethodError.from_payload(
                no_such_method(method_name=name, context_type=type(context).__name__)
            )
        return value

    def responds_to(self, name: str, include_private: bool = True) -> bool:
        """Indica se `name` é atendido pelo Builder ou pelo contexto capturado."""
        if name in self.DSL_METHODS:
            return True
        if name.startswith("__") and name.endswith("__"):
            return False
        if name.startswith("_") and not include_private:
            return False
        return self._lookup(name) is not _MISSING

    def __dir__(self) -> List[str]:
        names = set(super().__dir__())
        context = self.__dict__.get("_context")
        if isinstance(context, Mapping):
            names.update(k for k in context.keys() if isinstance(k, str))
        elif context is not None:
            names.update(n for n in dir(context) if not (n.startswith("__") and n.endswith("__")))
        return sorted(names)

    def __repr__(self) -> str:
        return f"Builder(context={type(self._context).__name__}, pipeline={self._pipeline!r})"


def build(
    block: Callable[[Builder], Any],
    *,
    context: Any = None,
    pipeline: Optional[Pipeline] = None,
) -> Pipeline:
    """
    Monta um Pipeline executando `block` sobre um Builder novo.

    Quando `context` não é informado e `block` é um método ligado, o dono
    do método é usado como contexto, tornando seus helpers acessíveis
    diretamente pelo Builder.

    Args:
        block: callable que recebe o Builder e emite `pipe`/`wrap`.
        context: objeto ou Mapping de helpers para o dispatch de fallback.
        pipeline: Pipeline inicial (padrão: vazio).

    Returns:
        Pipeline: o Pipeline resultante (`builder.to_pipeline()`).
    """
    if context is None:
        context = getattr(block, "__self__", None)
    builder = Builder(context, pipeline)
    block(builder)
    return builder.to_pipeline()
