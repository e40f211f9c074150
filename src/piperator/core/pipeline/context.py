# src/piperator/core/pipeline/context.py
"""
Contexto de execução para rastreabilidade de pipelines.

Este módulo define o `RunContext`, a estrutura onde wrappers de
instrumentação e a montagem declarativa registram eventos estruturados
e warnings de uma execução.

O Pipeline em si não conhece o RunContext: ele só é usado por quem
escolhe instrumentar (ver `piperator.core.pipeline.tracing`).

Invariantes:
    - Logs sempre incluem `run_id` e `step_id`
    - Warnings são agrupados por `step_id`
    - Timestamps são ISO-8601 em UTC

Limites explícitos:
    - Não executa Steps
    - Não persiste eventos automaticamente
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List


@dataclass
class RunContext:
    """
    Contexto de uma execução instrumentada.

    Campos:
        - run_id: identificador da execução
        - created_at: timestamp UTC de criação
        - config: configuração efetiva usada na montagem
        - meta: metadados livres (ex.: config_hash)
        - events: log estruturado de eventos
        - warnings: mensagens não fatais por step_id
    """
    run_id: str
    created_at: datetime
    config: Dict[str, Any] = field(default_factory=dict)
    meta: Dict[str, Any] = field(default_factory=dict)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, step_id: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "run_id": self.run_id,
            "step_id": step_id,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, step_id: str, message: str) -> None:
        if step_id not in self.warnings:
            self.warnings[step_id] = []
        self.warnings[step_id].append(message)

    def events_for(self, step_id: str) -> List[Dict[str, Any]]:
        return [ev for ev in self.events if ev["step_id"] == step_id]
