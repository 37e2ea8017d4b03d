# src/column_resolver/core/context.py
"""
LoadContext — contexto de uma passagem de resolução de colunas.

Este módulo define o **LoadContext**, o coletor de eventos estruturados
passado aos componentes do resolver. Ele é o único canal pelo qual o
resolver reporta condições não fatais (configuração malformada, tipo de
coluna desconhecido) ao chamador.

Princípios fundamentais:
- Isolamento por passagem (cada chamada do loader possui seu próprio contexto)
- Nenhum logger global: eventos ficam em memória e são inspecionáveis
- Registrar um evento nunca levanta exceção
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List
from uuid import uuid4


@dataclass
class LoadContext:
    """
    Contexto de eventos de uma passagem do loader de colunas.

    Campos canônicos:
    - load_id: identificador da passagem
    - created_at: timestamp UTC de criação do contexto
    - meta: metadados livres do chamador (ex.: id do widget)
    - warnings: warnings por step_id
    - events: log estruturado de eventos
    """

    load_id: str = field(default_factory=lambda: uuid4().hex)
    created_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    meta: Dict[str, Any] = field(default_factory=dict)

    warnings: Dict[str, List[str]] = field(default_factory=dict)
    events: List[Dict[str, Any]] = field(default_factory=list)

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, step_id: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "load_id": self.load_id,
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

    def log_warning(self, *, step_id: str, message: str, **extra: Any) -> None:
        """Registra um warning não fatal (evento + lista de warnings do step)."""
        self.log(step_id=step_id, level="warning", message=message, **extra)
        self.add_warning(step_id=step_id, message=message)

    def log_error(self, *, step_id: str, error: BaseException, message: str = "") -> None:
        """Registra uma exceção recuperada localmente; nunca a relança."""
        self.log(
            step_id=step_id,
            level="error",
            message=message or str(error) or error.__class__.__name__,
            error_type=error.__class__.__name__,
            error_message=str(error) or "error",
        )

    def events_at(self, level: str) -> List[Dict[str, Any]]:
        return [e for e in self.events if e.get("level") == level]
