# src/sourcemerge/core/context.py
"""
Contexto de leitura compartilhado entre datasources.

Este módulo define o `ReadContext`, a estrutura canônica passada a toda
leitura de datasource. Um único contexto é propagado por todas as
sub-leituras de um merge.

O ReadContext atua como o único meio permitido de:
    - sinalizar cancelamento de leituras em andamento
    - impor um deadline para a operação completa
    - registrar eventos estruturados de leitura

Princípios fundamentais:
    - Isolamento por invocação (cada render possui seu próprio contexto)
    - Cancelamento cooperativo: cada reader verifica o contexto no seu ritmo
    - Ausência de estado global compartilhado

Invariantes:
    - Uma vez cancelado, o contexto permanece cancelado
    - Eventos sempre incluem `context_id` e `source`
    - `check()` nunca retorna normalmente após cancelamento ou deadline

Limites explícitos:
    - Não interrompe leituras bloqueantes de forma preemptiva
    - Não executa leituras
    - Não persiste eventos automaticamente

Este módulo existe para garantir interrupção previsível
e rastreabilidade das leituras.
"""

from __future__ import annotations

import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from .errors import ContextCancelledError, ContextError, DeadlineExceededError


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ReadContext:
    """
    Contexto de uma invocação de leitura de datasources.

    Consolida:
        - identidade da invocação (context_id, created_at)
        - deadline opcional (UTC)
        - sinal de cancelamento (threading.Event)
        - eventos estruturados

    Decisões arquiteturais:
        - O cancelamento é cooperativo e observado via `check()`
        - O merge verifica o contexto antes de cada sub-leitura
        - O contexto pode ser compartilhado entre threads (Event é thread-safe)
    """
    context_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    created_at: datetime = field(default_factory=_utcnow)
    deadline: Optional[datetime] = None

    _cancelled: threading.Event = field(default_factory=threading.Event, init=False, repr=False)
    events: List[Dict[str, Any]] = field(default_factory=list, init=False)

    @classmethod
    def with_timeout(cls, seconds: float, **kwargs: Any) -> "ReadContext":
        return cls(deadline=_utcnow() + timedelta(seconds=seconds), **kwargs)

    # -----------------------------
    # Cancelamento & deadline
    # -----------------------------
    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def err(self) -> Optional[ContextError]:
        """Retorna o erro do contexto, ou None se ele ainda estiver ativo."""
        if self._cancelled.is_set():
            return ContextCancelledError(f"context {self.context_id} cancelled")
        if self.deadline is not None and _utcnow() >= self.deadline:
            return DeadlineExceededError(f"context {self.context_id} deadline exceeded")
        return None

    def check(self) -> None:
        error = self.err()
        if error is not None:
            raise error

    # -----------------------------
    # Eventos
    # -----------------------------
    def log(self, *, source: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "context_id": self.context_id,
            "source": source,
            "level": level,
            "message": message,
            "timestamp": _utcnow().isoformat(),
        }
        event.update(extra)
        self.events.append(event)
