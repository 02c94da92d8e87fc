# src/sourcemerge/core/sources/reader.py
"""
Contrato canônico de Reader (backend de datasource).

Este módulo define o protocolo formal que qualquer backend deve
satisfazer para ser plugado no registry por scheme.

Um Reader recebe o contexto de leitura, a URL já parseada e argumentos
opcionais, e produz um `Data`. Ele não conhece aliases, o registry nem
o merge.

Princípios fundamentais:
    - Conformidade por duck typing (@runtime_checkable), sem herança
    - Nenhum backend é privilegiado pelo registry
    - Novos backends não exigem mudança no merge nem no registry

Invariantes:
    - Cada chamada a `read` produz um novo `Data`
    - Falhas são levantadas como exceções, nunca retornadas como valor

Limites explícitos:
    - Não resolve aliases
    - Não decodifica o payload (decode é preguiçoso, no `Data`)
"""

from __future__ import annotations

from typing import Dict, List, Optional, Protocol, runtime_checkable
from urllib.parse import SplitResult

from ..context import ReadContext
from ..data.data import Data

Header = Dict[str, List[str]]


@runtime_checkable
class Reader(Protocol):
    """
    Contrato mínimo de um backend de datasource.

    Decisões arquiteturais:
        - `header` é repassado pelo `Source` que agrega o reader; backends
          que não usam headers simplesmente o ignoram
        - O contexto deve ser verificado (`ctx.check()`) antes de I/O caro
    """

    def read(
        self,
        ctx: ReadContext,
        url: SplitResult,
        *args: str,
        header: Optional[Header] = None,
    ) -> Data:
        """Lê a datasource identificada por `url` e retorna um novo `Data`."""
        ...
