# src/sourcemerge/accessors.py
"""
Funções de acesso a datasources para o engine de templates.

Este módulo expõe a superfície de funções que um renderer vincula aos
seus templates (`datasource`, `include`, `datasource_exists`, ...),
sempre operando sobre um `SourceRegistry` explícito e um `ReadContext`.

Decisões arquiteturais:
    - O facade não guarda estado próprio além do registry e do contexto
    - `datasource_exists` é um lookup puro (sem I/O)
    - `datasource_reachable` é o único ponto que converte falhas em bool

Limites explícitos:
    - Não renderiza templates
    - Não faz cache de leituras (cada chamada produz um novo `Data`)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

from .core.context import ReadContext
from .core.data.data import Data
from .core.errors import DatasourceError
from .core.registry.registry import SourceRegistry
from .core.sources.reader import Header
from .core.sources.source import Source

logger = logging.getLogger(__name__)


@dataclass
class Datasources:
    """Facade de funções de datasource sobre um registry e um contexto."""

    registry: SourceRegistry
    ctx: ReadContext = field(default_factory=ReadContext)

    def define_datasource(self, alias: str, value: str, header: Optional[Header] = None) -> Source:
        return self.registry.define(alias, value, header)

    def read(self, alias: str, *args: str) -> Data:
        source = self.registry.resolve(alias)
        return source.read(self.ctx, *args)

    def datasource(self, alias: str, *args: str) -> Any:
        """Lê e decodifica a datasource `alias` (alias, URL ou caminho)."""
        return self.read(alias, *args).unmarshal()

    def include(self, alias: str, *args: str) -> str:
        """Lê a datasource `alias` e devolve o payload como texto, sem decode."""
        return self.read(alias, *args).text()

    def datasource_exists(self, alias: str) -> bool:
        return self.registry.get(alias) is not None

    def datasource_reachable(self, alias: str) -> bool:
        if not self.datasource_exists(alias):
            return False
        try:
            self.read(alias)
        except (DatasourceError, OSError) as e:
            logger.debug("datasource %r not reachable: %s", alias, e)
            return False
        return True

    def list_datasources(self) -> List[str]:
        return self.registry.aliases()
