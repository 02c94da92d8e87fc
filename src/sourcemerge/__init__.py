# src/sourcemerge/__init__.py
"""
sourcemerge — resolução, leitura e merge de datasources.

Este pacote raiz define o namespace público do sourcemerge: um
subsistema que transforma uma referência textual (alias registrado,
URL ou caminho) em uma datasource plugável, lê seu conteúdo como
documento estruturado e, para o scheme especial `merge:`, combina
várias datasources em um único documento.

Arquitetura em alto nível:
    - core.registry → aliases, resolução dinâmica e fallback por caminho
    - core.sources  → contrato de backend e readers embutidos (file, env, merge)
    - core.data     → resultado de leitura com decode preguiçoso
    - core.merge    → política de deep-merge (posterior vence)
    - core.config   → declaração de aliases em YAML/JSON
    - accessors     → funções expostas ao engine de templates

Limites explícitos:
    - Não renderiza templates
    - Não implementa protocolos de backends remotos
    - Não possui CLI
"""

from .accessors import Datasources
from .core.context import ReadContext
from .core.data.data import Data
from .core.errors import (
    DatasourceError,
    DecodeError,
    MergeArityError,
    SourceReadError,
    SourceResolutionError,
    UnexpectedDataTypeError,
)
from .core.registry.registry import SourceRegistry, open_registry
from .core.sources.reader import Reader
from .core.sources.source import Source

__all__ = [
    "Data",
    "DatasourceError",
    "Datasources",
    "DecodeError",
    "MergeArityError",
    "ReadContext",
    "Reader",
    "Source",
    "SourceReadError",
    "SourceRegistry",
    "SourceResolutionError",
    "UnexpectedDataTypeError",
    "open_registry",
]
