# src/sourcemerge/core/registry/__init__.py
"""
Registro e resolução de datasources.

Componentes:
    - registry → `SourceRegistry` e `open_registry`
    - resolve  → cadeia alias → URL dinâmica → caminho relativo
    - url      → parsing de URLs e caminhos em `SplitResult`
"""

from .registry import SourceRegistry, open_registry
from .resolve import Resolution, ResolutionStatus, resolve_source
from .url import parse_absolute_url, parse_source_url

__all__ = [
    "Resolution",
    "ResolutionStatus",
    "SourceRegistry",
    "open_registry",
    "parse_absolute_url",
    "parse_source_url",
    "resolve_source",
]
