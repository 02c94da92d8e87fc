# src/sourcemerge/core/sources/__init__.py
"""
# Sources — sourcemerge

Este pacote define o **contrato de backend** (`Reader`), o binding
resolvido (`Source`) e os readers embutidos.

## Componentes

- **reader**: `Reader` (Protocol) — `read(ctx, url, *args, header=None) -> Data`
- **source**: `Source` — alias + URL + headers + reader
- **file**: `FileReader` — `file:` e caminhos locais
- **env**: `EnvReader` — `env:NAME`
- **merge**: `MergeReader` — `merge:a|b|...`, composto sobre o registry

## Princípios Fundamentais

- Backends são plugados **por scheme**, sem herança
- Nenhum backend é privilegiado pelo registry
- O merge consome outros backends apenas via `Source.read`
"""

from .env import EnvReader
from .file import FileReader
from .merge import MergeReader
from .reader import Header, Reader
from .source import Source

__all__ = ["EnvReader", "FileReader", "Header", "MergeReader", "Reader", "Source"]
