# src/sourcemerge/core/data/__init__.py
"""
Camada de dados lidos do sourcemerge.

Componentes:
    - data      → `Data`: resultado imutável de uma leitura, com decode preguiçoso
    - mimetypes → constantes e inferência de media type
    - codecs    → decoders por media type e encoder YAML canônico
"""

from .data import Data
from .mimetypes import (
    CSV_MIMETYPE,
    JSON_ARRAY_MIMETYPE,
    JSON_MIMETYPE,
    TEXT_MIMETYPE,
    YAML_MIMETYPE,
)

__all__ = [
    "Data",
    "CSV_MIMETYPE",
    "JSON_ARRAY_MIMETYPE",
    "JSON_MIMETYPE",
    "TEXT_MIMETYPE",
    "YAML_MIMETYPE",
]
