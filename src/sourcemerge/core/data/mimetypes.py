# src/sourcemerge/core/data/mimetypes.py
"""
Media types suportados e regras de inferência.

Política de inferência (v1), em ordem:
    - media type explícito (definido pelo reader)
    - parâmetro `type` na query string da URL
    - sufixo do path da URL
    - sniff de conteúdo (objeto/array JSON)
    - `text/plain`

Limites explícitos:
    - Não decodifica payloads (ver `codecs`)
    - Não consulta headers HTTP
"""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Dict, Optional
from urllib.parse import SplitResult, parse_qs, unquote

JSON_MIMETYPE = "application/json"
JSON_ARRAY_MIMETYPE = "application/array+json"
YAML_MIMETYPE = "application/yaml"
CSV_MIMETYPE = "text/csv"
TEXT_MIMETYPE = "text/plain"

# aliases -> media type canônico
_ALIASES: Dict[str, str] = {
    JSON_ARRAY_MIMETYPE: JSON_MIMETYPE,
    "text/json": JSON_MIMETYPE,
    "application/x-yaml": YAML_MIMETYPE,
    "text/yaml": YAML_MIMETYPE,
    "text/x-yaml": YAML_MIMETYPE,
}

_SUFFIXES: Dict[str, str] = {
    ".json": JSON_MIMETYPE,
    ".yaml": YAML_MIMETYPE,
    ".yml": YAML_MIMETYPE,
    ".csv": CSV_MIMETYPE,
    ".txt": TEXT_MIMETYPE,
}


def normalize(media_type: str) -> str:
    """Remove parâmetros (`; charset=...`), normaliza caixa e aplica aliases."""
    base = media_type.split(";", 1)[0].strip().lower()
    return _ALIASES.get(base, base)


def from_query(url: Optional[SplitResult]) -> Optional[str]:
    if url is None or not url.query:
        return None
    values = parse_qs(url.query).get("type")
    if not values or not values[0].strip():
        return None
    return values[0]


def from_suffix(url: Optional[SplitResult]) -> Optional[str]:
    if url is None or not url.path:
        return None
    suffix = PurePosixPath(unquote(url.path)).suffix.lower()
    return _SUFFIXES.get(suffix)


def sniff(raw: bytes) -> Optional[str]:
    head = raw.lstrip()[:1]
    if head in (b"{", b"["):
        return JSON_MIMETYPE
    return None


def infer(url: Optional[SplitResult], raw: bytes) -> str:
    for candidate in (from_query(url), from_suffix(url), sniff(raw)):
        if candidate:
            return normalize(candidate)
    return TEXT_MIMETYPE
