# src/sourcemerge/core/registry/url.py
"""
Parsing de identificadores de datasource em URLs.

Dois modos de parsing são oferecidos:

    - `parse_absolute_url`: exige uma URL com scheme (usado na resolução
      dinâmica). Valores sem scheme são rejeitados.
    - `parse_source_url`: aceita também caminhos do filesystem (relativos
      ou absolutos), convertendo-os em URLs `file:` absolutas.

Decisões arquiteturais:
    - Caminhos relativos são resolvidos contra `base_dir` quando informado,
      senão contra o diretório de trabalho atual (vale também para
      `file:` com path relativo)
    - O path das URLs `file:` produzidas é sempre escapado; o reader o
      decodifica com `unquote`, de modo que as duas etapas se anulam
    - Query string e fragmento do valor original são preservados
    - O parsing não realiza I/O (o arquivo não precisa existir)

Limites explícitos:
    - Não suporta letras de drive do Windows
    - Não valida se o scheme possui reader (responsabilidade do registry)
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union
from urllib.parse import SplitResult, quote, unquote, urlsplit

from ..errors import InvalidSourceURLError


def _split(value: str) -> SplitResult:
    if not isinstance(value, str) or not value.strip():
        raise InvalidSourceURLError("datasource URL must be a non-empty string")
    try:
        return urlsplit(value.strip())
    except ValueError as e:
        raise InvalidSourceURLError(f"invalid datasource URL '{value}': {e}") from e


def has_scheme(value: str) -> bool:
    try:
        return bool(_split(value).scheme)
    except InvalidSourceURLError:
        return False


def _file_url(
    path: str,
    base_dir: Optional[Union[str, Path]],
    query: str = "",
    fragment: str = "",
) -> SplitResult:
    # `path` chega decodificado; o path da URL resultante é sempre escapado
    p = Path(path).expanduser()
    if not p.is_absolute():
        root = Path(base_dir) if base_dir is not None else Path.cwd()
        p = root / p
    out = p.absolute().as_posix()

    # preserva "/" final de diretórios
    if path.endswith("/") and not out.endswith("/"):
        out += "/"

    return SplitResult("file", "", quote(out), query, fragment)


def _absolutize(url: SplitResult, base_dir: Optional[Union[str, Path]]) -> SplitResult:
    url = url._replace(scheme=url.scheme.lower())
    if url.scheme == "file" and url.path and not url.path.startswith("/"):
        return _file_url(unquote(url.path), base_dir, url.query, url.fragment)
    return url


def parse_absolute_url(
    value: str,
    base_dir: Optional[Union[str, Path]] = None,
) -> SplitResult:
    """
    Parseia `value` como URL absoluta (com scheme).

    URLs `file:` com path relativo (`file:conf.yaml`) são resolvidas
    contra `base_dir`, como os caminhos sem scheme.

    Raises:
        InvalidSourceURLError: Se o valor for vazio, malformado ou sem scheme.
    """
    url = _split(value)
    if not url.scheme:
        raise InvalidSourceURLError(f"'{value}' is not an absolute URL (missing scheme)")
    return _absolutize(url, base_dir)


def parse_source_url(
    value: str,
    base_dir: Optional[Union[str, Path]] = None,
) -> SplitResult:
    """
    Parseia `value` como URL ou caminho do filesystem.

    Valores com scheme são devolvidos como URL absoluta. Valores sem
    scheme são interpretados como caminho e convertidos em `file:` com
    path absoluto e escapado (`%` no nome do arquivo vira `%25`).

    Raises:
        InvalidSourceURLError: Se o valor for vazio ou malformado.
    """
    url = _split(value)
    if url.scheme:
        return _absolutize(url, base_dir)

    if not url.path:
        raise InvalidSourceURLError(f"'{value}' has no path")

    return _file_url(url.path, base_dir, url.query, url.fragment)
