# src/sourcemerge/core/registry/registry.py
"""
Registro de datasources do sourcemerge.

Este módulo define o `SourceRegistry`, responsável por manter os
bindings alias → `Source` de uma invocação e a tabela scheme → `Reader`
usada para construir datasources dinamicamente.

O registry oferece:
    - lookup puro por alias (`get`), sem I/O e sem erro
    - construção dinâmica a partir de URLs com scheme (`dynamic`)
    - registro idempotente de aliases (`register`, `define`)
    - a cadeia completa de resolução (`resolve`)

Decisões arquiteturais:
    - O registry não guarda estado de I/O, apenas bindings
    - Bindings são protegidos por lock: leituras concorrentes de merges
      independentes são seguras
    - O tempo de vida é explícito (`open_registry`), nunca um global oculto

Invariantes:
    - Registrar o mesmo alias duas vezes devolve o binding original
    - Todo `Source` registrado possui um reader para o seu scheme

Limites explícitos:
    - Não lê datasources
    - Não decodifica nem faz merge de documentos
    - Não implementa protocolo de backend algum
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Union
from urllib.parse import SplitResult

from ..config.loader import parse_datasources
from ..errors import UnsupportedSchemeError
from ..sources.env import EnvReader
from ..sources.file import FileReader
from ..sources.merge import MergeReader
from ..sources.reader import Header, Reader
from ..sources.source import Source
from .resolve import resolve_source
from .url import parse_absolute_url, parse_source_url

logger = logging.getLogger(__name__)


@dataclass
class SourceRegistry:
    """
    Registro canônico de datasources de uma invocação.

    Campos:
        - base_dir: diretório contra o qual caminhos relativos são resolvidos
          (None → diretório de trabalho atual)
    """

    base_dir: Optional[Union[str, Path]] = None

    _readers: Dict[str, Reader] = field(default_factory=dict, init=False, repr=False)
    _sources: Dict[str, Source] = field(default_factory=dict, init=False, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, init=False, repr=False)

    @classmethod
    def with_default_readers(
        cls,
        base_dir: Optional[Union[str, Path]] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "SourceRegistry":
        registry = cls(base_dir=base_dir)
        registry.add_reader("file", FileReader())
        registry.add_reader("env", EnvReader(environ))
        registry.add_reader("merge", MergeReader(registry))
        return registry

    # -----------------------------
    # Readers
    # -----------------------------
    def add_reader(self, scheme: str, reader: Reader) -> None:
        if not isinstance(scheme, str) or not scheme.strip():
            raise ValueError("scheme must be a non-empty string")
        if not isinstance(reader, Reader):
            raise TypeError(f"{type(reader).__name__} does not implement Reader.read")
        with self._lock:
            self._readers[scheme.strip().lower()] = reader

    def reader_for(self, scheme: str) -> Reader:
        reader = self._readers.get(scheme.lower())
        if reader is None:
            raise UnsupportedSchemeError(scheme)
        return reader

    # -----------------------------
    # Bindings
    # -----------------------------
    def get(self, alias: str) -> Optional[Source]:
        return self._sources.get(alias)

    def dynamic(self, value: str, header: Optional[Header] = None) -> Source:
        """
        Constrói (sem ler e sem registrar) um `Source` a partir de uma URL com scheme.

        URLs `file:` relativas são resolvidas contra `base_dir`.

        Raises:
            InvalidSourceURLError: Se `value` não for uma URL absoluta.
            UnsupportedSchemeError: Se não houver reader para o scheme.
        """
        url = parse_absolute_url(value, base_dir=self.base_dir)
        reader = self.reader_for(url.scheme)
        return Source(alias="", url=url, reader=reader, header=dict(header or {}))

    def register(self, alias: str, url: SplitResult, header: Optional[Header] = None) -> Source:
        """
        Registra `alias` apontando para `url`.

        O registro é idempotente: se o alias já existe, o binding original
        é devolvido sem alteração.

        Raises:
            UnsupportedSchemeError: Se não houver reader para o scheme da URL.
        """
        with self._lock:
            existing = self._sources.get(alias)
            if existing is not None:
                return existing

            source = Source(
                alias=alias,
                url=url,
                reader=self.reader_for(url.scheme),
                header=dict(header or {}),
            )
            self._sources[alias] = source

        logger.debug("registered datasource %r -> %s", alias, source.uri)
        return source

    def define(self, alias: str, value: str, header: Optional[Header] = None) -> Source:
        """Registra `alias` a partir de uma URL ou caminho (relativo a `base_dir`)."""
        url = parse_source_url(value, base_dir=self.base_dir)
        return self.register(alias, url, header)

    def resolve(self, value: str) -> Source:
        """Resolve `value` por alias → URL dinâmica → caminho relativo."""
        return resolve_source(self, value)

    def aliases(self) -> List[str]:
        with self._lock:
            return sorted(self._sources)

    def configure(self, config: Mapping[str, Any]) -> None:
        """Registra todas as entradas de `datasources` de uma configuração resolvida."""
        for alias, spec in parse_datasources(config).items():
            self.define(alias, spec.url, spec.header)

    def clear(self) -> None:
        with self._lock:
            self._sources.clear()


@contextmanager
def open_registry(
    *,
    config: Optional[Mapping[str, Any]] = None,
    base_dir: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Iterator[SourceRegistry]:
    """
    Abre um registry com os readers embutidos para uma invocação.

    Os aliases declarados em `config` são registrados na abertura; todos
    os bindings são descartados no fechamento.
    """
    registry = SourceRegistry.with_default_readers(base_dir=base_dir, environ=environ)
    if config is not None:
        registry.configure(config)
    try:
        yield registry
    finally:
        registry.clear()
