# src/sourcemerge/core/registry/resolve.py
"""
Cadeia canônica de resolução de identificadores em datasources.

Este módulo transforma uma string arbitrária (alias, URL ou caminho)
em um `Source` legível, aplicando estratégias em ordem fixa:

    1. alias registrado            (`by_alias`)
    2. URL dinâmica com scheme     (`by_dynamic_url`)
    3. caminho no filesystem       (`by_relative_path`, registra o valor)

A primeira estratégia que encontra uma datasource vence.

Decisões arquiteturais:
    - Cada estratégia é uma função que retorna um `Resolution` marcado
      (FOUND / NOT_FOUND); recusa não é exceção
    - Erros inesperados (bugs, tipos inválidos) continuam sendo exceções
    - A ordem é contrato: trocá-la muda quais valores são mal resolvidos
      silenciosamente (ex.: um alias sombreado por uma URL)

Invariantes:
    - Um alias registrado sempre tem precedência sobre uma URL idêntica
    - Se todas as estratégias recusam, `SourceResolutionError` é levantada
      com o valor original e o motivo de cada recusa

Limites explícitos:
    - Não lê datasources
    - Não valida a existência de arquivos
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Optional, Sequence

from ..errors import InvalidSourceURLError, SourceResolutionError, UnsupportedSchemeError
from ..sources.source import Source
from .url import has_scheme, parse_source_url

if TYPE_CHECKING:  # pragma: no cover
    from .registry import SourceRegistry

logger = logging.getLogger(__name__)


class ResolutionStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Resolution:
    """Resultado marcado de uma estratégia de resolução."""
    status: ResolutionStatus
    source: Optional[Source] = None
    reason: Optional[str] = None

    @classmethod
    def found(cls, source: Source) -> "Resolution":
        return cls(status=ResolutionStatus.FOUND, source=source)

    @classmethod
    def not_found(cls, reason: str) -> "Resolution":
        return cls(status=ResolutionStatus.NOT_FOUND, reason=reason)


Strategy = Callable[["SourceRegistry", str], Resolution]


def by_alias(registry: "SourceRegistry", value: str) -> Resolution:
    source = registry.get(value)
    if source is None:
        return Resolution.not_found("no alias registered")
    return Resolution.found(source)


def by_dynamic_url(registry: "SourceRegistry", value: str) -> Resolution:
    try:
        return Resolution.found(registry.dynamic(value))
    except (InvalidSourceURLError, UnsupportedSchemeError) as e:
        return Resolution.not_found(str(e))


def by_relative_path(registry: "SourceRegistry", value: str) -> Resolution:
    if not value.strip():
        return Resolution.not_found("empty path")
    if has_scheme(value):
        return Resolution.not_found("value carries a URL scheme, not a path")
    try:
        url = parse_source_url(value, base_dir=registry.base_dir)
        return Resolution.found(registry.register(value, url))
    except (InvalidSourceURLError, UnsupportedSchemeError) as e:
        return Resolution.not_found(str(e))


DEFAULT_STRATEGIES: Sequence[Strategy] = (by_alias, by_dynamic_url, by_relative_path)


def resolve_source(
    registry: "SourceRegistry",
    value: str,
    strategies: Sequence[Strategy] = DEFAULT_STRATEGIES,
) -> Source:
    """
    Resolve `value` em um `Source` aplicando `strategies` em ordem.

    Raises:
        SourceResolutionError: Se nenhuma estratégia encontrar uma datasource.
    """
    reasons = []
    for strategy in strategies:
        resolution = strategy(registry, value)
        if resolution.status is ResolutionStatus.FOUND:
            logger.debug("resolved datasource %r via %s", value, strategy.__name__)
            return resolution.source  # type: ignore[return-value]
        reasons.append(f"{strategy.__name__}: {resolution.reason}")

    raise SourceResolutionError(value, reasons)
