# src/sourcemerge/core/errors.py
"""
Exceções canônicas da camada de datasources do sourcemerge.

Este módulo define a hierarquia oficial de exceções utilizadas durante
a resolução, leitura, decodificação e merge de datasources.

As exceções aqui definidas representam **falhas explícitas** de uma
etapa bem definida do fluxo (resolução → leitura → decode → merge →
encode), e não erros genéricos de execução.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Toda falha carrega o identificador da datasource envolvida
    - Erros de backends são encadeados (`raise ... from exc`), nunca engolidos

Invariantes:
    - Todas as exceções de datasource herdam de `DatasourceError`
    - Nenhuma exceção implica retry ou recuperação automática

Limites explícitos:
    - Não define erros de configuração (ver `core.config.errors`)
    - Não realiza fallback ou recovery

Este módulo existe para garantir diagnóstico claro
de qual datasource falhou e em qual etapa.
"""

from __future__ import annotations

from typing import List, Optional, Sequence


class DatasourceError(Exception):
    """
    Exceção base para erros relacionados a datasources.

    Permite captura genérica de qualquer falha do subsistema por parte
    do chamador (ex.: o renderer decide abortar ou substituir um default).
    """


# ---------------------------------------------------------------------------
# URL / resolução
# ---------------------------------------------------------------------------

class InvalidSourceURLError(DatasourceError):
    """O valor informado não é uma URL absoluta (com scheme) válida."""


class UnsupportedSchemeError(DatasourceError):
    """
    Exceção levantada quando o scheme de uma URL não possui reader registrado.

    Decisões arquiteturais:
        - Schemes são resolvidos exclusivamente pela tabela do registry
        - Nenhum scheme é inferido ou reescrito implicitamente
    """

    def __init__(self, scheme: str) -> None:
        super().__init__(f"no datasource reader registered for scheme '{scheme}'")
        self.scheme = scheme


class SourceResolutionError(DatasourceError):
    """
    Exceção levantada quando nenhuma estratégia consegue resolver um identificador.

    A resolução tenta, nesta ordem: alias registrado, URL dinâmica e
    caminho relativo no filesystem. Quando as três estratégias recusam o
    valor, esta exceção é levantada com o identificador original e os
    motivos de cada recusa.

    Atributos:
        source: identificador original (alias, URL ou caminho)
        reasons: motivo de recusa de cada estratégia, na ordem tentada
    """

    def __init__(self, source: str, reasons: Optional[Sequence[str]] = None) -> None:
        self.source = source
        self.reasons: List[str] = list(reasons or [])
        detail = "; ".join(self.reasons)
        msg = f"Couldn't resolve datasource '{source}'"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)


# ---------------------------------------------------------------------------
# Leitura
# ---------------------------------------------------------------------------

class DatasourceNotFoundError(DatasourceError):
    """O recurso por trás da datasource (arquivo, variável) não existe."""


class SourceReadError(DatasourceError):
    """
    Falha ao ler uma datasource já resolvida.

    O erro original do backend fica disponível em `__cause__`.
    """

    def __init__(self, source: str, message: Optional[str] = None) -> None:
        self.source = source
        super().__init__(message or f"Couldn't read datasource '{source}'")


# ---------------------------------------------------------------------------
# Decode / encode
# ---------------------------------------------------------------------------

class DecodeError(DatasourceError):
    """
    Exceção levantada quando o payload não pode ser interpretado no media type resolvido.

    Invariantes:
        - A mensagem sempre inclui o media type utilizado no decode
        - O erro do parser (json/yaml/csv) é preservado em `__cause__`
    """

    def __init__(self, media_type: str, message: str) -> None:
        self.media_type = media_type
        super().__init__(f"unable to parse datasource (type {media_type}): {message}")


class UnsupportedMediaTypeError(DecodeError):
    """Não existe decoder para o media type resolvido."""

    def __init__(self, media_type: str) -> None:
        super().__init__(media_type, "unsupported media type")


class EncodeError(DatasourceError):
    """Falha ao serializar o documento resultante do merge."""


# ---------------------------------------------------------------------------
# Merge
# ---------------------------------------------------------------------------

class MergeArityError(DatasourceError):
    """Uma URL `merge:` precisa de pelo menos duas partes."""


class UnexpectedDataTypeError(DatasourceError):
    """
    Exceção levantada quando uma datasource do merge não decodifica para um mapa.

    O merge só é definido sobre mapas (dict). Escalares, listas e `None`
    no root de qualquer parte invalidam o merge inteiro.

    Atributos:
        data_type: nome do tipo Python obtido no decode
        media_type: media type da datasource ofensora
    """

    def __init__(self, data_type: str, media_type: str) -> None:
        self.data_type = data_type
        self.media_type = media_type
        super().__init__(
            f"unexpected data type '{data_type}' for datasource "
            f"(type {media_type}); merge: can only merge maps"
        )


# ---------------------------------------------------------------------------
# Contexto
# ---------------------------------------------------------------------------

class ContextError(DatasourceError):
    """Base para interrupções sinalizadas pelo `ReadContext`."""


class ContextCancelledError(ContextError):
    """O contexto foi cancelado explicitamente."""


class DeadlineExceededError(ContextError):
    """O deadline do contexto expirou."""
