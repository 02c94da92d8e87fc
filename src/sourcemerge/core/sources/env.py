"""Reader de referência: `env:`.

Formas aceitas: `env:NAME` e `env:///NAME`, com `?type=` opcional.
O valor da variável é lido no momento do `read`, nunca no registro.
"""

from __future__ import annotations

import os
from typing import Mapping, Optional
from urllib.parse import SplitResult, unquote

from ..context import ReadContext
from ..data.data import Data
from ..data.mimetypes import from_query
from ..errors import DatasourceNotFoundError, InvalidSourceURLError
from .reader import Header


def _variable_name(url: SplitResult) -> str:
    name = unquote(url.path).lstrip("/") or url.netloc
    if not name:
        raise InvalidSourceURLError("env: URL must name a variable, e.g. env:HOME")
    return name


class EnvReader:
    """Lê variáveis de ambiente; `environ` é injetável para testes."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        self._environ = environ

    def read(
        self,
        ctx: ReadContext,
        url: SplitResult,
        *args: str,
        header: Optional[Header] = None,
    ) -> Data:
        ctx.check()
        environ = os.environ if self._environ is None else self._environ
        name = _variable_name(url)
        if name not in environ:
            raise DatasourceNotFoundError(f"Environment variable not set: {name}")
        raw = environ[name].encode("utf-8")
        return Data(url=url, args=tuple(args), raw=raw, mtype=from_query(url))
