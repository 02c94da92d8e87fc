"""Reader de referência: `file://`.

Responsabilidades (v1):
- ler o arquivo apontado pela URL como bytes, sem interpretação
- respeitar `?type=` como media type explícito
- aceitar um sub-path opcional em `args[0]` (relativo ao path da URL)

Limites explícitos (v1):
- NÃO lista diretórios
- NÃO suporta hosts remotos (apenas vazio ou `localhost`)
- NÃO resolve paths relativos (o registry os torna absolutos)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional
from urllib.parse import SplitResult, unquote

from ..context import ReadContext
from ..data.data import Data
from ..data.mimetypes import from_query
from ..errors import DatasourceNotFoundError, InvalidSourceURLError
from .reader import Header

logger = logging.getLogger(__name__)


def _resolve_path(url: SplitResult, args: tuple) -> Path:
    if url.netloc not in ("", "localhost"):
        raise InvalidSourceURLError(f"file: URLs must not name a remote host: {url.netloc}")

    raw_path = unquote(url.path)
    if not raw_path:
        raise InvalidSourceURLError("file: URL has an empty path")
    if not raw_path.startswith("/"):
        # caminhos relativos são resolvidos pelo registry, contra base_dir
        raise InvalidSourceURLError(f"file: URL path must be absolute: {raw_path}")

    p = Path(raw_path)
    if args and args[0]:
        p = p / args[0]

    if not p.exists():
        raise DatasourceNotFoundError(f"File not found: {p}")
    if not p.is_file():
        raise DatasourceNotFoundError(f"Path is not a file: {p}")
    return p


class FileReader:
    """Lê arquivos locais apontados por URLs `file:`."""

    def read(
        self,
        ctx: ReadContext,
        url: SplitResult,
        *args: str,
        header: Optional[Header] = None,
    ) -> Data:
        ctx.check()
        path = _resolve_path(url, args)
        raw = path.read_bytes()
        logger.debug("read %d bytes from %s", len(raw), path)
        return Data(url=url, args=tuple(args), raw=raw, mtype=from_query(url))
