# src/sourcemerge/core/sources/merge.py
"""
Reader composto: `merge:`.

Este módulo implementa o `MergeReader`, que lê uma URL
`merge:<source 1>|<source 2>[|<source n>...]`, resolve e lê cada parte
pelo registry, exige que cada documento seja um mapa, combina todos via
deep-merge e republica o resultado como YAML canônico.

Cada `<source #>` pode ser um alias registrado, qualquer URL aceita pela
resolução dinâmica ou, em último caso, um caminho de arquivo.

Política de leitura (v1):
    - Partes são lidas em sequência, na ordem da URL, na thread do chamador
    - O mesmo contexto é propagado para toda sub-leitura
    - Qualquer falha aborta o merge inteiro, sem resultado parcial
    - Nenhum retry é realizado

Decisões arquiteturais:
    - `args` e `header` são aceitos por uniformidade, mas não são repassados
      às partes; partes que precisam de headers ou query string devem ser
      registradas antes sob um alias
    - Query string e fragmento da URL externa pertencem ao resultado
      do merge, nunca a uma parte
    - O media type do resultado é sempre YAML, independente das entradas

Invariantes:
    - Menos de duas partes é erro, antes de qualquer leitura
    - Documentos posteriores têm precedência sobre anteriores
    - Listas são substituídas, nunca concatenadas

Limites explícitos:
    - Não implementa protocolo de backend algum
    - Não lê partes em paralelo
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional
from urllib.parse import SplitResult

from ..context import ReadContext
from ..data.codecs import encode_yaml
from ..data.data import Data
from ..data.mimetypes import YAML_MIMETYPE
from ..errors import ContextError, MergeArityError, SourceReadError, UnexpectedDataTypeError
from ..merge.deep_merge import merge_documents
from .reader import Header

if TYPE_CHECKING:  # pragma: no cover
    from ..registry.registry import SourceRegistry

logger = logging.getLogger(__name__)


def split_parts(url: SplitResult) -> List[str]:
    """Extrai as partes `|`-separadas da porção opaca de uma URL `merge:`."""
    opaque = url.path
    if url.netloc:
        opaque = f"//{url.netloc}{url.path}"
    return opaque.split("|")


def parse_map(data: Data) -> Dict[str, Any]:
    """
    Decodifica `data` e exige que o resultado seja um mapa.

    Raises:
        DecodeError: Se o payload não puder ser decodificado.
        UnexpectedDataTypeError: Se o documento não for um dict.
    """
    datum = data.unmarshal()
    if not isinstance(datum, dict):
        raise UnexpectedDataTypeError(type(datum).__name__, data.media_type())
    return datum


class MergeReader:
    """Combina várias datasources (mapas) em um único documento YAML."""

    def __init__(self, registry: "SourceRegistry") -> None:
        self._registry = registry

    def read(
        self,
        ctx: ReadContext,
        url: SplitResult,
        *args: str,
        header: Optional[Header] = None,
    ) -> Data:
        parts = split_parts(url)
        if len(parts) < 2:
            raise MergeArityError("need at least 2 datasources to merge")

        documents = [self._read_part(ctx, part) for part in parts]

        merged = merge_documents(documents)
        raw = encode_yaml(merged)

        ctx.log(
            source=f"merge:{'|'.join(parts)}",
            level="info",
            message="datasources merged",
            parts=len(parts),
            keys=len(merged),
        )
        return Data(url=url, args=tuple(args), raw=raw, mtype=YAML_MIMETYPE)

    def _read_part(self, ctx: ReadContext, part: str) -> Dict[str, Any]:
        # nenhuma sub-leitura começa depois de um erro de contexto
        ctx.check()

        source = self._registry.resolve(part)

        try:
            sub_data = source.read(ctx)
        except ContextError:
            raise
        except Exception as e:
            ctx.log(
                source=part,
                level="error",
                message="sub-source read failed",
                error_type=e.__class__.__name__,
                error_message=str(e) or "error",
            )
            raise SourceReadError(part, f"Couldn't read datasource '{part}': {e}") from e

        document = parse_map(sub_data)
        logger.debug("merge part %r decoded (type %s)", part, sub_data.media_type())
        return document
