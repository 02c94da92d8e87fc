# src/sourcemerge/core/data/data.py
"""
Resultado canônico de uma leitura de datasource.

Este módulo define `Data`, o artefato produzido por toda chamada
`Source.read(...)`: bytes brutos, media type (explícito ou inferido) e
um valor decodificado em cache.

Princípios fundamentais:
    - Decode preguiçoso: o payload só é interpretado quando solicitado
    - Decode único: o valor decodificado é calculado no máximo uma vez
    - Reler uma datasource sempre produz um novo `Data`

Invariantes:
    - Após resolvido, o media type não muda durante a vida da instância
    - Após decodificado, o valor em cache não muda
    - Falhas de decode nunca são silenciadas

Limites explícitos:
    - Não realiza I/O
    - Não conhece o registry nem o merge
    - Não persiste dados
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple
from urllib.parse import SplitResult

from . import codecs, mimetypes

_UNSET = object()


@dataclass
class Data:
    """
    Uma leitura de uma datasource.

    Campos:
        - url: URL de origem (já parseada)
        - args: argumentos posicionais repassados à leitura
        - raw: payload em bytes
        - mtype: media type explícito definido pelo reader (opcional)

    Decisões arquiteturais:
        - `mtype` explícito tem precedência sobre qualquer inferência
        - O cache de decode é privado e não participa de `repr`/igualdade
    """
    url: Optional[SplitResult]
    args: Tuple[str, ...] = ()
    raw: bytes = b""
    mtype: Optional[str] = None

    _media_type: Optional[str] = field(default=None, init=False, repr=False, compare=False)
    _value: Any = field(default=_UNSET, init=False, repr=False, compare=False)

    def media_type(self) -> str:
        if self._media_type is None:
            if self.mtype:
                self._media_type = mimetypes.normalize(self.mtype)
            else:
                self._media_type = mimetypes.infer(self.url, self.raw)
        return self._media_type

    def unmarshal(self) -> Any:
        """
        Decodifica o payload segundo o media type, com cache.

        Cada chamada devolve uma cópia profunda do valor em cache; alterar
        o retorno não afeta chamadas seguintes.

        Raises:
            DecodeError: Se o payload for inválido para o media type.
            UnsupportedMediaTypeError: Se não houver decoder disponível.
        """
        if self._value is _UNSET:
            self._value = codecs.decode(self.raw, self.media_type())
        return copy.deepcopy(self._value)

    def text(self) -> str:
        return self.raw.decode("utf-8")
