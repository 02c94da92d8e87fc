# src/sourcemerge/core/sources/source.py
"""
Datasource resolvida: alias + URL + headers + reader.

Um `Source` é o que o registry entrega a quem precisa ler uma
datasource. Ele oferece a capacidade `read(ctx, *args) -> Data`
delegando ao reader do seu scheme.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
from urllib.parse import SplitResult, urlunsplit

from ..context import ReadContext
from ..data.data import Data
from .reader import Header, Reader


@dataclass(frozen=True)
class Source:
    """
    Binding imutável entre um identificador e o reader do seu scheme.

    Campos:
        - alias: nome registrado (vazio para sources dinâmicas não registradas)
        - url: URL parseada da datasource
        - reader: backend que satisfaz o protocolo `Reader`
        - header: headers opcionais repassados ao reader
    """
    alias: str
    url: SplitResult
    reader: Reader
    header: Header = field(default_factory=dict)

    @property
    def uri(self) -> str:
        return urlunsplit(self.url)

    def read(self, ctx: ReadContext, *args: str) -> Data:
        header: Optional[Header] = self.header or None
        return self.reader.read(ctx, self.url, *args, header=header)
