# src/sourcemerge/core/data/codecs.py
"""
Decoders e encoder canônico de documentos estruturados.

Este módulo concentra a conversão entre bytes e valores Python genéricos
(dict, list, escalares) para cada media type suportado, além da
serialização canônica usada para republicar o resultado de um merge.

Formatos suportados (v1):
    - JSON  → json.loads
    - YAML  → yaml.safe_load (PyYAML)
    - CSV   → lista de linhas (dict por linha, via csv.DictReader)
    - texto → str

Decisões arquiteturais:
    - Arquivos YAML vazios decodificam para `None` (o chamador decide)
    - CSV não realiza coerção de tipos; todos os valores são strings
    - A serialização canônica é YAML em block style com chaves ordenadas

Invariantes:
    - Falhas de parser são sempre convertidas em `DecodeError`
    - O mesmo valor sempre produz os mesmos bytes no encode

Limites explícitos:
    - Não infere media type (ver `mimetypes`)
    - Não realiza merge
"""

from __future__ import annotations

import csv
import io
import json
from typing import Any, Callable, Dict

import yaml  # PyYAML

from ..errors import DecodeError, EncodeError, UnsupportedMediaTypeError
from . import mimetypes


def _decode_json(text: str) -> Any:
    return json.loads(text)


def _decode_yaml(text: str) -> Any:
    return yaml.safe_load(text)


def _decode_csv(text: str) -> Any:
    reader = csv.DictReader(io.StringIO(text, newline=""))
    return list(reader)


def _decode_text(text: str) -> Any:
    return text


_DECODERS: Dict[str, Callable[[str], Any]] = {
    mimetypes.JSON_MIMETYPE: _decode_json,
    mimetypes.YAML_MIMETYPE: _decode_yaml,
    mimetypes.CSV_MIMETYPE: _decode_csv,
    mimetypes.TEXT_MIMETYPE: _decode_text,
}


def decode(raw: bytes, media_type: str) -> Any:
    """
    Decodifica `raw` segundo `media_type`.

    Qualquer media type sob `text/` sem decoder próprio é tratado como
    texto puro.

    Raises:
        UnsupportedMediaTypeError: Se não houver decoder para o media type.
        DecodeError: Se o payload for inválido para o formato.
    """
    mtype = mimetypes.normalize(media_type)
    decoder = _DECODERS.get(mtype)
    if decoder is None:
        if not mtype.startswith("text/"):
            raise UnsupportedMediaTypeError(mtype)
        decoder = _decode_text

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(mtype, f"payload is not valid UTF-8: {e}") from e

    try:
        return decoder(text)
    except (ValueError, yaml.YAMLError, csv.Error) as e:
        raise DecodeError(mtype, str(e)) from e


def encode_yaml(value: Any) -> bytes:
    """Serializa `value` como YAML canônico (block style, chaves ordenadas)."""
    try:
        out = yaml.safe_dump(
            value,
            default_flow_style=False,
            sort_keys=True,
            allow_unicode=True,
        )
    except yaml.YAMLError as e:
        raise EncodeError(f"unable to encode merged data as YAML: {e}") from e
    return out.encode("utf-8")
