# tests/core/data/test_codecs.py
"""Testes dos decoders por media type e do encoder YAML canônico."""

import pytest
import yaml

from sourcemerge.core.data.codecs import decode, encode_yaml
from sourcemerge.core.errors import DecodeError, EncodeError


def test_decode_csv_rows_as_strings():
    rows = decode(b"name,port\napi,8080\nweb,80\n", "text/csv")
    assert rows == [{"name": "api", "port": "8080"}, {"name": "web", "port": "80"}]


def test_decode_empty_yaml_is_none():
    assert decode(b"", "application/yaml") is None


def test_decode_other_text_types_as_plain():
    assert decode(b"<b>hi</b>", "text/html") == "<b>hi</b>"


def test_decode_invalid_yaml():
    with pytest.raises(DecodeError) as excinfo:
        decode(b"a: [1, 2", "application/yaml")
    assert isinstance(excinfo.value.__cause__, yaml.YAMLError)


def test_decode_invalid_utf8():
    with pytest.raises(DecodeError):
        decode(b"\xff\xfe", "application/json")


def test_encode_yaml_is_canonical():
    out = encode_yaml({"b": {"z": 1, "y": [1, 2]}, "a": "á"})
    assert out == "a: á\nb:\n  y:\n  - 1\n  - 2\n  z: 1\n".encode("utf-8")
    assert encode_yaml({"a": "á", "b": {"y": [1, 2], "z": 1}}) == out


def test_encode_yaml_unrepresentable_value():
    with pytest.raises(EncodeError):
        encode_yaml({"when": object()})
