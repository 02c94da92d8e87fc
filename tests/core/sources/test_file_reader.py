# tests/core/sources/test_file_reader.py
"""Testes do reader embutido `file:`."""

from pathlib import Path
from urllib.parse import urlsplit

import pytest

from sourcemerge.core.errors import (
    ContextCancelledError,
    DatasourceNotFoundError,
    InvalidSourceURLError,
)
from sourcemerge.core.sources.file import FileReader
from sourcemerge.core.sources.reader import Reader


def _file_url(path: Path, query: str = "") -> str:
    url = f"file://{path.as_posix()}"
    return f"{url}?{query}" if query else url


def test_file_reader_satisfies_protocol():
    assert isinstance(FileReader(), Reader)


def test_reads_raw_bytes_and_infers_type(workdir: Path, ctx):
    data = FileReader().read(ctx, urlsplit(_file_url(workdir / "defaults.yaml")))
    assert data.raw == (workdir / "defaults.yaml").read_bytes()
    assert data.mtype is None
    assert data.media_type() == "application/yaml"
    assert data.unmarshal()["service"]["port"] == 8080


def test_query_type_sets_explicit_mtype(workdir: Path, ctx):
    (workdir / "conf.cfg").write_text('{"k": 1}', encoding="utf-8")
    url = urlsplit(_file_url(workdir / "conf.cfg", "type=application/json"))
    data = FileReader().read(ctx, url)
    assert data.mtype == "application/json"
    assert data.unmarshal() == {"k": 1}


def test_sub_path_argument(workdir: Path, ctx):
    data = FileReader().read(ctx, urlsplit(_file_url(workdir) + "/"), "overrides.json")
    assert data.unmarshal()["replicas"] == 3
    assert data.args == ("overrides.json",)


def test_missing_file(workdir: Path, ctx):
    with pytest.raises(DatasourceNotFoundError):
        FileReader().read(ctx, urlsplit(_file_url(workdir / "nope.yaml")))


def test_directory_is_not_a_file(workdir: Path, ctx):
    with pytest.raises(DatasourceNotFoundError):
        FileReader().read(ctx, urlsplit(_file_url(workdir)))


def test_remote_host_rejected(ctx):
    with pytest.raises(InvalidSourceURLError):
        FileReader().read(ctx, urlsplit("file://example.com/etc/hosts"))


def test_cancelled_context_prevents_read(workdir: Path, ctx):
    ctx.cancel()
    with pytest.raises(ContextCancelledError):
        FileReader().read(ctx, urlsplit(_file_url(workdir / "defaults.yaml")))


def test_relative_path_rejected(ctx):
    with pytest.raises(InvalidSourceURLError):
        FileReader().read(ctx, urlsplit("file:defaults.yaml"))
