# tests/conftest.py
"""
Fixtures compartilhados para testes do sourcemerge.

Este módulo define fixtures reutilizáveis que fornecem:
- documentos YAML/JSON mínimos e determinísticos
- diretório de trabalho com arquivos de datasource prontos
- registry com readers embutidos, isolado por teste
- contexto de leitura (ReadContext) controlado
- reader em memória (`mem:`) que registra as chamadas recebidas

Decisões arquiteturais:
    - O reader em memória utiliza duck typing em vez de herança
    - Arquivos são sempre criados sob `tmp_path`
    - Variáveis de ambiente são injetadas, nunca lidas do processo

Invariantes:
    - Nenhuma fixture acessa rede
    - Nenhuma fixture depende do diretório de trabalho do processo
    - Todas as fixtures são seguras para execução em paralelo

Este módulo existe como infraestrutura de teste e não
como validação funcional do subsistema.
"""

from pathlib import Path

import pytest


# =====================================================
# Documentos
# =====================================================

@pytest.fixture
def defaults_yaml() -> str:
    """
    Documento base (defaults) em YAML, usado como primeira parte de merges.

    Returns:
        str: Conteúdo YAML de um mapa com chaves aninhadas e lista.
    """

    return """\
service:
  name: api
  port: 8080
  tags: [web, public]
log_level: INFO
"""


@pytest.fixture
def overrides_json() -> str:
    """Documento de overrides em JSON, aplicado sobre `defaults_yaml`."""

    return '{"service": {"port": 9090, "tags": ["internal"]}, "replicas": 3}'


@pytest.fixture
def workdir(tmp_path: Path, defaults_yaml: str, overrides_json: str) -> Path:
    """
    Diretório temporário com datasources prontas para leitura.

    Conteúdo:
        - defaults.yaml  → mapa base
        - overrides.json → mapa de overrides
        - list.yaml      → lista (inválida para merge)
        - scalar.txt     → texto puro (inválido para merge)
    """

    (tmp_path / "defaults.yaml").write_text(defaults_yaml, encoding="utf-8")
    (tmp_path / "overrides.json").write_text(overrides_json, encoding="utf-8")
    (tmp_path / "list.yaml").write_text("- 1\n- 2\n", encoding="utf-8")
    (tmp_path / "scalar.txt").write_text("hello", encoding="utf-8")
    return tmp_path


# =====================================================
# Registry & contexto
# =====================================================

@pytest.fixture
def ctx():
    from sourcemerge.core.context import ReadContext

    return ReadContext()


@pytest.fixture
def environ() -> dict:
    return {
        "APP_CONFIG": '{"service": {"name": "from-env"}, "debug": true}',
        "GREETING": "hi",
    }


@pytest.fixture
def registry(workdir: Path, environ: dict):
    """Registry com readers embutidos, caminhos relativos a `workdir`."""
    from sourcemerge.core.registry.registry import SourceRegistry

    return SourceRegistry.with_default_readers(base_dir=workdir, environ=environ)


@pytest.fixture
def MemoryReader():
    """
    Fixture que fornece uma classe de reader em memória (`mem:`).

    O reader devolve payloads pré-definidos por nome (path da URL) e
    registra cada chamada em `calls`, permitindo verificar ordem,
    quantidade de leituras e argumentos repassados.

    Decisões arquiteturais:
        - Satisfaz o protocolo `Reader` por duck typing
        - Nomes ausentes levantam `DatasourceNotFoundError`
        - Um nome em `failures` levanta a exceção associada

    Returns:
        type: Classe _MemoryReader que pode ser instanciada pelos testes.
    """
    from sourcemerge.core.data.data import Data
    from sourcemerge.core.errors import DatasourceNotFoundError

    class _MemoryReader:
        def __init__(self, payloads=None, failures=None):
            self.payloads = dict(payloads or {})
            self.failures = dict(failures or {})
            self.calls = []

        def read(self, ctx, url, *args, header=None):
            name = url.path.lstrip("/")
            self.calls.append({"name": name, "args": args, "header": header})
            if name in self.failures:
                raise self.failures[name]
            if name not in self.payloads:
                raise DatasourceNotFoundError(f"no payload named {name}")
            raw, mtype = self.payloads[name]
            return Data(url=url, args=tuple(args), raw=raw, mtype=mtype)

    return _MemoryReader
