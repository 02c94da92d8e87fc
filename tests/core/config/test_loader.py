# tests/core/config/test_loader.py
"""
Testes do carregador de configuração de datasources.

Este módulo valida o comportamento do loader responsável por:
- carregar o arquivo base e o arquivo local (override)
- validar estrutura mínima da configuração
- extrair e validar as entradas de `datasources`

Os testes asseguram que:
- o arquivo base é obrigatório
- o arquivo local é opcional
- formatos não suportados são rejeitados
- entradas de datasource inválidas são detectadas precocemente

Invariantes:
    - A configuração final é sempre um dicionário
    - Nenhuma configuração parcial é retornada em caso de erro
"""

from pathlib import Path

import pytest

try:
    from sourcemerge.core.config.loader import DatasourceSpec, load_config, parse_datasources
    from sourcemerge.core.config.errors import (
        ConfigNotFoundError,
        InvalidConfigRootTypeError,
        InvalidDatasourceEntryError,
        UnsupportedConfigFormatError,
    )
except Exception as e:  # noqa: BLE001
    load_config = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que o loader de configuração e suas exceções tipadas estejam disponíveis.

    Falha imediatamente, com a lista de símbolos esperados, quando o
    contrato do loader está ausente.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing config loader. Implement:\n"
            "- src/sourcemerge/core/config/loader.py (load_config, parse_datasources)\n"
            "- src/sourcemerge/core/config/errors.py\n"
            f"Import error: {_IMPORT_ERR}"
        )


BASE_YAML = """\
datasources:
  defaults:
    url: defaults.yaml
  app:
    url: env:APP_CONFIG
    header:
      Accept: application/json
"""

LOCAL_YAML = """\
datasources:
  app:
    url: env:APP_CONFIG_LOCAL
  extra: extra.json
"""


def test_missing_base_raises(tmp_path: Path):
    _require_imports()
    with pytest.raises(ConfigNotFoundError):
        load_config(defaults_path=str(tmp_path / "sources.yaml"))


def test_missing_local_is_ok(tmp_path: Path):
    """
    Verifica que a ausência do arquivo local não é erro.

    O arquivo local é um override opcional: quando não existe no disco,
    a configuração base é devolvida sem alteração.
    """
    _require_imports()
    base = tmp_path / "sources.yaml"
    base.write_text(BASE_YAML, encoding="utf-8")

    out = load_config(defaults_path=str(base), local_path=str(tmp_path / "local.yaml"))
    assert out["datasources"]["app"]["url"] == "env:APP_CONFIG"


def test_local_overrides_base(tmp_path: Path):
    _require_imports()
    base = tmp_path / "sources.yaml"
    local = tmp_path / "sources.local.yaml"
    base.write_text(BASE_YAML, encoding="utf-8")
    local.write_text(LOCAL_YAML, encoding="utf-8")

    out = load_config(defaults_path=str(base), local_path=str(local))
    ds = out["datasources"]
    assert ds["app"]["url"] == "env:APP_CONFIG_LOCAL"
    assert ds["app"]["header"] == {"Accept": "application/json"}
    assert ds["defaults"]["url"] == "defaults.yaml"
    assert ds["extra"] == "extra.json"


def test_json_and_empty_files(tmp_path: Path):
    _require_imports()
    base = tmp_path / "sources.json"
    base.write_text('{"datasources": {"a": "a.yaml"}}', encoding="utf-8")
    assert load_config(defaults_path=str(base)) == {"datasources": {"a": "a.yaml"}}

    empty = tmp_path / "empty.yml"
    empty.write_text("", encoding="utf-8")
    assert load_config(defaults_path=str(empty)) == {}


def test_unsupported_format(tmp_path: Path):
    _require_imports()
    path = tmp_path / "sources.toml"
    path.write_text("x = 1", encoding="utf-8")
    with pytest.raises(UnsupportedConfigFormatError):
        load_config(defaults_path=str(path))


def test_root_must_be_dict(tmp_path: Path):
    _require_imports()
    path = tmp_path / "sources.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(InvalidConfigRootTypeError):
        load_config(defaults_path=str(path))


def test_parse_datasources_normalizes_entries():
    _require_imports()
    specs = parse_datasources(
        {
            "datasources": {
                "short": " merge:a|b ",
                "full": {"url": "env:X", "header": {"Accept": "a/b", "X-Multi": ["1", "2"]}},
            }
        }
    )
    assert specs["short"] == DatasourceSpec(alias="short", url="merge:a|b")
    assert specs["full"].header == {"Accept": ["a/b"], "X-Multi": ["1", "2"]}


def test_parse_datasources_without_section():
    _require_imports()
    assert parse_datasources({"other": 1}) == {}


@pytest.mark.parametrize(
    "section",
    [
        ["not", "a", "map"],
        {"a": {"header": {}}},
        {"a": {"url": "   "}},
        {"a": 42},
        {"": "x.yaml"},
        {"a": {"url": "x.yaml", "header": ["Accept"]}},
        {"a": {"url": "x.yaml", "header": {"Accept": 1}}},
    ],
)
def test_parse_datasources_rejects_invalid_entries(section):
    _require_imports()
    with pytest.raises(InvalidDatasourceEntryError):
        parse_datasources({"datasources": section})
