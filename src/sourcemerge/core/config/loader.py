# src/sourcemerge/core/config/loader.py
"""
Loader canônico da configuração de datasources.

Este módulo é responsável por carregar, validar estruturalmente e
resolver a configuração que declara as datasources (aliases) de uma
invocação.

A configuração é resolvida a partir de:
    - um arquivo base (obrigatório)
    - um arquivo local de overrides (opcional)

Formato esperado:

    datasources:
      defaults:
        url: config/defaults.yaml
      secrets:
        url: env:///APP_SECRETS?type=application/json
        header:
          Authorization: ["Bearer x"]

Princípios fundamentais:
    - Configuração é declarativa e explícita
    - Overrides locais sempre têm precedência sobre o arquivo base
    - Erros estruturais são tratados como falhas fatais

Invariantes:
    - O resultado de `load_config` é sempre um dicionário puro (`dict`)
    - Overrides nunca mutam o arquivo base
    - Toda `DatasourceSpec` possui `url` não-vazia

Limites explícitos:
    - Não lê datasources
    - Não registra aliases (ver `SourceRegistry.configure`)
    - Não valida schemes
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml  # PyYAML

from ..merge.deep_merge import deep_merge
from .errors import (
    ConfigNotFoundError,
    InvalidConfigRootTypeError,
    InvalidDatasourceEntryError,
    UnsupportedConfigFormatError,
)


@dataclass(frozen=True)
class DatasourceSpec:
    """Definição declarativa de um alias de datasource."""
    alias: str
    url: str
    header: Dict[str, List[str]] = field(default_factory=dict)


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de configuração e valida sua estrutura básica.

    Decisões arquiteturais:
        - O arquivo deve existir no momento do carregamento
        - O conteúdo raiz deve ser um dicionário (`dict`)
        - Arquivos vazios são interpretados como dicionários vazios

    Raises:
        ConfigNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    if not path.exists():
        raise ConfigNotFoundError(f"Arquivo de configuração não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def load_config(
    *,
    defaults_path: str,
    local_path: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Carrega e resolve a configuração efetiva de datasources.

    Política de resolução:
        - O arquivo base é obrigatório
        - O arquivo local é opcional; se ausente no disco, é ignorado
        - Quando presente, o local tem prioridade via `deep_merge`

    Args:
        defaults_path (str): Caminho para o arquivo de configuração base.
        local_path (Optional[str]): Caminho opcional para overrides locais.

    Returns:
        Dict[str, Any]: Configuração final resolvida.

    Raises:
        ConfigNotFoundError: Se o arquivo base não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo não for um dicionário.
    """

    effective = _load_file(Path(defaults_path))

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            effective = deep_merge(effective, _load_file(local_file))

    return effective


def _parse_header(alias: str, raw: Any) -> Dict[str, List[str]]:
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise InvalidDatasourceEntryError(
            f"datasources.{alias}.header deve ser um mapa, recebido: {type(raw).__name__}"
        )

    header: Dict[str, List[str]] = {}
    for name, values in raw.items():
        if isinstance(values, str):
            values = [values]
        if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
            raise InvalidDatasourceEntryError(
                f"datasources.{alias}.header.{name} deve ser str ou lista de str"
            )
        header[str(name)] = list(values)
    return header


def parse_datasources(config: Mapping[str, Any]) -> Dict[str, DatasourceSpec]:
    """
    Extrai e valida as definições de `datasources` de uma configuração resolvida.

    Uma entrada pode ser um mapa (`url`, `header`) ou, por conveniência,
    a própria URL como string.

    Raises:
        InvalidDatasourceEntryError: Se alguma entrada for estruturalmente inválida.
    """
    section = config.get("datasources")
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise InvalidDatasourceEntryError(
            f"datasources deve ser um mapa, recebido: {type(section).__name__}"
        )

    specs: Dict[str, DatasourceSpec] = {}
    for alias, entry in section.items():
        if not isinstance(alias, str) or not alias.strip():
            raise InvalidDatasourceEntryError("alias de datasource deve ser string não-vazia")

        if isinstance(entry, str):
            entry = {"url": entry}
        if not isinstance(entry, Mapping):
            raise InvalidDatasourceEntryError(
                f"datasources.{alias} deve ser um mapa, recebido: {type(entry).__name__}"
            )

        url = entry.get("url")
        if not isinstance(url, str) or not url.strip():
            raise InvalidDatasourceEntryError(f"Missing required config: datasources.{alias}.url")

        specs[alias] = DatasourceSpec(
            alias=alias,
            url=url.strip(),
            header=_parse_header(alias, entry.get("header")),
        )

    return specs
