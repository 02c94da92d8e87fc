# src/sourcemerge/core/config/__init__.py

"""
Camada de configuração do sourcemerge.

Este pacote contém as estruturas e utilitários responsáveis por carregar,
mesclar e validar estruturalmente a configuração que declara
as datasources de uma invocação.

Responsabilidades do pacote:
    - Carregamento de arquivos de configuração (base + overrides locais)
    - Resolução da configuração final via deep-merge determinístico
    - Validação estrutural das entradas de `datasources`

Invariantes:
    - A configuração final é um dicionário puro (dict)
    - Overrides locais vencem os defaults (mesma política do merge)

Limites explícitos:
    - Não lê datasources
    - Não conhece readers nem schemes
"""

from .errors import (
    ConfigError,
    ConfigNotFoundError,
    InvalidConfigRootTypeError,
    InvalidDatasourceEntryError,
    UnsupportedConfigFormatError,
)
from .loader import DatasourceSpec, load_config, parse_datasources

__all__ = [
    "ConfigError",
    "ConfigNotFoundError",
    "InvalidConfigRootTypeError",
    "InvalidDatasourceEntryError",
    "UnsupportedConfigFormatError",
    "DatasourceSpec",
    "load_config",
    "parse_datasources",
]
