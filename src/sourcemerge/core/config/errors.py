# src/sourcemerge/core/config/errors.py
"""
Exceções canônicas da camada de configuração do sourcemerge.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento e a validação estrutural do arquivo de definição de
datasources.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Mensagens de erro são claras e direcionadas ao usuário

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa falha de leitura de datasource

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende do registry nem dos readers
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração de datasources.

    Permite distinguir falhas de configuração (antes de qualquer leitura)
    de falhas de datasource (durante resolução e leitura).
    """


class ConfigNotFoundError(ConfigError):
    """
    Exceção levantada quando o arquivo de configuração base não é encontrado.

    Decisões arquiteturais:
        - O arquivo base é obrigatório quando informado
        - Não há tentativa de inferir ou criar o arquivo automaticamente
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de configuração
    não é suportado pelo loader.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """O conteúdo raiz da configuração não é um dicionário."""


class InvalidDatasourceEntryError(ConfigError):
    """
    Exceção levantada quando uma entrada de `datasources` é inválida.

    Exemplos de entradas inválidas:
        - `datasources` que não é um mapa
        - alias vazio ou não-string
        - `url` ausente ou vazia
        - `header` que não é um mapa de str → str | list[str]
    """
