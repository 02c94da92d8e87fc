# src/sourcemerge/core/merge/deep_merge.py
"""
Utilitário canônico de deep-merge de documentos.

Este módulo implementa a política oficial de deep-merge utilizada pelo
sourcemerge para combinar documentos (mapas) vindos de datasources
distintas, e também pela camada de configuração (defaults + local).

Política de merge (v1):
    - dict + dict → merge recursivo por chave
    - list        → sobrescrita total (sem concatenação nem deduplicação)
    - escalar     → sobrescrita direta
    - tipos distintos → o valor posterior substitui o anterior

Princípios fundamentais:
    - O merge é determinístico e puramente funcional
    - Nenhum input é mutado durante o processo
    - Precedência é sempre da esquerda para a direita: o posterior vence

Invariantes:
    - A mesma entrada sempre produz a mesma saída
    - Chaves não sobrescritas são preservadas
    - As chaves do resultado são a união das chaves dos inputs

Limites explícitos:
    - Não carrega datasources
    - Não valida semântica de domínio
    - Não realiza coerção de tipos

Este módulo existe para garantir que a ordenação
"defaults → overrides" das datasources seja respeitada.
"""

from copy import deepcopy
from typing import Any, Dict, Sequence


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Realiza um deep-merge determinístico entre dois mapas.

    Esta função combina um documento base com um documento posterior,
    produzindo uma nova estrutura resultante sem mutar nenhum dos inputs.

    Política de merge (v1):
        - dict + dict → merge recursivo por chave
        - qualquer outro caso → o valor de `override` substitui o de `base`

    Exemplo:
        - base:     {"a": 1, "b": {"x": 1}}
        - override: {"b": {"y": 2}, "c": 3}
        - result:   {"a": 1, "b": {"x": 1, "y": 2}, "c": 3}

    Args:
        base (Dict[str, Any]): Documento de menor precedência.
        override (Dict[str, Any]): Documento de maior precedência.

    Returns:
        Dict[str, Any]: Novo mapa resultante do deep-merge.

    Raises:
        TypeError: Se algum dos inputs não for um dicionário.
    """

    if not isinstance(base, dict) or not isinstance(override, dict):
        raise TypeError(
            f"Deep-merge requer dicts no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    result: Dict[str, Any] = deepcopy(base)

    for key, override_value in override.items():
        base_value = result.get(key)

        # dict -> merge recursivo
        if isinstance(base_value, dict) and isinstance(override_value, dict):
            result[key] = deep_merge(base_value, override_value)
            continue

        # list, escalar ou tipos distintos -> sobrescrita
        result[key] = deepcopy(override_value)

    return result


def merge_documents(documents: Sequence[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Combina uma sequência de mapas da esquerda para a direita.

    O primeiro documento é a base; cada documento seguinte é aplicado
    sobre o resultado acumulado via `deep_merge`.

    Raises:
        ValueError: Se a sequência estiver vazia.
    """
    if not documents:
        raise ValueError("merge_documents requer ao menos um documento")

    result = deepcopy(documents[0])
    for document in documents[1:]:
        result = deep_merge(result, document)
    return result
