# src/sourcemerge/core/__init__.py
"""
Core do sourcemerge.

Este pacote contém a implementação canônica do subsistema de
resolução, leitura e merge de datasources.

Componentes principais:
    - context  → `ReadContext` (cancelamento, deadline, eventos)
    - data     → `Data`, media types e codecs
    - sources  → contrato `Reader`, `Source` e readers embutidos (file, env, merge)
    - registry → `SourceRegistry` e a cadeia de resolução
    - merge    → política de deep-merge
    - config   → definição declarativa de aliases (YAML/JSON)
    - errors   → hierarquia de exceções de datasource

Princípios fundamentais:
    - Backends são intercambiáveis por um único contrato
    - A ordem de resolução é contrato, não detalhe de implementação
    - Nenhuma falha é silenciada nem recuperada internamente

Limites explícitos:
    - Não renderiza templates
    - Não implementa protocolos remotos (http, vault, buckets, ...)
"""
