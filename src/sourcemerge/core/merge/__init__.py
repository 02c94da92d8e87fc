# src/sourcemerge/core/merge/__init__.py
"""Política de deep-merge de documentos (dict recursivo, posterior vence)."""

from .deep_merge import deep_merge, merge_documents

__all__ = ["deep_merge", "merge_documents"]
