# src/krmfn/core/provenance/__init__.py
"""Proveniência padrão (path/index) para Resources gerados por funções."""

from .annotator import assign_default_provenance, default_path, function_stem

__all__ = ["assign_default_provenance", "default_path", "function_stem"]
