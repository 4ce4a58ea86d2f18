# src/krmfn/core/reconciler/__init__.py
"""Predicados puros para identificar Resources que declaram funções."""

from .classifier import (
    ContainerSpec,
    FunctionSpec,
    ReconcilerFilter,
    get_function_spec,
    is_function_resource,
)

__all__ = [
    "ContainerSpec",
    "FunctionSpec",
    "ReconcilerFilter",
    "get_function_spec",
    "is_function_resource",
]
