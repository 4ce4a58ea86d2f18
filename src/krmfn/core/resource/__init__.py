# src/krmfn/core/resource/__init__.py
"""
Resource — colaborador mínimo de documento estruturado.

Componentes:
    - resource    → `Resource` e `ResourceMeta`
    - annotations → chaves canônicas de proveniência e de declaração de funções
"""

from .annotations import (
    FUNCTION_ANNOTATION,
    FUNCTION_ANNOTATION_SHORT,
    FUNCTION_ANNOTATION_KEYS,
    INDEX_ANNOTATION,
    LEGACY_CONTAINER_ANNOTATION,
    PATH_ANNOTATION,
    READER_ANNOTATIONS,
)
from .resource import Resource, ResourceMeta

__all__ = [
    "FUNCTION_ANNOTATION",
    "FUNCTION_ANNOTATION_SHORT",
    "FUNCTION_ANNOTATION_KEYS",
    "INDEX_ANNOTATION",
    "LEGACY_CONTAINER_ANNOTATION",
    "PATH_ANNOTATION",
    "READER_ANNOTATIONS",
    "Resource",
    "ResourceMeta",
]
