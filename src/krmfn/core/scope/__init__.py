# src/krmfn/core/scope/__init__.py
"""
Scoping de funções.

Componentes:
    - resolver  → diretório de autorização da função (`resolve_function_scope`)
    - partition → partição de Resources em escopo / fora de escopo (`split_by_scope`)

Ambos usam o mesmo helper `rewrite_for_reserved_dir` para a regra
do diretório `functions`.
"""

from .partition import ScopeSplit, is_within_scope, split_by_scope
from .resolver import (
    FUNCTIONS_DIRECTORY_NAME,
    GLOBAL_SCOPE,
    resolve_function_scope,
    resource_dir,
    rewrite_for_reserved_dir,
)

__all__ = [
    "FUNCTIONS_DIRECTORY_NAME",
    "GLOBAL_SCOPE",
    "ScopeSplit",
    "is_within_scope",
    "resolve_function_scope",
    "resource_dir",
    "rewrite_for_reserved_dir",
    "split_by_scope",
]
