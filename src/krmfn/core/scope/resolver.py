# src/krmfn/core/scope/resolver.py
"""
Resolução do escopo (diretório de autorização) de uma função.

Regras:
    - O escopo é o diretório do arquivo de configuração da função
      (annotation `config.kubernetes.io/path`), normalizado.
    - Se esse diretório se chama `functions`, o escopo sobe um nível:
      uma função guardada em `functions/` enxerga o diretório pai inteiro.
    - Configuração sem path annotation → escopo global (`""`).

Caminhos são sempre tratados como caminhos POSIX (separador `/`),
independente da plataforma, pois vêm de annotations e não do filesystem.
"""

from __future__ import annotations

import posixpath
from typing import Optional

from krmfn.core.exceptions import ResourceMetaError, ScopeResolutionError
from krmfn.core.resource import PATH_ANNOTATION, Resource

FUNCTIONS_DIRECTORY_NAME = "functions"

GLOBAL_SCOPE = ""


def normalize_dir(path: str) -> str:
    """Diretório normalizado de um path annotation; `.` vira escopo global."""
    directory = posixpath.normpath(posixpath.dirname(path))
    if directory in (".", ""):
        return GLOBAL_SCOPE
    return directory


def rewrite_for_reserved_dir(directory: str) -> str:
    """Substitui um diretório `functions` pelo seu pai.

    Compartilhado por resolução de escopo e partição: funções irmãs dentro
    de um mesmo `functions/` enxergam umas às outras como input.
    """
    if posixpath.basename(directory) == FUNCTIONS_DIRECTORY_NAME:
        parent = posixpath.dirname(directory)
        return GLOBAL_SCOPE if parent in (".", "") else parent
    return directory


def resource_dir(path: str) -> str:
    """Diretório efetivo de escopo para um path annotation."""
    return rewrite_for_reserved_dir(normalize_dir(path))


def resolve_function_scope(config: Optional[Resource]) -> str:
    """
    Retorna o diretório de autorização da função.

    Args:
        config: Resource de configuração da função (pode ser None).

    Returns:
        str: Diretório normalizado, ou `""` para função globalmente escopada.

    Raises:
        ScopeResolutionError: Se a metadata da configuração não puder ser lida.
    """
    if config is None:
        return GLOBAL_SCOPE

    try:
        meta = config.get_meta()
    except ResourceMetaError as e:
        raise ScopeResolutionError(
            message="não foi possível ler a metadata da configuração da função",
            details={"cause": e.message, **e.details},
            hint="Corrija o bloco metadata da configuração da função",
        ) from e

    path = meta.annotations.get(PATH_ANNOTATION)
    if not path:
        return GLOBAL_SCOPE

    return resource_dir(path)
