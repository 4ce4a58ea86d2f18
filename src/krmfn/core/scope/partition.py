# src/krmfn/core/scope/partition.py
"""
Partição de Resources por escopo de função.

Regras, avaliadas em ordem:
    1. Escopo global (flag ou diretório vazio) → tudo em escopo.
    2. Resource sem path annotation → fora de escopo
       (proveniência desconhecida nunca é atribuída à função).
    3. Diretório do Resource normalizado, com a mesma regra `functions` → pai.
    4. Em escopo sse o diretório é o próprio escopo ou um descendente dele,
       comparando por segmentos (`apps2` não pertence a `apps`).

Invariantes:
    - Partição estrita: cada Resource está em exatamente um dos lados
    - Ordem relativa do input é preservada em ambos os lados
    - Resources são movidos, nunca copiados
"""

from __future__ import annotations

from typing import List, NamedTuple, Sequence

from krmfn.core.exceptions import PartitionError, ResourceMetaError
from krmfn.core.resource import PATH_ANNOTATION, Resource

from .resolver import GLOBAL_SCOPE, resource_dir


class ScopeSplit(NamedTuple):
    in_scope: List[Resource]
    out_of_scope: List[Resource]


def is_within_scope(directory: str, scope_dir: str) -> bool:
    """Containment por segmentos de caminho (não por prefixo de string)."""
    if scope_dir == GLOBAL_SCOPE:
        return True
    if directory == scope_dir:
        return True
    return directory.startswith(scope_dir.rstrip("/") + "/")


def split_by_scope(
    scope_dir: str,
    resources: Sequence[Resource],
    *,
    global_scope: bool = False,
) -> ScopeSplit:
    """
    Separa `resources` em (em escopo, fora de escopo).

    Raises:
        PartitionError: Se a metadata de algum Resource não puder ser lida;
            nenhuma partição parcial é retornada.
    """
    if global_scope or scope_dir in (GLOBAL_SCOPE, ".", "/"):
        return ScopeSplit(list(resources), [])

    in_scope: List[Resource] = []
    out_of_scope: List[Resource] = []

    for position, resource in enumerate(resources):
        try:
            meta = resource.get_meta()
        except ResourceMetaError as e:
            raise PartitionError(
                message="não foi possível ler a metadata de um Resource durante a partição",
                details={"position": position, "cause": e.message, **e.details},
            ) from e

        path = meta.annotations.get(PATH_ANNOTATION)
        if not path:
            out_of_scope.append(resource)
            continue

        if is_within_scope(resource_dir(path), scope_dir):
            in_scope.append(resource)
        else:
            out_of_scope.append(resource)

    return ScopeSplit(in_scope, out_of_scope)
