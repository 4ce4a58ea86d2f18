# src/krmfn/core/provenance/annotator.py
"""
Proveniência padrão para Resources emitidos por uma função.

Resources sem path annotation recebem:

    <escopo>/<stem da função>/<namespace>/<kind>_<name>.yaml

(segmentos vazios são omitidos). Exemplo: função em `dir/fn.yaml` que
gera um `Deployment` chamado `foo` no namespace `baz`:

    dir/fn/baz/deployment_foo.yaml

Colisões de nome sintetizado (entre si ou com paths já anotados na saída)
recebem sufixo `_<n>` (`deployment_foo_1.yaml`), de modo que cada Resource
novo tem arquivo próprio e recebe index 0.

Invariantes:
    - Resources que já têm path annotation não são alterados (nem o index)
    - Index já presente nunca é sobrescrito
    - A mutação é in-place e restrita a annotations
"""

from __future__ import annotations

import posixpath
import re
from typing import List, Optional, Sequence, Set

from krmfn.core.resource import INDEX_ANNOTATION, PATH_ANNOTATION, Resource, ResourceMeta

_UNSAFE_CHARS = re.compile(r"[^a-z0-9.-]+")


def _file_segment(value: str) -> str:
    return _UNSAFE_CHARS.sub("_", value.lower())


def function_stem(function_path: Optional[str]) -> str:
    """`dir/functions/fn.yaml` → `fn`; sem path → `""`."""
    if not function_path:
        return ""
    return posixpath.splitext(posixpath.basename(function_path))[0]


def default_path(scope_dir: str, meta: ResourceMeta, stem: str = "") -> str:
    filename = f"{_file_segment(meta.kind)}_{_file_segment(meta.name)}.yaml"
    segments = [s for s in (scope_dir, stem, meta.namespace) if s]
    return posixpath.join(*segments, filename)


def _dedupe(path: str, taken: Set[str]) -> str:
    if path not in taken:
        return path
    base, ext = posixpath.splitext(path)
    n = 1
    while f"{base}_{n}{ext}" in taken:
        n += 1
    return f"{base}_{n}{ext}"


def assign_default_provenance(
    scope_dir: str,
    resources: Sequence[Resource],
    *,
    function_path: Optional[str] = None,
) -> List[str]:
    """
    Atribui path/index padrão aos Resources sem path annotation.

    Args:
        scope_dir: escopo resolvido da função (já com a regra `functions`).
        resources: saída da função; mutada in-place.
        function_path: path annotation da configuração da função.

    Returns:
        List[str]: paths sintetizados, na ordem dos Resources anotados.

    Raises:
        ResourceMetaError: Se a metadata de algum Resource não puder ser lida.
    """
    stem = function_stem(function_path)
    metas = [r.get_meta() for r in resources]

    taken: Set[str] = {m.annotations[PATH_ANNOTATION] for m in metas if m.annotations.get(PATH_ANNOTATION)}

    synthesized: List[str] = []
    for resource, meta in zip(resources, metas):
        # Resource com path já anotado não passa por nenhum defaulting
        if meta.annotations.get(PATH_ANNOTATION):
            continue
        path = _dedupe(default_path(scope_dir, meta, stem), taken)
        taken.add(path)
        resource.set_annotation(PATH_ANNOTATION, path)
        synthesized.append(path)

        # path sintetizado é exclusivo deste Resource: primeiro documento do arquivo
        if INDEX_ANNOTATION not in meta.annotations:
            resource.set_annotation(INDEX_ANNOTATION, "0")

    return synthesized
