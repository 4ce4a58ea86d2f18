# src/krmfn/core/reconciler/classifier.py
"""
Classificação de Resources que declaram uma função (reconciler).

Um Resource declara uma função quando, em ordem de precedência:
    1. carrega a annotation `config.kubernetes.io/function` (ou a forma curta
       `config.k8s.io/function`) com um spec YAML (`container.image` ou `exec.path`)
    2. carrega `metadata.configFn` com o mesmo formato
    3. carrega a annotation legada `config.kubernetes.io/container` (imagem)
    4. tem `apiVersion` hospedado em um registry de imagens
       (`gcr.io`, `*.gcr.io`, `docker.io`); a imagem é o próprio apiVersion

Uma declaração ilegível ou sem runtime nas fontes 1-2 não encerra a busca:
as fontes 3-4 ainda são consultadas.

Tudo aqui é puro: nenhum I/O, nenhuma exceção para metadata malformada.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple

import yaml

from krmfn.core.exceptions import FnException
from krmfn.core.resource import (
    FUNCTION_ANNOTATION_KEYS,
    LEGACY_CONTAINER_ANNOTATION,
    Resource,
)
from krmfn.core.runtime.mounts import StorageMount

REGISTRY_HOSTS = ("gcr.io", "docker.io")

HOST_NETWORK = "host"


@dataclass(frozen=True)
class ContainerSpec:
    image: str
    network: str = ""
    mounts: Tuple[StorageMount, ...] = ()


@dataclass(frozen=True)
class FunctionSpec:
    container: Optional[ContainerSpec] = None
    exec_path: str = ""

    @property
    def executable(self) -> bool:
        return bool((self.container and self.container.image) or self.exec_path)


def _network_name(value: Any) -> str:
    # `network: true` e `network: {required: true}` pedem rede do host
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        value = value.get("required")
    return HOST_NETWORK if value is True else ""


def _spec_from_mapping(data: Any) -> Optional[FunctionSpec]:
    if not isinstance(data, dict):
        return None

    container = data.get("container")
    exec_block = data.get("exec")

    spec = FunctionSpec(
        container=(
            ContainerSpec(
                image=str(container.get("image") or ""),
                network=_network_name(container.get("network")),
                mounts=tuple(StorageMount.from_dict(m) for m in (container.get("mounts") or [])),
            )
            if isinstance(container, dict)
            else None
        ),
        exec_path=str(exec_block.get("path") or "") if isinstance(exec_block, dict) else "",
    )
    return spec if spec.executable else None


def _is_registry_api_version(api_version: str) -> bool:
    host = api_version.split("/", 1)[0]
    return any(host == h or host.endswith("." + h) for h in REGISTRY_HOSTS)


def get_function_spec(resource: Resource) -> Optional[FunctionSpec]:
    """
    Spec da função declarada por `resource`, ou None.

    Uma declaração ilegível ou sem runtime executável não encerra a busca:
    as fontes seguintes (annotation legada, apiVersion de registry) ainda
    são consultadas.
    """
    try:
        meta = resource.get_meta()
    except FnException:
        return None

    candidates: List[Any] = [meta.annotations.get(key) for key in FUNCTION_ANNOTATION_KEYS]
    candidates.append(resource.get_field("metadata", "configFn"))
    for candidate in candidates:
        if not candidate:
            continue
        try:
            data = yaml.safe_load(candidate) if isinstance(candidate, str) else candidate
            spec = _spec_from_mapping(data)
        except (FnException, yaml.YAMLError, TypeError):
            spec = None
        if spec is not None:
            return spec

    legacy = meta.annotations.get(LEGACY_CONTAINER_ANNOTATION)
    if legacy:
        return FunctionSpec(container=ContainerSpec(image=legacy))

    if meta.api_version and _is_registry_api_version(meta.api_version):
        return FunctionSpec(container=ContainerSpec(image=meta.api_version))

    return None


def is_function_resource(resource: Resource) -> bool:
    return get_function_spec(resource) is not None


@dataclass
class ReconcilerFilter:
    """Filtro puro por classificação: reconcilers e/ou não-reconcilers."""

    include_reconcilers: bool = True
    include_non_reconcilers: bool = False

    def filter(self, resources: Sequence[Resource]) -> List[Resource]:
        out: List[Resource] = []
        for resource in resources:
            if is_function_resource(resource):
                if self.include_reconcilers:
                    out.append(resource)
            elif self.include_non_reconcilers:
                out.append(resource)
        return out
