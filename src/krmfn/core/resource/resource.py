# src/krmfn/core/resource/resource.py
"""
Representação mínima de um Resource (documento de configuração estruturado).

Este módulo expõe apenas o contrato consumido pelo núcleo de execução:
    - leitura de metadata (apiVersion, kind, name, namespace, annotations)
    - leitura/escrita de annotations
    - (de)serialização textual em YAML

Decisões arquiteturais:
    - O Resource encapsula um mapping já parseado por PyYAML
    - Ausência de `metadata` é metadata vazia, não erro
    - Estrutura inválida de `metadata`/`annotations` é erro explícito
    - A ordem de inserção das annotations é preservada na serialização

Limites explícitos:
    - Não lê nem escreve arquivos
    - Não valida schema de Kubernetes
    - Não preserva comentários ou estilo do YAML de origem
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import yaml

from krmfn.core.exceptions import DecodeError, ResourceMetaError


@dataclass(frozen=True)
class ResourceMeta:
    """Snapshot imutável da metadata de um Resource."""

    api_version: str = ""
    kind: str = ""
    name: str = ""
    namespace: str = ""
    annotations: Dict[str, str] = field(default_factory=dict)
    labels: Dict[str, str] = field(default_factory=dict)


def _str_mapping(value: Any, *, where: str) -> Dict[str, str]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ResourceMetaError(
            message=f"{where} deve ser um mapping",
            details={"field": where, "received": type(value).__name__},
        )
    out: Dict[str, str] = {}
    for k, v in value.items():
        if not isinstance(k, str):
            raise ResourceMetaError(
                message=f"{where} contém chave não-string",
                details={"field": where, "key": repr(k)},
            )
        out[k] = "" if v is None else str(v)
    return out


class Resource:
    """
    Documento de configuração com metadata mutável.

    Resources são tratados como valores: pertencem à coleção que os contém
    e só mudam via annotations/valores durante uma invocação.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Dict[str, Any]):
        if not isinstance(data, dict):
            raise TypeError(f"Resource requer mapping, recebido: {type(data).__name__}")
        self._data = data

    # -----------------------------
    # Construção / serialização
    # -----------------------------
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Resource":
        return cls(deepcopy(data))

    @classmethod
    def from_yaml(cls, text: str) -> "Resource":
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise DecodeError(message="YAML inválido", details={"error": str(e)}) from e
        if not isinstance(data, dict):
            raise DecodeError(
                message="Resource deve ser um mapping YAML",
                details={"received": type(data).__name__},
            )
        return cls(data)

    def to_dict(self) -> Dict[str, Any]:
        return deepcopy(self._data)

    def to_yaml(self) -> str:
        return yaml.safe_dump(self._data, sort_keys=False, default_flow_style=False, allow_unicode=True)

    def copy(self) -> "Resource":
        return Resource(deepcopy(self._data))

    # -----------------------------
    # Metadata
    # -----------------------------
    def get_meta(self) -> ResourceMeta:
        metadata = self._data.get("metadata")
        if metadata is None:
            metadata = {}
        if not isinstance(metadata, dict):
            raise ResourceMetaError(
                message="metadata deve ser um mapping",
                details={"received": type(metadata).__name__},
            )
        return ResourceMeta(
            api_version=str(self._data.get("apiVersion") or ""),
            kind=str(self._data.get("kind") or ""),
            name=str(metadata.get("name") or ""),
            namespace=str(metadata.get("namespace") or ""),
            annotations=_str_mapping(metadata.get("annotations"), where="metadata.annotations"),
            labels=_str_mapping(metadata.get("labels"), where="metadata.labels"),
        )

    @property
    def api_version(self) -> str:
        return str(self._data.get("apiVersion") or "")

    @property
    def kind(self) -> str:
        return str(self._data.get("kind") or "")

    @property
    def name(self) -> str:
        return self.get_meta().name

    @property
    def namespace(self) -> str:
        return self.get_meta().namespace

    @property
    def annotations(self) -> Dict[str, str]:
        return self.get_meta().annotations

    def get_annotation(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.get_meta().annotations.get(key, default)

    def _annotations_node(self) -> Dict[str, Any]:
        metadata = self._data.get("metadata")
        if metadata is None:
            metadata = self._data["metadata"] = {}
        if not isinstance(metadata, dict):
            raise ResourceMetaError(
                message="metadata deve ser um mapping",
                details={"received": type(metadata).__name__},
            )
        annotations = metadata.get("annotations")
        if annotations is None:
            annotations = metadata["annotations"] = {}
        if not isinstance(annotations, dict):
            raise ResourceMetaError(
                message="metadata.annotations deve ser um mapping",
                details={"received": type(annotations).__name__},
            )
        return annotations

    def set_annotation(self, key: str, value: str) -> None:
        self._annotations_node()[key] = str(value)

    def remove_annotation(self, key: str) -> None:
        metadata = self._data.get("metadata")
        if not isinstance(metadata, dict):
            return
        annotations = metadata.get("annotations")
        if not isinstance(annotations, dict):
            return
        annotations.pop(key, None)
        if not annotations:
            del metadata["annotations"]

    def get_field(self, *path: str) -> Any:
        node: Any = self._data
        for key in path:
            if not isinstance(node, dict):
                return None
            node = node.get(key)
        return node

    # -----------------------------
    # Value semantics
    # -----------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Resource):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        metadata = self._data.get("metadata")
        name = metadata.get("name") if isinstance(metadata, dict) else None
        return f"Resource(kind={self.kind!r}, name={name!r})"
