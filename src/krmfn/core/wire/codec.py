# src/krmfn/core/wire/codec.py
"""
Codec do envelope `ResourceList` trocado com o processo da função.

Formato (v1):

    apiVersion: config.kubernetes.io/v1alpha1
    kind: ResourceList
    items:
      - <Resource>
      - ...
    functionConfig: <Resource>   # apenas na entrada, quando houver config
    results: <Resource>          # apenas na saída, opcional

Decisões arquiteturais:
    - Encode e decode são operações independentes e simétricas
    - Reader annotations (path/index) são preservadas por padrão, para que
      a função saiba de onde veio cada Resource
    - Decode nunca adiciona annotations: o round trip é sem perdas
    - Uma saída que não é ResourceList é lida como stream YAML multi-documento

Limites explícitos:
    - Não executa processos
    - Não aplica proveniência padrão
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import yaml

from krmfn.core.exceptions import DecodeError, EncodeError
from krmfn.core.resource import READER_ANNOTATIONS, Resource

RESOURCE_LIST_API_VERSION = "config.kubernetes.io/v1alpha1"
RESOURCE_LIST_KIND = "ResourceList"
RESOURCE_LIST_API_VERSIONS = frozenset({RESOURCE_LIST_API_VERSION, "config.kubernetes.io/v1"})

RESULT_LIST_KIND = "ResultList"


@dataclass
class DecodedResourceList:
    """Conteúdo decodificado da saída de uma função."""

    resources: List[Resource] = field(default_factory=list)
    results: Optional[Resource] = None
    function_config: Optional[Resource] = None


def _item_for_wire(resource: Resource, keep_reader_annotations: bool) -> Dict[str, Any]:
    item = resource.copy()
    if not keep_reader_annotations:
        for key in READER_ANNOTATIONS:
            item.remove_annotation(key)
    return item.to_dict()


def encode_resource_list(
    function_config: Optional[Resource],
    resources: Sequence[Resource],
    *,
    keep_reader_annotations: bool = True,
) -> str:
    """
    Serializa `resources` (+ config da função) em um envelope ResourceList.

    Os Resources de entrada nunca são mutados.

    Raises:
        EncodeError: Se algum valor não for serializável em YAML.
    """
    envelope: Dict[str, Any] = {
        "apiVersion": RESOURCE_LIST_API_VERSION,
        "kind": RESOURCE_LIST_KIND,
        "items": [_item_for_wire(r, keep_reader_annotations) for r in resources],
    }
    if function_config is not None:
        envelope["functionConfig"] = function_config.to_dict()

    try:
        return yaml.safe_dump(envelope, sort_keys=False, default_flow_style=False, allow_unicode=True)
    except yaml.YAMLError as e:
        raise EncodeError(
            message="falha ao serializar ResourceList",
            details={"error": str(e), "items": len(envelope["items"])},
        ) from e


def _is_resource_list(doc: Any) -> bool:
    return (
        isinstance(doc, dict)
        and doc.get("kind") == RESOURCE_LIST_KIND
        and doc.get("apiVersion") in RESOURCE_LIST_API_VERSIONS
    )


def _as_resource(value: Any, *, where: str) -> Resource:
    if not isinstance(value, dict):
        raise DecodeError(
            message=f"{where} deve ser um mapping",
            details={"field": where, "received": type(value).__name__},
        )
    return Resource(value)


def _results_resource(value: Any) -> Optional[Resource]:
    if value is None:
        return None
    if isinstance(value, list):
        # formato de lista de results: embrulhado para manter um único documento
        return Resource({
            "apiVersion": RESOURCE_LIST_API_VERSION,
            "kind": RESULT_LIST_KIND,
            "items": value,
        })
    return _as_resource(value, where="results")


def decode_resource_list(text: str) -> DecodedResourceList:
    """
    Lê a saída de uma função de volta em Resources + results opcional.

    Raises:
        DecodeError: YAML inválido, `items` não-lista, itens não-mapping ou
            envelope ResourceList misturado a outros documentos.
    """
    try:
        docs = [d for d in yaml.safe_load_all(text or "") if d is not None]
    except yaml.YAMLError as e:
        raise DecodeError(message="saída da função não é YAML válido", details={"error": str(e)}) from e

    if len(docs) > 1:
        for i, doc in enumerate(docs):
            if _is_resource_list(doc):
                raise DecodeError(
                    message="envelope ResourceList dentro de um stream multi-documento",
                    details={"document": i, "documents": len(docs)},
                    hint="A função deve emitir um único ResourceList ou apenas Resources",
                )

    if len(docs) == 1 and _is_resource_list(docs[0]):
        envelope = docs[0]
        items = envelope.get("items") or []
        if not isinstance(items, list):
            raise DecodeError(
                message="ResourceList.items deve ser uma lista",
                details={"received": type(items).__name__},
            )
        config = envelope.get("functionConfig")
        return DecodedResourceList(
            resources=[_as_resource(item, where=f"items[{i}]") for i, item in enumerate(items) if item is not None],
            results=_results_resource(envelope.get("results")),
            function_config=None if config is None else _as_resource(config, where="functionConfig"),
        )

    return DecodedResourceList(
        resources=[_as_resource(doc, where=f"document[{i}]") for i, doc in enumerate(docs)],
    )
