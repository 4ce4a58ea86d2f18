# src/krmfn/core/wire/__init__.py
"""Envelope ResourceList (encode/decode) trocado com processos de função."""

from .codec import (
    RESOURCE_LIST_API_VERSION,
    RESOURCE_LIST_KIND,
    DecodedResourceList,
    decode_resource_list,
    encode_resource_list,
)

__all__ = [
    "RESOURCE_LIST_API_VERSION",
    "RESOURCE_LIST_KIND",
    "DecodedResourceList",
    "decode_resource_list",
    "encode_resource_list",
]
