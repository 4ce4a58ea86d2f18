# src/krmfn/core/config/hashing.py
"""
Hashing canônico de estruturas do krmfn.

Usado para:
    - identidade estrutural da configuração de runtime resolvida
    - metadados leves do payload enviado a uma função (bytes + sha256)

Política de hashing (v1):
    - Serialização JSON canônica (chaves ordenadas, separadores compactos)
    - Codificação UTF-8
    - SHA-256
"""

import hashlib
import json
from typing import Any, Dict


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Gera um hash determinístico da configuração efetiva.

    Configurações estruturalmente equivalentes produzem o mesmo hash,
    independente da ordem original das chaves.

    Raises:
        TypeError: Se o objeto fornecido não for um dicionário.
    """
    if not isinstance(config, dict):
        raise TypeError(
            f"Config para hashing deve ser dict, recebido: {type(config).__name__}"
        )

    canonical_json = json.dumps(
        config,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()


def payload_meta(payload: str) -> Dict[str, Any]:
    """Metadados leves de um payload textual (sem truncar, sem persistir)."""
    raw = payload.encode("utf-8")
    return {
        "payload_bytes": int(len(raw)),
        "payload_sha256": hashlib.sha256(raw).hexdigest(),
    }
