# src/krmfn/core/config/merge.py
"""
Deep-merge da configuração de runtime.

Política de merge (v1):
    - dict → merge recursivo por chave
    - list → sobrescrita total (sem merge elemento a elemento)
    - escalar → sobrescrita direta
    - conflito de tipos → erro estrutural explícito

Invariantes:
    - Nenhum input é mutado
    - Chaves não sobrescritas são preservadas
    - Conflitos estruturais interrompem o merge
"""

from copy import deepcopy
from typing import Any, Dict

from .errors import ConfigTypeConflictError


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Combina a configuração base com overrides explícitos, sem mutar os inputs.

    `None` no override é tratado como valor explícito apenas quando a chave
    não existe na base; caso contrário, tipos distintos geram conflito.

    Args:
        base (Dict[str, Any]): Configuração base (ex.: defaults embutidos).
        override (Dict[str, Any]): Overrides explícitos (arquivo local).

    Returns:
        Dict[str, Any]: Nova configuração resultante.

    Raises:
        ConfigTypeConflictError: Se houver conflito de tipo em alguma chave.
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requer dicts no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    merged: Dict[str, Any] = deepcopy(base)

    for key, value in override.items():
        if key not in merged:
            merged[key] = deepcopy(value)
            continue

        current = merged[key]

        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        elif isinstance(value, list):
            merged[key] = deepcopy(value)
        elif type(current) is not type(value):
            raise ConfigTypeConflictError(
                f"Conflito de tipo na chave '{key}': "
                f"{type(current).__name__} vs {type(value).__name__}"
            )
        else:
            merged[key] = deepcopy(value)

    return merged
