# src/krmfn/core/config/settings.py
"""
Settings tipados de runtime, derivados da configuração resolvida.

A configuração (dict) é a fonte de verdade; `RuntimeSettings` é apenas a
projeção imutável consumida pelo `FunctionInvoker`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .errors import InvalidConfigRootTypeError
from .hashing import compute_config_hash
from .loader import DEFAULT_CONFIG


@dataclass(frozen=True)
class RuntimeSettings:
    """
    Parâmetros fixos de execução de funções.

    Campos:
        - engine: binário do runtime de containers (ex.: docker, podman)
        - user: identidade sem privilégios usada dentro do container
        - network: modo de rede padrão quando o descriptor não declara um
        - keep_reader_annotations: preservar path/index no envelope de entrada
        - signals: variáveis de sinalização sempre injetadas no processo filho
        - config_hash: identidade estrutural da configuração de origem
    """

    engine: str = "docker"
    user: str = "nobody"
    network: str = "none"
    keep_reader_annotations: bool = True
    signals: Dict[str, str] = field(
        default_factory=lambda: dict(DEFAULT_CONFIG["runtime"]["signals"])
    )
    config_hash: Optional[str] = None

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]]) -> "RuntimeSettings":
        config = config or {}
        runtime = config.get("runtime", {})
        if runtime is None:
            runtime = {}
        if not isinstance(runtime, dict):
            raise InvalidConfigRootTypeError(
                f"Seção 'runtime' deve ser dict, recebido: {type(runtime).__name__}"
            )

        defaults = DEFAULT_CONFIG["runtime"]
        # sinais configurados só acrescentam ou sobrescrevem os fixos
        configured = runtime.get("signals") or {}
        if not isinstance(configured, dict):
            raise InvalidConfigRootTypeError(
                f"Seção 'runtime.signals' deve ser dict, recebido: {type(configured).__name__}"
            )
        signals = {**defaults["signals"], **configured}

        return cls(
            engine=str(runtime.get("engine") or defaults["engine"]),
            user=str(runtime.get("user") or defaults["user"]),
            network=str(runtime.get("network") or defaults["network"]),
            keep_reader_annotations=bool(
                runtime.get("keep_reader_annotations", defaults["keep_reader_annotations"])
            ),
            signals={str(k): str(v) for k, v in signals.items()},
            config_hash=compute_config_hash(config),
        )
