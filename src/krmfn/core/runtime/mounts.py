# src/krmfn/core/runtime/mounts.py
"""Montagens de storage expostas ao container da função (sempre read-only)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from krmfn.core.exceptions import InvalidFunctionSpecError


@dataclass(frozen=True)
class StorageMount:
    mount_type: str
    src: str
    dst: str

    def render(self) -> str:
        return f"type={self.mount_type},src={self.src},dst={self.dst}:ro"

    def __str__(self) -> str:
        return self.render()

    @classmethod
    def parse(cls, text: str) -> "StorageMount":
        """Lê a forma `type=bind,src=/a,dst=/b` (chaves desconhecidas são ignoradas)."""
        options: Dict[str, str] = {}
        for option in text.split(","):
            if not option.strip():
                continue
            if "=" not in option:
                raise InvalidFunctionSpecError(
                    message=f"opção de mount inválida: {option!r}",
                    details={"mount": text},
                    hint="Use o formato type=<tipo>,src=<origem>,dst=<destino>",
                )
            key, value = option.split("=", 1)
            options[key.strip()] = value
        return cls(
            mount_type=options.get("type", ""),
            src=options.get("src", ""),
            dst=options.get("dst", ""),
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StorageMount":
        if not isinstance(data, dict):
            raise InvalidFunctionSpecError(
                message="mount deve ser um mapping",
                details={"received": type(data).__name__},
            )
        return cls(
            mount_type=str(data.get("type") or ""),
            src=str(data.get("src") or ""),
            dst=str(data.get("dst") or ""),
        )
