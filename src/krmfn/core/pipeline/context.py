# src/krmfn/core/pipeline/context.py
"""
Contexto de execução compartilhado entre invocações de funções.

Este módulo define o `RunContext`, a estrutura canônica utilizada para
registrar eventos estruturados, warnings e artefatos (ex.: documentos de
results) produzidos durante uma run do pipeline que invoca funções.

O RunContext atua como o único meio permitido de:
    - registro de logs estruturados de execução
    - coleta de warnings não fatais (ex.: falhas adiadas via defer_failure)
    - armazenamento de artefatos para inspeção posterior

Princípios fundamentais:
    - Isolamento por execução (cada run possui seu próprio contexto)
    - Ausência de estado global compartilhado
    - Estrutura simples e testável

Invariantes:
    - Artefatos são indexados por chave explícita
    - Logs sempre incluem `run_id` e `step_id`
    - Warnings são agrupados por `step_id`

Limites explícitos:
    - Não executa funções
    - Não decide políticas de falha
    - Não persiste dados automaticamente
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List
from datetime import timezone


@dataclass
class RunContext:
    """
    Contexto de execução de uma run.

    Para invocações de funções, `step_id` identifica a função (imagem ou
    executável), de modo que eventos e warnings de funções diferentes
    permaneçam separados.

    Decisões arquiteturais:
        - Logs não são strings livres, mas eventos estruturados
        - Warnings são sinais não fatais e não interrompem execução
        - O contexto é opcional para o núcleo: sem contexto, nada é registrado
    """

    run_id: str
    created_at: datetime
    config: Dict[str, Any] = field(default_factory=dict)
    meta: Dict[str, Any] = field(default_factory=dict)

    _artifacts: Dict[str, Any] = field(default_factory=dict, init=False, repr=False)
    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    # -----------------------------
    # Artifact store
    # -----------------------------
    def set_artifact(self, key: str, value: Any) -> None:
        self._artifacts[key] = value

    def has_artifact(self, key: str) -> bool:
        return key in self._artifacts

    def get_artifact(self, key: str) -> Any:
        if key not in self._artifacts:
            raise KeyError(key)
        return self._artifacts[key]

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, step_id: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "run_id": self.run_id,
            "step_id": step_id,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, step_id: str, message: str) -> None:
        if step_id not in self.warnings:
            self.warnings[step_id] = []
        self.warnings[step_id].append(message)
