# src/krmfn/core/runtime/results.py
"""Persistência do documento de results (UTF-8, permissão 0600)."""

from __future__ import annotations

import os
from pathlib import Path

from krmfn.core.exceptions import ResultsWriteError
from krmfn.core.resource import Resource

RESULTS_FILE_MODE = 0o600


def write_results(results: Resource, path: str) -> Path:
    """
    Escreve `results` em `path`, legível e gravável apenas pelo dono.

    Raises:
        ResultsWriteError: Em qualquer falha de I/O.
    """
    target = Path(path)
    text = results.to_yaml()
    try:
        fd = os.open(target, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, RESULTS_FILE_MODE)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        # arquivo pré-existente mantém o modo antigo sem o chmod explícito
        os.chmod(target, RESULTS_FILE_MODE)
    except OSError as e:
        raise ResultsWriteError(
            message=f"falha ao escrever results em {target}",
            details={"path": str(target), "error": e.strerror or str(e)},
            hint="Verifique se o diretório de destino existe e é gravável",
        ) from e
    return target
