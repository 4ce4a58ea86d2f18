# src/krmfn/core/runtime/environment.py
"""
Construção do ambiente do processo filho.

Política:
    - Todo o ambiente do processo invocador é propagado
    - Duas variáveis de sinalização são sempre forçadas, pedindo results
      estruturados e cópia das mensagens de erro no stderr
    - Cada variável é declarada explicitamente ao container (`-e NAME`),
      nunca herdada implicitamente

Funções puras: o snapshot de ambiente é um argumento, `os.environ` nunca é
lido nem mutado aqui.
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional

LOG_TO_STDERR = "LOG_TO_STDERR"
STRUCTURED_RESULTS = "STRUCTURED_RESULTS"

SIGNAL_ENV: Dict[str, str] = {
    LOG_TO_STDERR: "true",
    STRUCTURED_RESULTS: "true",
}


def build_environment(
    environ: Mapping[str, str],
    signals: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    """
    Snapshot do ambiente + variáveis de sinalização.

    `SIGNAL_ENV` é sempre aplicado; `signals` apenas acrescenta variáveis ou
    sobrescreve valores, nunca remove as duas variáveis fixas.
    """
    env = {str(k): str(v) for k, v in environ.items() if k}
    env.update(SIGNAL_ENV)
    env.update(signals or {})
    return env


def declared_env_names(env: Mapping[str, str]) -> List[str]:
    """Nomes a declarar como `-e NAME`, na ordem do ambiente."""
    return [name for name in env if name and "=" not in name]
