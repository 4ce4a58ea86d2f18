"""
krmfn — Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros do krmfn.
Erros são considerados artefatos de domínio e fazem parte do contrato operacional
da execução de funções, devendo ser:

- explícitos
- serializáveis
- rastreáveis
- acionáveis

Nenhuma decisão implícita é permitida.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from .exceptions import (
    DecodeError,
    EncodeError,
    FnException,
    InvalidFunctionSpecError,
    PartitionError,
    ProcessExitError,
    ProcessSpawnError,
    ResourceMetaError,
    ResultsWriteError,
    ScopeResolutionError,
)


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FnErrorPayload:
    """
    Payload canônico de erro do krmfn.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    - fatal: indica se o pipeline não pode prosseguir
      (apenas falhas de exit adiadas via defer_failure são não-fatais).
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None
    fatal: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Scoping
RESOURCE_META_INVALID = "RESOURCE_META_INVALID"
SCOPE_RESOLUTION_FAILED = "SCOPE_RESOLUTION_FAILED"
PARTITION_FAILED = "PARTITION_FAILED"

# Envelope
ENVELOPE_ENCODE_FAILED = "ENVELOPE_ENCODE_FAILED"
ENVELOPE_DECODE_FAILED = "ENVELOPE_DECODE_FAILED"

# Runtime
FUNCTION_SPEC_INVALID = "FUNCTION_SPEC_INVALID"
FUNCTION_SPAWN_FAILED = "FUNCTION_SPAWN_FAILED"
FUNCTION_EXIT_NONZERO = "FUNCTION_EXIT_NONZERO"
RESULTS_WRITE_FAILED = "RESULTS_WRITE_FAILED"

# Fallback
FUNCTION_EXECUTION_ERROR = "FUNCTION_EXECUTION_ERROR"


_CODES = {
    ResourceMetaError: RESOURCE_META_INVALID,
    ScopeResolutionError: SCOPE_RESOLUTION_FAILED,
    PartitionError: PARTITION_FAILED,
    EncodeError: ENVELOPE_ENCODE_FAILED,
    DecodeError: ENVELOPE_DECODE_FAILED,
    InvalidFunctionSpecError: FUNCTION_SPEC_INVALID,
    ProcessSpawnError: FUNCTION_SPAWN_FAILED,
    ProcessExitError: FUNCTION_EXIT_NONZERO,
    ResultsWriteError: RESULTS_WRITE_FAILED,
}


def exception_to_payload(exc: Exception, *, deferred: bool = False) -> FnErrorPayload:
    """Converte exceções em FnErrorPayload (serializável, acionável).

    Regras:
    - FnException: já vem com message/details/hint; o código vem do catálogo.
    - Outras exceções: encapsular como FUNCTION_EXECUTION_ERROR sem expor stack trace.
    - `deferred` só afeta ProcessExitError (falha registrada, não abortiva).
    """
    if isinstance(exc, FnException):
        code = _CODES.get(type(exc))
        if code is None:
            for cls, candidate in _CODES.items():
                if isinstance(exc, cls):
                    code = candidate
                    break
        details = dict(exc.details or {})
        if isinstance(exc, ProcessExitError):
            details.setdefault("exit_code", exc.exit_code)
        return FnErrorPayload(
            type=code or FUNCTION_EXECUTION_ERROR,
            message=str(exc) or "Erro de execução",
            details=details,
            hint=exc.hint,
            fatal=not (deferred and isinstance(exc, ProcessExitError)),
        )

    return FnErrorPayload(
        type=FUNCTION_EXECUTION_ERROR,
        message=str(exc) or "Erro inesperado durante execução da função",
        details={"exception_class": exc.__class__.__name__},
        hint="Verifique o stderr da função e a configuração do descriptor",
        fatal=True,
    )
