"""
krmfn — Canonical Exceptions (v1)

Este módulo define exceções tipadas internas do krmfn.

Objetivo:
- Permitir que scoping, codec, runtime e provenance levantem exceções semânticas tipadas
- Facilitar o mapeamento determinístico para FnErrorPayload
- Evitar ValueError/RuntimeError genéricos em guardrails críticos

Regras:
- Não contém lógica de execução de funções.
- `details` carrega apenas dados estruturados (serializáveis).
- Nenhuma exceção é re-tentada automaticamente: política de retry pertence ao chamador.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class FnException(Exception):
    """Base class para exceções internas do krmfn.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Não embedar stack trace em payloads de erro
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover
        return self.message


# ---------------------------------------------------------------------------
# Metadata / Scoping
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ResourceMetaError(FnException):
    """Metadata do Resource não pode ser lida (estrutura inválida)."""


@dataclass(frozen=True)
class ScopeResolutionError(FnException):
    """Escopo da função não pode ser resolvido a partir de sua configuração."""


@dataclass(frozen=True)
class PartitionError(FnException):
    """Falha ao ler metadata durante a partição de Resources por escopo."""


# ---------------------------------------------------------------------------
# Wire / Envelope
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class EncodeError(FnException):
    """ResourceList não pôde ser serializado."""


@dataclass(frozen=True)
class DecodeError(FnException):
    """Saída do processo não é um envelope/stream YAML válido."""


# ---------------------------------------------------------------------------
# Runtime
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class InvalidFunctionSpecError(FnException):
    """Descriptor sem runtime executável (nem imagem, nem executável)."""


@dataclass(frozen=True)
class ProcessSpawnError(FnException):
    """Executável não encontrado ou inutilizável."""


@dataclass(frozen=True)
class ProcessExitError(FnException):
    """Processo da função terminou com exit status não-zero.

    Carrega também a saída já decodificada (mesclada com os Resources fora
    de escopo), porque uma função que falha ainda pode emitir diagnóstico.
    """

    exit_code: int = 1
    resources: List[Any] = field(default_factory=list)
    results: Any = None


@dataclass(frozen=True)
class ResultsWriteError(FnException):
    """Falha de I/O ao persistir o documento de results."""
