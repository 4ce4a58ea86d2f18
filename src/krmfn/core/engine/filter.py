# src/krmfn/core/engine/filter.py
"""
Filtro de função: scoping + invocação + merge de uma única função.

Fluxo (`FunctionFilter.filter`):
    1. resolve o escopo a partir da path annotation da configuração
    2. particiona os Resources em escopo / fora de escopo
    3. invoca a função com os Resources em escopo
    4. persiste o documento de results, quando configurado
    5. aplica a política de exit (falha imediata ou adiada)
    6. atribui proveniência padrão aos Resources novos
    7. devolve a saída seguida dos Resources fora de escopo

Decisões arquiteturais:
    - O resultado da execução é um `InvocationOutcome` devolvido ao chamador;
      o descriptor nunca é mutado
    - Exit não-zero sem `defer_failure` levanta `ProcessExitError` carregando
      a saída já mesclada (sem proveniência padrão)
    - Com `defer_failure`, a mesma saída é devolvida e a falha fica consultável
      via `outcome.get_exit()`

Limites explícitos:
    - Não compõe múltiplas funções
    - Não lê nem escreve Resources no filesystem
    - Não faz retry
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from krmfn.core.errors import exception_to_payload
from krmfn.core.exceptions import ProcessExitError
from krmfn.core.pipeline.context import RunContext
from krmfn.core.provenance import assign_default_provenance
from krmfn.core.resource import Resource
from krmfn.core.runtime.descriptor import FunctionDescriptor
from krmfn.core.runtime.invoker import FunctionInvoker
from krmfn.core.runtime.results import write_results
from krmfn.core.scope import resolve_function_scope, split_by_scope


@dataclass(frozen=True)
class InvocationOutcome:
    """Resultado consultável de uma invocação (exit status + política)."""

    exit_code: int = 0
    exit_error: Optional[ProcessExitError] = None
    deferred: bool = False
    payload_meta: Dict[str, Any] = field(default_factory=dict)

    @property
    def failed(self) -> bool:
        return self.exit_code != 0

    def get_exit(self) -> Optional[ProcessExitError]:
        return self.exit_error

    def raise_for_exit(self) -> None:
        if self.exit_error is not None:
            raise self.exit_error

    def error_payload(self) -> Optional[Dict[str, Any]]:
        """Payload serializável da falha de exit, ou None."""
        if self.exit_error is None:
            return None
        return exception_to_payload(self.exit_error, deferred=self.deferred).to_dict()


@dataclass(frozen=True)
class FilterResult:
    resources: List[Resource] = field(default_factory=list)
    results: Optional[Resource] = None
    outcome: InvocationOutcome = field(default_factory=InvocationOutcome)
    scope_dir: str = ""


class FunctionFilter:
    """Aplica uma função apenas aos Resources do seu escopo."""

    def __init__(
        self,
        descriptor: FunctionDescriptor,
        *,
        invoker: Optional[FunctionInvoker] = None,
        ctx: Optional[RunContext] = None,
    ):
        self.descriptor = descriptor
        self.invoker = invoker or FunctionInvoker()
        self.ctx = ctx

    def _log(self, level: str, message: str, **extra: Any) -> None:
        if self.ctx is not None:
            self.ctx.log(step_id=self.descriptor.identity, level=level, message=message, **extra)

    def filter(self, resources: Sequence[Resource]) -> FilterResult:
        descriptor = self.descriptor

        scope_dir = resolve_function_scope(descriptor.config)
        split = split_by_scope(scope_dir, resources, global_scope=descriptor.global_scope)
        self._log(
            "INFO",
            "function scope resolved",
            scope_dir=scope_dir,
            in_scope=len(split.in_scope),
            out_of_scope=len(split.out_of_scope),
        )

        invocation = self.invoker.run(descriptor, split.in_scope)
        self._log(
            "INFO",
            "function invoked",
            exit_code=invocation.exit_code,
            output=len(invocation.resources),
            **invocation.payload_meta,
        )

        if invocation.results is not None:
            if descriptor.results_file:
                write_results(invocation.results, descriptor.results_file)
            if self.ctx is not None:
                self.ctx.set_artifact(f"{descriptor.identity}.results", invocation.results)

        output = list(invocation.resources)
        exit_error: Optional[ProcessExitError] = None

        if not invocation.succeeded:
            exit_error = ProcessExitError(
                message=f"function {descriptor.identity} exited with status {invocation.exit_code}",
                details={"function": descriptor.identity, "exit_code": invocation.exit_code},
                hint="Veja o stderr da função e o documento de results",
                exit_code=invocation.exit_code,
                resources=output + split.out_of_scope,
                results=invocation.results,
            )
            if not descriptor.defer_failure:
                self._log(
                    "ERROR",
                    "function failed",
                    error=exception_to_payload(exit_error).to_dict(),
                )
                raise exit_error

            self._log(
                "WARNING",
                "function failure deferred",
                error=exception_to_payload(exit_error, deferred=True).to_dict(),
            )
            if self.ctx is not None:
                self.ctx.add_warning(step_id=descriptor.identity, message=exit_error.message)

        assign_default_provenance(scope_dir, output, function_path=descriptor.function_path)

        return FilterResult(
            resources=output + split.out_of_scope,
            results=invocation.results,
            outcome=InvocationOutcome(
                exit_code=invocation.exit_code,
                exit_error=exit_error,
                deferred=exit_error is not None,
                payload_meta=dict(invocation.payload_meta),
            ),
            scope_dir=scope_dir,
        )
