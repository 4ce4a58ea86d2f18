"""
Test — Guardrails de erro (payloads canônicos)

Cenários: cada falha operacional de uma invocação (exit não-zero, spawn,
envelope inválido, results não gravável, configuração ilegível) precisa
produzir um FnErrorPayload padronizado e determinístico.

Os snapshots em `snapshots/` são o contrato mínimo: campos extras no
payload real (ex.: mensagens do sistema operacional) são permitidos.
"""

from pathlib import Path

import pytest

from krmfn.core.engine import FunctionFilter
from krmfn.core.errors import exception_to_payload
from krmfn.core.exceptions import (
    DecodeError,
    ProcessExitError,
    ProcessSpawnError,
    ResultsWriteError,
    ScopeResolutionError,
)
from krmfn.core.resource import Resource
from krmfn.core.runtime.descriptor import FunctionDescriptor
from krmfn.core.runtime.invoker import FunctionInvoker
from krmfn.core.scope import resolve_function_scope
from tests.errors._snapshot_helpers import assert_error_snapshot


def test_function_exit_nonzero(invoker, exec_descriptor, dummy_ctx) -> None:
    with pytest.raises(ProcessExitError):
        FunctionFilter(exec_descriptor("dir/fn.yaml", exit_code=4), invoker=invoker, ctx=dummy_ctx).filter([])

    assert_error_snapshot("function_exit_nonzero.json", dummy_ctx.events[-1]["error"])


def test_function_exit_deferred(invoker, exec_descriptor) -> None:
    descriptor = exec_descriptor("dir/fn.yaml", exit_code=1, defer_failure=True)
    outcome = FunctionFilter(descriptor, invoker=invoker).filter([]).outcome

    assert_error_snapshot("function_exit_deferred.json", outcome.error_payload())


def test_function_spawn_failed(fixed_environ, tmp_path: Path) -> None:
    invoker = FunctionInvoker(environ=fixed_environ)
    with pytest.raises(ProcessSpawnError) as exc:
        invoker.run(FunctionDescriptor(exec_path=str(tmp_path / "missing-fn")), [])

    assert_error_snapshot("function_spawn_failed.json", exception_to_payload(exc.value).to_dict())


def test_envelope_decode_failed(invoker, exec_descriptor) -> None:
    with pytest.raises(DecodeError) as exc:
        invoker.run(exec_descriptor(raw_output="kind: [\n"), [])

    assert_error_snapshot("envelope_decode_failed.json", exception_to_payload(exc.value).to_dict())


def test_results_write_failed(invoker, exec_descriptor, tmp_path: Path) -> None:
    descriptor = exec_descriptor(
        "dir/fn.yaml",
        results={"kind": "FunctionResultList", "items": []},
        results_file=str(tmp_path / "no-such-dir" / "results.yaml"),
    )
    with pytest.raises(ResultsWriteError) as exc:
        FunctionFilter(descriptor, invoker=invoker).filter([])

    assert_error_snapshot("results_write_failed.json", exception_to_payload(exc.value).to_dict())


def test_scope_resolution_failed() -> None:
    config = Resource({"apiVersion": "v1", "kind": "ConfigMap", "metadata": "not-a-mapping"})
    with pytest.raises(ScopeResolutionError) as exc:
        resolve_function_scope(config)

    assert_error_snapshot("scope_resolution_failed.json", exception_to_payload(exc.value).to_dict())


def test_unknown_exception_is_wrapped() -> None:
    payload = exception_to_payload(RuntimeError("boom")).to_dict()
    assert payload["type"] == "FUNCTION_EXECUTION_ERROR"
    assert payload["details"] == {"exception_class": "RuntimeError"}
    assert payload["fatal"] is True
