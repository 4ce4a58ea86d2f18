# tests/conftest.py
"""
Fixtures compartilhados para testes do krmfn.

Este módulo define fixtures reutilizáveis que fornecem:
- fábrica de Resources com path/index annotations
- um ambiente de processo fixo (snapshot injetável no invoker)
- uma função real, executável localmente (`tests/fixtures/functions/scripted_fn.py`)
- contexto de execução controlado (RunContext)

Decisões arquiteturais:
    - Funções de teste usam o runtime `exec` com o interpretador atual,
      sem depender de docker
    - O ambiente do processo é sempre injetado, nunca lido de os.environ
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Limites explícitos:
    - Não substituir testes de integração com um runtime de containers real
"""

import os
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"
SCRIPTED_FN = FIXTURES_DIR / "functions" / "scripted_fn.py"


@pytest.fixture
def make_resource():
    """
    Fixture factory de Resources mínimos.

    Returns:
        Callable[..., Resource]: `make_resource(kind, name, path=None, index=None,
        namespace=None, api_version="v1", **annotations)`.
    """
    from krmfn.core.resource import INDEX_ANNOTATION, PATH_ANNOTATION, Resource

    def _make(kind, name, path=None, index=None, namespace=None, api_version="v1", annotations=None):
        metadata = {"name": name}
        if namespace:
            metadata["namespace"] = namespace
        annos = dict(annotations or {})
        if path is not None:
            annos[PATH_ANNOTATION] = path
        if index is not None:
            annos[INDEX_ANNOTATION] = str(index)
        if annos:
            metadata["annotations"] = annos
        return Resource({"apiVersion": api_version, "kind": kind, "metadata": metadata})

    return _make


@pytest.fixture
def fixed_environ() -> dict:
    """
    Snapshot de ambiente determinístico para o processo filho.

    Inclui PATH e SYSTEMROOT (quando existirem) para que o interpretador
    consiga iniciar em qualquer plataforma.
    """
    env = {"KRMFN_TEST_TOKEN": "abc123", "HOME": "/tmp"}
    for name in ("PATH", "SYSTEMROOT", "PYTHONPATH"):
        if name in os.environ:
            env[name] = os.environ[name]
    return env


@pytest.fixture
def function_config():
    """
    Fixture factory da configuração da função scriptada.

    `function_config(path="dir/fn.yaml", **data)` devolve um ConfigMap cujo
    `data` é interpretado pela função de teste (ver scripted_fn.py).
    """
    from krmfn.core.resource import PATH_ANNOTATION, Resource

    def _make(path=None, **data):
        metadata = {"name": "fn"}
        if path is not None:
            metadata["annotations"] = {PATH_ANNOTATION: path}
        return Resource({"apiVersion": "v1", "kind": "ConfigMap", "metadata": metadata, "data": data})

    return _make


@pytest.fixture
def exec_descriptor(function_config):
    """
    Fixture factory de descriptors que executam a função scriptada localmente.

    `exec_descriptor(path="dir/fn.yaml", defer_failure=False, global_scope=False,
    results_file=None, **data)`.
    """
    from krmfn.core.runtime.descriptor import FunctionDescriptor

    def _make(path=None, *, defer_failure=False, global_scope=False, results_file=None, **data):
        return FunctionDescriptor(
            exec_path=sys.executable,
            exec_args=[str(SCRIPTED_FN)],
            defer_failure=defer_failure,
            global_scope=global_scope,
            results_file=results_file,
            config=function_config(path=path, **data),
        )

    return _make


@pytest.fixture
def invoker(fixed_environ):
    """FunctionInvoker com ambiente fixo e stderr do filho descartado."""
    import subprocess

    from krmfn.core.runtime.invoker import FunctionInvoker

    return FunctionInvoker(environ=fixed_environ, stderr=subprocess.DEVNULL)


@pytest.fixture
def dummy_ctx():
    """
    RunContext determinístico para testes.

    `run_id` e `created_at` são fixos para garantir determinismo.
    """
    from krmfn.core.pipeline.context import RunContext

    return RunContext(
        run_id="run-test-001",
        created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
        config={"runtime": {"network": "none"}},
        meta={"source": "pytest"},
    )
