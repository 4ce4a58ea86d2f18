# tests/core/runtime/test_results.py
"""Testes da persistência do documento de results."""

import os
import stat
import sys
from pathlib import Path

import pytest
import yaml

from krmfn.core.exceptions import ResultsWriteError
from krmfn.core.resource import Resource
from krmfn.core.runtime.results import RESULTS_FILE_MODE, write_results


@pytest.fixture
def results():
    return Resource({"apiVersion": "kpt.dev/v1alpha1", "kind": "FunctionResultList", "items": [{"message": "ação"}]})


def test_writes_utf8_yaml(tmp_path: Path, results):
    out = write_results(results, str(tmp_path / "results.yaml"))
    assert yaml.safe_load(out.read_text(encoding="utf-8")) == results.to_dict()


@pytest.mark.skipif(sys.platform.startswith("win"), reason="POSIX permissions")
def test_owner_only_permissions_even_for_existing_file(tmp_path: Path, results):
    target = tmp_path / "results.yaml"
    target.write_text("old", encoding="utf-8")
    os.chmod(target, 0o644)
    write_results(results, str(target))
    assert stat.S_IMODE(target.stat().st_mode) == RESULTS_FILE_MODE


def test_missing_directory_raises(tmp_path: Path, results):
    with pytest.raises(ResultsWriteError) as exc:
        write_results(results, str(tmp_path / "nope" / "results.yaml"))
    assert exc.value.details["path"].endswith("results.yaml")
