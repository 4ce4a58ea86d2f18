# tests/core/provenance/test_annotator.py
"""
Testes da proveniência padrão atribuída à saída de uma função.

Os testes asseguram que:
- path annotations existentes nunca são sobrescritas
- o path padrão é <escopo>/<stem da função>/<namespace>/<kind>_<name>.yaml
- nomes sintetizados que colidem recebem sufixo distinto
- Resources com path annotation não recebem nenhum defaulting (nem index)
"""

import pytest

from krmfn.core.exceptions import ResourceMetaError
from krmfn.core.provenance import assign_default_provenance
from krmfn.core.provenance.annotator import default_path, function_stem
from krmfn.core.resource import INDEX_ANNOTATION, PATH_ANNOTATION, Resource, ResourceMeta


def _paths(resources):
    return [r.get_annotation(PATH_ANNOTATION) for r in resources]


def _indices(resources):
    return [r.get_annotation(INDEX_ANNOTATION) for r in resources]


@pytest.mark.parametrize(
    "path, expected",
    [
        ("dir/fn.yaml", "fn"),
        ("dir/functions/set-replicas.yml", "set-replicas"),
        ("fn", "fn"),
        (None, ""),
        ("", ""),
    ],
)
def test_function_stem(path, expected):
    assert function_stem(path) == expected


def test_default_path_segments():
    meta = ResourceMeta(api_version="apps/v1", kind="Deployment", name="Foo", namespace="baz")
    assert default_path("dir", meta, "fn") == "dir/fn/baz/deployment_foo.yaml"
    assert default_path("", meta) == "baz/deployment_foo.yaml"


def test_unsafe_characters_replaced():
    meta = ResourceMeta(api_version="v1", kind="Role Binding", name="a:b/c")
    assert default_path("", meta) == "role_binding_a_b_c.yaml"


def test_new_resource_gets_function_relative_path(make_resource):
    out = [make_resource("Foo", "bar")]

    synthesized = assign_default_provenance("dir", out, function_path="dir/fn.yaml")

    assert synthesized == ["dir/fn/foo_bar.yaml"]
    assert _paths(out) == ["dir/fn/foo_bar.yaml"]
    assert _indices(out) == ["0"]


def test_existing_annotations_never_overwritten(make_resource):
    out = [
        make_resource("ConfigMap", "a", path="dir/a.yaml", index=4),
        make_resource("ConfigMap", "b", path="dir/b.yaml"),
    ]

    synthesized = assign_default_provenance("dir", out, function_path="dir/fn.yaml")

    assert synthesized == []
    assert _paths(out) == ["dir/a.yaml", "dir/b.yaml"]
    assert _indices(out) == ["4", None]


def test_annotated_output_is_left_untouched(make_resource):
    b = make_resource("ConfigMap", "b", path="dir/b.yaml")
    before = b.to_dict()

    assign_default_provenance("dir", [b], function_path="dir/fn.yaml")

    assert b.to_dict() == before
    assert b.annotations == {PATH_ANNOTATION: "dir/b.yaml"}


def test_namespace_segment(make_resource):
    out = [make_resource("Deployment", "foo", namespace="baz")]
    assign_default_provenance("apps", out, function_path="apps/functions/gen.yaml")
    assert _paths(out) == ["apps/gen/baz/deployment_foo.yaml"]


def test_colliding_names_get_distinct_files(make_resource):
    out = [
        make_resource("Foo", "bar", api_version="a/v1"),
        make_resource("Foo", "bar", api_version="b/v1"),
        make_resource("Foo", "bar", api_version="c/v1"),
    ]

    assign_default_provenance("", out)

    assert _paths(out) == ["foo_bar.yaml", "foo_bar_1.yaml", "foo_bar_2.yaml"]
    assert len(set(_paths(out))) == 3


def test_collision_with_already_annotated_output(make_resource):
    out = [
        make_resource("Foo", "bar"),
        make_resource("Foo", "bar", path="dir/fn/foo_bar.yaml", index=0),
    ]

    assign_default_provenance("dir", out, function_path="dir/fn.yaml")

    assert _paths(out) == ["dir/fn/foo_bar_1.yaml", "dir/fn/foo_bar.yaml"]
    assert _indices(out) == ["0", "0"]


def test_index_only_added_with_synthesized_path(make_resource):
    out = [
        make_resource("ConfigMap", "a", path="dir/all.yaml", index=2),
        make_resource("ConfigMap", "b", path="dir/all.yaml"),
        make_resource("ConfigMap", "c"),
        make_resource("ConfigMap", "d", index=7),
    ]

    assign_default_provenance("dir", out)

    assert _paths(out) == ["dir/all.yaml", "dir/all.yaml", "dir/configmap_c.yaml", "dir/configmap_d.yaml"]
    assert _indices(out) == ["2", None, "0", "7"]


def test_unreadable_metadata_raises():
    with pytest.raises(ResourceMetaError):
        assign_default_provenance("", [Resource({"kind": "Foo", "metadata": ["bad"]})])
