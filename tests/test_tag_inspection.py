from __future__ import annotations

import pytest

from doctags.config import TagPolicy
from doctags.exceptions import NeverThrown
from doctags.javadoc.inspection import (
    MissingRole,
    element_at,
    has_missing_tags,
    missing_elements,
    render_exception_name,
)
from doctags.javadoc.model import (
    Declaration,
    DeclarationKind,
    DocBlock,
    TagKind,
    ThrownException,
    TypeParameter,
)
from tests.tag_helpers import param, returns, throws, type_param


def _roles(elements) -> list[tuple[str, str]]:
    return [(element.role.value, element.name) for element in elements]


def test_method_candidates_in_declaration_order(make_method) -> None:
    method = make_method(
        "a", "b", type_params=("T",), throws=("java.io.IOException",), doc=DocBlock()
    )
    assert _roles(missing_elements(method)) == [
        ("type_parameter", "T"),
        ("value_parameter", "a"),
        ("value_parameter", "b"),
        ("return", ""),
        ("thrown_exception", "IOException"),
    ]


def test_documented_elements_are_not_missing(make_method) -> None:
    doc = DocBlock(tags=[type_param("T"), param("b"), returns(), throws("IOException")])
    method = make_method("a", "b", type_params=("T",), throws=("IOException",), doc=doc)
    assert _roles(missing_elements(method)) == [("value_parameter", "a")]


def test_exception_synonym_documents_throws(make_method) -> None:
    doc = DocBlock(tags=[throws("IOException", TagKind.EXCEPTION)])
    method = make_method(returns=None, throws=("IOException",), doc=doc)
    assert missing_elements(method) == []


def test_leading_names_cover_earlier_elements(make_method) -> None:
    method = make_method("a", "b", "c", type_params=("T", "U"), doc=DocBlock())
    by_name = {element.name: element for element in missing_elements(method)}
    assert by_name["T"].leading_names == frozenset()
    assert by_name["U"].leading_names == frozenset({"<T>"})
    assert by_name["a"].leading_names == frozenset({"<T>", "<U>"})
    assert by_name["c"].leading_names == frozenset({"a", "b", "<T>", "<U>"})
    assert by_name[""].leading_names is None


def test_void_and_constructor_skip_return(make_method) -> None:
    assert missing_elements(make_method(returns="void", doc=DocBlock())) == []
    assert missing_elements(make_method(returns=None, doc=DocBlock())) == []
    ctor = make_method("a", returns=None, constructor=True, doc=DocBlock())
    assert _roles(missing_elements(ctor)) == [("value_parameter", "a")]


def test_unresolved_exceptions_are_skipped(make_method) -> None:
    method = make_method(returns=None, doc=DocBlock())
    method.thrown_exceptions = [
        ThrownException("Missing"),
        ThrownException("java.io.IOException", "IOException"),
    ]
    elements = missing_elements(method)
    assert _roles(elements) == [("thrown_exception", "IOException")]
    assert elements[0].position == 1
    assert elements[0].leading_names == frozenset({"Missing"})


def test_policy_can_suppress_method_type_parameters(make_method) -> None:
    method = make_method("a", type_params=("T",), returns=None, doc=DocBlock())
    policy = TagPolicy(method_type_parameters=False)
    elements = missing_elements(method, policy)
    assert _roles(elements) == [("value_parameter", "a")]
    assert elements[0].leading_names == frozenset()


def test_type_declaration_only_lists_type_parameters() -> None:
    decl = Declaration(
        kind=DeclarationKind.TYPE,
        name="Box",
        type_parameters=[TypeParameter("K"), TypeParameter("V")],
        doc=DocBlock(tags=[type_param("V")]),
    )
    # The policy flag only applies to methods.
    elements = missing_elements(decl, TagPolicy(method_type_parameters=False))
    assert _roles(elements) == [("type_parameter", "K")]
    assert elements[0].argument == "<K>"


@pytest.mark.parametrize("kind", [DeclarationKind.FIELD, DeclarationKind.ENUM_CONSTANT])
def test_fields_have_no_candidates(kind: DeclarationKind) -> None:
    assert missing_elements(Declaration(kind=kind, name="x", doc=DocBlock())) == []


def test_detection_is_repeatable(make_method) -> None:
    method = make_method("a", doc=DocBlock(tags=[param("a"), returns()]))
    assert missing_elements(method) == []
    assert missing_elements(method) == []
    assert not has_missing_tags(method)


def test_exception_renderer_honours_qualification() -> None:
    exc = ThrownException("java.io.IOException", "IOException")
    assert render_exception_name(exc) == "IOException"
    assert render_exception_name(exc, qualified=True) == "java.io.IOException"
    decl = Declaration(kind=DeclarationKind.METHOD, name="m", thrown_exceptions=[exc])
    element = element_at(
        decl,
        MissingRole.THROWN_EXCEPTION,
        0,
        TagPolicy(qualified_exception_names=True),
    )
    assert element.name == "IOException"
    assert element.type_text == "java.io.IOException"


def test_element_at_uses_every_type_parameter(make_method) -> None:
    method = make_method("a", "b", type_params=("T",))
    element = element_at(
        method, MissingRole.VALUE_PARAMETER, 1, TagPolicy(method_type_parameters=False)
    )
    assert element.leading_names == frozenset({"a", "<T>"})


def test_element_at_rejects_out_of_range_position(make_method) -> None:
    with pytest.raises(NeverThrown):
        element_at(make_method("a"), MissingRole.VALUE_PARAMETER, 3)
