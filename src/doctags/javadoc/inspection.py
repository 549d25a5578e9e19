from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Sequence

from loguru import logger

from doctags.config import TagPolicy
from doctags.invariants import never
from doctags.javadoc.arguments import find_param_tag, find_tag, find_throws_tag
from doctags.javadoc.model import (
    Declaration,
    DeclarationKind,
    DocBlock,
    Parameter,
    TagKind,
    ThrownException,
    TypeParameter,
)


class MissingRole(StrEnum):
    VALUE_PARAMETER = "value_parameter"
    TYPE_PARAMETER = "type_parameter"
    RETURN = "return"
    THROWN_EXCEPTION = "thrown_exception"


@dataclass(frozen=True)
class MissingElement:
    role: MissingRole
    name: str
    position: int
    # None disables same-kind anchoring (RETURN has at most one tag).
    leading_names: frozenset[str] | None
    type_text: str = ""

    @property
    def argument(self) -> str | None:
        if self.role is MissingRole.TYPE_PARAMETER:
            return render_type_parameter(self.name)
        if self.role is MissingRole.RETURN:
            return None
        return self.name


def render_type_parameter(name: str) -> str:
    return f"<{name}>"


def exception_simple_name(exception: ThrownException) -> str:
    if exception.resolved_name:
        return exception.resolved_name.rsplit(".", 1)[-1]
    return exception.type_name.rsplit(".", 1)[-1]


def render_exception_name(exception: ThrownException, *, qualified: bool = False) -> str:
    if qualified:
        return exception.type_name
    return exception_simple_name(exception)


def previous_type_parameter_names(
    type_parameters: Sequence[TypeParameter], position: int
) -> set[str]:
    return {render_type_parameter(tp.name) for tp in type_parameters[:position]}


def previous_parameter_names(parameters: Sequence[Parameter], position: int) -> set[str]:
    return {param.name for param in parameters[:position]}


def previous_exception_names(
    exceptions: Sequence[ThrownException], position: int
) -> set[str]:
    return {exception_simple_name(exc) for exc in exceptions[:position]}


def method_type_parameters(declaration: Declaration, policy: TagPolicy) -> list[TypeParameter]:
    if declaration.kind is DeclarationKind.METHOD and not policy.method_type_parameters:
        return []
    return list(declaration.type_parameters)


def type_parameter_element(
    type_parameters: Sequence[TypeParameter], position: int
) -> MissingElement:
    return MissingElement(
        role=MissingRole.TYPE_PARAMETER,
        name=type_parameters[position].name,
        position=position,
        leading_names=frozenset(previous_type_parameter_names(type_parameters, position)),
    )


def parameter_element(
    parameters: Sequence[Parameter],
    position: int,
    type_parameters: Sequence[TypeParameter],
) -> MissingElement:
    leading = previous_parameter_names(parameters, position)
    leading.update(render_type_parameter(tp.name) for tp in type_parameters)
    return MissingElement(
        role=MissingRole.VALUE_PARAMETER,
        name=parameters[position].name,
        position=position,
        leading_names=frozenset(leading),
    )


def return_element() -> MissingElement:
    return MissingElement(
        role=MissingRole.RETURN, name="", position=0, leading_names=None
    )


def exception_element(
    exceptions: Sequence[ThrownException], position: int, *, qualified: bool = False
) -> MissingElement:
    exception = exceptions[position]
    return MissingElement(
        role=MissingRole.THROWN_EXCEPTION,
        name=exception_simple_name(exception),
        position=position,
        leading_names=frozenset(previous_exception_names(exceptions, position)),
        type_text=render_exception_name(exception, qualified=qualified),
    )


def element_at(
    declaration: Declaration,
    role: MissingRole,
    position: int = 0,
    policy: TagPolicy | None = None,
) -> MissingElement:
    """Describe one declaration element as a tag candidate.

    Used for single-tag insertion, where the caller already knows which
    element lacks a tag; out-of-range positions are caller bugs.
    """
    policy = policy or TagPolicy()
    if role is MissingRole.TYPE_PARAMETER:
        items: Sequence[object] = declaration.type_parameters
    elif role is MissingRole.VALUE_PARAMETER:
        items = declaration.parameters
    elif role is MissingRole.THROWN_EXCEPTION:
        items = declaration.thrown_exceptions
    elif role is MissingRole.RETURN:
        return return_element()
    else:
        never("unexpected missing element role", role=role)
    if not 0 <= position < len(items):
        never(
            "missing element position out of range",
            role=role,
            position=position,
            size=len(items),
        )
    if role is MissingRole.TYPE_PARAMETER:
        return type_parameter_element(declaration.type_parameters, position)
    if role is MissingRole.VALUE_PARAMETER:
        return parameter_element(
            declaration.parameters, position, declaration.type_parameters
        )
    return exception_element(
        declaration.thrown_exceptions,
        position,
        qualified=policy.qualified_exception_names,
    )


def missing_elements(
    declaration: Declaration, policy: TagPolicy | None = None
) -> list[MissingElement]:
    """List the elements of ``declaration`` that have no tag yet.

    The result is in declaration order: type parameters, value parameters,
    the return slot, then thrown exceptions. Fields and enum constants carry
    no taggable elements.
    """
    policy = policy or TagPolicy()
    block = declaration.doc or DocBlock()
    kind = declaration.kind
    if kind is DeclarationKind.FIELD or kind is DeclarationKind.ENUM_CONSTANT:
        return []
    if kind is not DeclarationKind.METHOD and kind is not DeclarationKind.TYPE:
        never("unexpected declaration kind", kind=kind)

    missing: list[MissingElement] = []
    type_parameters = method_type_parameters(declaration, policy)
    for position, type_parameter in enumerate(type_parameters):
        if find_param_tag(block, render_type_parameter(type_parameter.name)) is None:
            missing.append(type_parameter_element(type_parameters, position))
    if kind is DeclarationKind.TYPE:
        return missing

    for position, parameter in enumerate(declaration.parameters):
        if find_param_tag(block, parameter.name) is None:
            missing.append(
                parameter_element(declaration.parameters, position, type_parameters)
            )
    if declaration.documents_return() and find_tag(block, TagKind.RETURN) is None:
        missing.append(return_element())
    exceptions = declaration.thrown_exceptions
    for position, exception in enumerate(exceptions):
        if not exception.resolved:
            logger.debug(
                "skipping unresolved exception {} on {}",
                exception.type_name,
                declaration.name,
            )
            continue
        if find_throws_tag(block, exception_simple_name(exception)) is None:
            missing.append(
                exception_element(
                    exceptions, position, qualified=policy.qualified_exception_names
                )
            )
    return missing


def has_missing_tags(declaration: Declaration, policy: TagPolicy | None = None) -> bool:
    return bool(missing_elements(declaration, policy))
