from __future__ import annotations

from typing import Iterable

from doctags.config import TagPolicy
from doctags.javadoc.inspection import render_exception_name, render_type_parameter
from doctags.javadoc.model import (
    Declaration,
    DeclarationKind,
    DocBlock,
    Identifier,
    Tag,
    Text,
)

_OPEN = "/**"
_CLOSE = " */"
_LINE = " *"


def render_tag(tag: Tag) -> str:
    line = "@" + tag.tag_name
    previous = ""
    for fragment in tag.fragments:
        piece = fragment.name if isinstance(fragment, Identifier) else fragment.text
        if not piece:
            continue
        if previous == "<" or piece == ">":
            line += piece
        else:
            line += " " + piece
        previous = piece
    return line


def _comment(lines: Iterable[str]) -> str:
    body = [_OPEN]
    for line in lines:
        body.append(f"{_LINE} {line}" if line else _LINE)
    body.append(_CLOSE)
    return "\n".join(body) + "\n"


def render_doc_block(block: DocBlock) -> str:
    lines: list[str] = []
    if block.summary:
        lines.extend(block.summary.splitlines())
    if block.tags:
        if lines:
            lines.append("")
        lines.extend(render_tag(tag) for tag in block.tags)
    return _comment(lines)


def comment_stub(declaration: Declaration, policy: TagPolicy | None = None) -> str | None:
    """Generate a complete comment for a declaration that has none.

    Returns ``None`` when the declaration is already documented or has no
    name to document.
    """
    policy = policy or TagPolicy()
    if declaration.doc is not None or not declaration.name:
        return None
    lines: list[str] = [policy.stub_placeholder]
    kind = declaration.kind
    if kind is DeclarationKind.FIELD or kind is DeclarationKind.ENUM_CONSTANT:
        return _comment(lines)
    if kind is DeclarationKind.TYPE:
        tags = [f"@param {render_type_parameter(tp.name)}" for tp in declaration.type_parameters]
    else:
        tags = []
        if policy.method_type_parameters:
            tags.extend(
                f"@param {render_type_parameter(tp.name)}"
                for tp in declaration.type_parameters
            )
        tags.extend(f"@param {param.name}" for param in declaration.parameters)
        if declaration.documents_return():
            tags.append("@return")
        tags.extend(
            "@throws "
            + render_exception_name(exc, qualified=policy.qualified_exception_names)
            for exc in declaration.thrown_exceptions
        )
    if tags:
        if policy.stub_placeholder:
            lines.append("")
        lines.extend(tags)
    return _comment(lines)


def indent_comment(comment: str, indent: str, line_delimiter: str = "\n") -> str:
    """Re-indent a generated comment to sit in front of a declaration.

    The first line is left bare since it is inserted at the declaration's own
    indentation; the result ends with the delimiter and the indent so the
    declaration keeps its column.
    """
    lines = comment.splitlines()
    if not lines:
        return ""
    out = line_delimiter.join(
        [lines[0]] + [indent + line if line else line for line in lines[1:]]
    )
    return out + line_delimiter + indent
