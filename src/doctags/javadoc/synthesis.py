from __future__ import annotations

from doctags.invariants import never
from doctags.javadoc.inspection import MissingElement, MissingRole, render_type_parameter
from doctags.javadoc.model import Fragment, Identifier, Tag, TagKind, Text


def synthesize_tag(
    role: MissingRole,
    name: str = "",
    type_text: str | None = None,
    *,
    with_line_break_placeholder: bool = False,
) -> Tag:
    """Build a placeholder tag for an undocumented element.

    The trailing empty text fragment marks where the description goes; a tag
    placed into a brand-new block gets a second one so the editable region
    does not span a line break.
    """
    fragments: list[Fragment]
    if role is MissingRole.VALUE_PARAMETER:
        kind = TagKind.PARAM
        fragments = [Identifier(name)]
    elif role is MissingRole.TYPE_PARAMETER:
        kind = TagKind.PARAM
        fragments = [Text(render_type_parameter(name))]
    elif role is MissingRole.RETURN:
        kind = TagKind.RETURN
        fragments = []
    elif role is MissingRole.THROWN_EXCEPTION:
        kind = TagKind.THROWS
        fragments = [Identifier(type_text or name)]
    else:
        never("unexpected missing element role", role=role)
    fragments.append(Text(""))
    if with_line_break_placeholder:
        fragments.append(Text(""))
    return Tag(kind=kind, fragments=fragments)


def tag_for_element(
    element: MissingElement, *, with_line_break_placeholder: bool = False
) -> Tag:
    return synthesize_tag(
        element.role,
        element.name,
        element.type_text or None,
        with_line_break_placeholder=with_line_break_placeholder,
    )
