from __future__ import annotations

from doctags.javadoc.model import DocBlock, Identifier, Tag, TagKind, Text


def extract_argument(tag: Tag) -> str | None:
    """Return the name a tag documents, or ``None`` when it has none.

    Generic parameter names come back bracketed (``"<T>"``) whether the tag
    holds them as one fused text atom or as ``"<"``, identifier, ``">"``.
    """
    fragments = tag.fragments
    if not fragments:
        return None
    first = fragments[0]
    if isinstance(first, Identifier):
        return first.simple_name
    if not isinstance(first, Text) or tag.kind is not TagKind.PARAM:
        return None
    text = first.text
    if text == "<":
        if len(fragments) >= 3:
            second, third = fragments[1], fragments[2]
            if (
                isinstance(second, Identifier)
                and isinstance(third, Text)
                and third.text == ">"
            ):
                return f"<{second.simple_name}>"
        return None
    if text.startswith("<") and text.endswith(">") and len(text) > 2:
        return text
    return None


def find_tag(block: DocBlock, kind: TagKind, arg: str | None = None) -> Tag | None:
    for tag in block.tags:
        if tag.kind is not kind:
            continue
        if arg is None or extract_argument(tag) == arg:
            return tag
    return None


def find_param_tag(block: DocBlock, arg: str) -> Tag | None:
    return find_tag(block, TagKind.PARAM, arg)


def find_throws_tag(block: DocBlock, arg: str) -> Tag | None:
    for tag in block.tags:
        if tag.kind not in (TagKind.THROWS, TagKind.EXCEPTION):
            continue
        if extract_argument(tag) == arg:
            return tag
    return None
