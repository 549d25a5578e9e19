from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Sequence

from loguru import logger

from doctags.config import TagPolicy
from doctags.invariants import never
from doctags.javadoc.arguments import extract_argument
from doctags.javadoc.inspection import MissingElement, MissingRole, missing_elements
from doctags.javadoc.model import Declaration, DocBlock, Tag
from doctags.javadoc.order import is_same_kind, rank
from doctags.javadoc.synthesis import tag_for_element

# Batch insertion walks categories in this order, each one last-to-first.
_BATCH_ROLE_ORDER: tuple[MissingRole, ...] = (
    MissingRole.TYPE_PARAMETER,
    MissingRole.VALUE_PARAMETER,
    MissingRole.RETURN,
    MissingRole.THROWN_EXCEPTION,
)


@dataclass(frozen=True)
class TagInsertion:
    index: int
    tag: Tag


def insertion_index(
    tags: Sequence[Tag],
    new_tag: Tag,
    same_kind_leading_names: AbstractSet[str] | None = None,
) -> int:
    """Index at which ``new_tag`` belongs in ``tags``.

    Scanning backward, the new tag goes right after the nearest tag that must
    precede it: one of a lower canonical rank, or one of the same kind whose
    argument names an element declared earlier. With no such tag it goes
    first. Passing ``None`` for the leading names disables same-kind
    anchoring.
    """
    new_rank = rank(new_tag.kind)
    for index in range(len(tags) - 1, -1, -1):
        current = tags[index]
        if new_rank > rank(current.kind):
            return index + 1
        if same_kind_leading_names is not None and is_same_kind(
            new_tag.kind, current.kind
        ):
            argument = extract_argument(current)
            if argument is not None and argument in same_kind_leading_names:
                return index + 1
    return 0


def insert_tag(
    block: DocBlock,
    new_tag: Tag,
    same_kind_leading_names: AbstractSet[str] | None = None,
) -> int:
    index = insertion_index(block.tags, new_tag, same_kind_leading_names)
    logger.debug(
        "placing @{} {} at {} of {}",
        new_tag.tag_name,
        extract_argument(new_tag),
        index,
        len(block.tags),
    )
    return block.insert(index, new_tag)


def insert_missing_tag(declaration: Declaration, element: MissingElement) -> TagInsertion:
    """Insert the tag for one element, creating the doc block if needed."""
    if element.role not in _BATCH_ROLE_ORDER:
        never("unexpected missing element role", role=element.role)
    fresh_block = declaration.doc is None
    if fresh_block:
        declaration.doc = DocBlock()
    tag = tag_for_element(element, with_line_break_placeholder=fresh_block)
    index = insert_tag(declaration.doc, tag, element.leading_names)
    return TagInsertion(index=index, tag=tag)


def insert_all_missing_tags(
    declaration: Declaration, policy: TagPolicy | None = None
) -> list[TagInsertion]:
    """Insert a tag for every undocumented element of ``declaration``.

    Each category is processed last-declared first, so an earlier element
    always finds its later siblings already placed and settles in front of
    them; one pass of independent insertions yields declaration order.
    Returns the insertions in the order they were applied. The declaration
    must already own a doc block.
    """
    block = declaration.doc
    if block is None:
        never("batch tag insertion requires a doc block", declaration=declaration.name)
    candidates = missing_elements(declaration, policy)
    applied: list[TagInsertion] = []
    for role in _BATCH_ROLE_ORDER:
        for element in reversed([c for c in candidates if c.role is role]):
            tag = tag_for_element(element)
            index = insert_tag(block, tag, element.leading_names)
            applied.append(TagInsertion(index=index, tag=tag))
    return applied
