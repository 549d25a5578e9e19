"""Javadoc tag model, ordering and insertion."""

from doctags.javadoc.arguments import (
    extract_argument,
    find_param_tag,
    find_tag,
    find_throws_tag,
)
from doctags.javadoc.insertion import (
    TagInsertion,
    insert_all_missing_tags,
    insert_missing_tag,
    insert_tag,
    insertion_index,
)
from doctags.javadoc.inspection import (
    MissingElement,
    MissingRole,
    element_at,
    has_missing_tags,
    missing_elements,
)
from doctags.javadoc.model import (
    Declaration,
    DeclarationKind,
    DocBlock,
    Identifier,
    Parameter,
    ReturnSlot,
    Tag,
    TagKind,
    Text,
    ThrownException,
    TypeParameter,
    tag_kind_for,
)
from doctags.javadoc.order import TAG_ORDER, is_same_kind, rank
from doctags.javadoc.rendering import comment_stub, render_doc_block, render_tag
from doctags.javadoc.synthesis import synthesize_tag

__all__ = [
    "Declaration",
    "DeclarationKind",
    "DocBlock",
    "Identifier",
    "MissingElement",
    "MissingRole",
    "Parameter",
    "ReturnSlot",
    "TAG_ORDER",
    "Tag",
    "TagInsertion",
    "TagKind",
    "Text",
    "ThrownException",
    "TypeParameter",
    "comment_stub",
    "element_at",
    "extract_argument",
    "find_param_tag",
    "find_tag",
    "find_throws_tag",
    "has_missing_tags",
    "insert_all_missing_tags",
    "insert_missing_tag",
    "insert_tag",
    "insertion_index",
    "is_same_kind",
    "missing_elements",
    "rank",
    "render_doc_block",
    "render_tag",
    "synthesize_tag",
    "tag_kind_for",
]
