from __future__ import annotations

from doctags.javadoc.model import TagKind

# Javadoc style guide order of tags; THROWS stands for its EXCEPTION synonym.
TAG_ORDER: tuple[TagKind, ...] = (
    TagKind.AUTHOR,
    TagKind.VERSION,
    TagKind.PARAM,
    TagKind.RETURN,
    TagKind.THROWS,
    TagKind.SEE,
    TagKind.SINCE,
    TagKind.SERIAL,
    TagKind.DEPRECATED,
)

_RANKS: dict[TagKind, int] = {kind: index for index, kind in enumerate(TAG_ORDER)}


def _canonical(kind: TagKind) -> TagKind:
    if kind is TagKind.EXCEPTION:
        return TagKind.THROWS
    return kind


def rank(kind: TagKind) -> int:
    return _RANKS.get(_canonical(kind), len(TAG_ORDER))


def is_same_kind(inserted: TagKind, existing: TagKind) -> bool:
    return _canonical(inserted) is _canonical(existing)
