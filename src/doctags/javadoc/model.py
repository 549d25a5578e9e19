from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class TagKind(StrEnum):
    AUTHOR = "author"
    VERSION = "version"
    PARAM = "param"
    RETURN = "return"
    THROWS = "throws"
    EXCEPTION = "exception"
    SEE = "see"
    SINCE = "since"
    SERIAL = "serial"
    DEPRECATED = "deprecated"
    OTHER = "other"


_KIND_BY_NAME: dict[str, TagKind] = {
    kind.value: kind for kind in TagKind if kind is not TagKind.OTHER
}


def tag_kind_for(name: str) -> TagKind:
    """Map a literal tag name (with or without the leading ``@``) to its kind."""
    return _KIND_BY_NAME.get(name.strip().lstrip("@").lower(), TagKind.OTHER)


@dataclass(frozen=True)
class Identifier:
    name: str

    @property
    def simple_name(self) -> str:
        return self.name.rsplit(".", 1)[-1]


@dataclass(frozen=True)
class Text:
    text: str


Fragment = Identifier | Text


@dataclass
class Tag:
    kind: TagKind
    fragments: list[Fragment] = field(default_factory=list)
    # Literal spelling for tags whose kind is OTHER (e.g. "@apiNote").
    name: str = ""

    @property
    def tag_name(self) -> str:
        if self.kind is TagKind.OTHER and self.name:
            return self.name.lstrip("@")
        return self.kind.value


@dataclass
class DocBlock:
    summary: str = ""
    tags: list[Tag] = field(default_factory=list)

    def insert(self, index: int, tag: Tag) -> int:
        if index < 0 or index > len(self.tags):
            raise IndexError(f"tag index {index} outside 0..{len(self.tags)}")
        self.tags.insert(index, tag)
        return index

    def remove(self, index: int) -> Tag:
        return self.tags.pop(index)


class DeclarationKind(StrEnum):
    METHOD = "method"
    TYPE = "type"
    FIELD = "field"
    ENUM_CONSTANT = "enum_constant"


@dataclass(frozen=True)
class Parameter:
    name: str
    type_name: str = ""


@dataclass(frozen=True)
class TypeParameter:
    name: str


@dataclass(frozen=True)
class ReturnSlot:
    type_name: str

    @property
    def is_void(self) -> bool:
        return self.type_name == "void"


@dataclass(frozen=True)
class ThrownException:
    type_name: str
    resolved_name: str | None = None

    @property
    def resolved(self) -> bool:
        return self.resolved_name is not None


@dataclass
class Declaration:
    kind: DeclarationKind
    name: str = ""
    parameters: list[Parameter] = field(default_factory=list)
    type_parameters: list[TypeParameter] = field(default_factory=list)
    return_slot: ReturnSlot | None = None
    is_constructor: bool = False
    thrown_exceptions: list[ThrownException] = field(default_factory=list)
    doc: DocBlock | None = None

    def documents_return(self) -> bool:
        if self.kind is not DeclarationKind.METHOD or self.is_constructor:
            return False
        return self.return_slot is not None and not self.return_slot.is_void
