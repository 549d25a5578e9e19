from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from doctags.javadoc.insertion import TagInsertion
from doctags.javadoc.inspection import MissingRole
from doctags.javadoc.model import (
    Declaration,
    DeclarationKind,
    DocBlock,
    Fragment,
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
from doctags.javadoc.rendering import render_tag
from doctags.proposals.model import TagPlan


class FragmentDTO(BaseModel):
    kind: Literal["identifier", "text"]
    value: str


class TagDTO(BaseModel):
    name: str
    fragments: list[FragmentDTO] = []


class DocBlockDTO(BaseModel):
    summary: str = ""
    tags: list[TagDTO] = []


class ParameterDTO(BaseModel):
    name: str
    type_name: str = ""


class ThrownExceptionDTO(BaseModel):
    type_name: str
    resolved_name: str | None = None


class DeclarationDTO(BaseModel):
    kind: DeclarationKind
    name: str = ""
    parameters: list[ParameterDTO] = []
    type_parameters: list[str] = []
    return_type: str | None = None
    is_constructor: bool = False
    thrown_exceptions: list[ThrownExceptionDTO] = []
    doc: DocBlockDTO | None = None


class ElementDTO(BaseModel):
    role: MissingRole
    position: int = 0


class MissingTagsRequest(BaseModel):
    declaration: DeclarationDTO
    element: ElementDTO | None = None
    indent: str = ""
    method_type_parameters: bool | None = None
    qualified_exception_names: bool | None = None


class RemoveTagRequest(BaseModel):
    declaration: DeclarationDTO
    index: int


class TagInsertionDTO(BaseModel):
    index: int
    tag: TagDTO
    rendered: str


class MissingTagsResponse(BaseModel):
    label: str = ""
    insertions: list[TagInsertionDTO] = []
    tags: list[TagDTO] = []
    stub: str | None = None
    warnings: list[str] = []
    errors: list[str] = []


def fragment_from_dto(dto: FragmentDTO) -> Fragment:
    if dto.kind == "identifier":
        return Identifier(dto.value)
    return Text(dto.value)


def fragment_to_dto(fragment: Fragment) -> FragmentDTO:
    if isinstance(fragment, Identifier):
        return FragmentDTO(kind="identifier", value=fragment.name)
    return FragmentDTO(kind="text", value=fragment.text)


def tag_from_dto(dto: TagDTO) -> Tag:
    kind = tag_kind_for(dto.name)
    return Tag(
        kind=kind,
        fragments=[fragment_from_dto(item) for item in dto.fragments],
        name=dto.name.lstrip("@") if kind is TagKind.OTHER else "",
    )


def tag_to_dto(tag: Tag) -> TagDTO:
    return TagDTO(
        name=tag.tag_name,
        fragments=[fragment_to_dto(item) for item in tag.fragments],
    )


def declaration_from_dto(dto: DeclarationDTO) -> Declaration:
    doc = None
    if dto.doc is not None:
        doc = DocBlock(
            summary=dto.doc.summary,
            tags=[tag_from_dto(item) for item in dto.doc.tags],
        )
    return Declaration(
        kind=dto.kind,
        name=dto.name,
        parameters=[Parameter(p.name, p.type_name) for p in dto.parameters],
        type_parameters=[TypeParameter(name) for name in dto.type_parameters],
        return_slot=ReturnSlot(dto.return_type) if dto.return_type else None,
        is_constructor=dto.is_constructor,
        thrown_exceptions=[
            ThrownException(exc.type_name, exc.resolved_name)
            for exc in dto.thrown_exceptions
        ],
        doc=doc,
    )


def insertion_to_dto(insertion: TagInsertion) -> TagInsertionDTO:
    return TagInsertionDTO(
        index=insertion.index,
        tag=tag_to_dto(insertion.tag),
        rendered=render_tag(insertion.tag),
    )


def plan_to_response(plan: TagPlan) -> MissingTagsResponse:
    return MissingTagsResponse(
        label=plan.label,
        insertions=[insertion_to_dto(item) for item in plan.insertions],
        tags=[tag_to_dto(tag) for tag in plan.tags],
        stub=plan.stub,
        warnings=plan.warnings,
        errors=plan.errors,
    )
