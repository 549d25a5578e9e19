from __future__ import annotations

from dataclasses import replace

from loguru import logger

from doctags.config import TagPolicy
from doctags.javadoc.inspection import (
    MissingElement,
    MissingRole,
    element_at,
    missing_elements,
)
from doctags.javadoc.insertion import insert_all_missing_tags, insert_missing_tag
from doctags.javadoc.model import Declaration, DeclarationKind
from doctags.javadoc.rendering import comment_stub, indent_comment
from doctags.proposals.model import TagPlan

ADD_ALL_LABEL = "Add all missing tags"
REMOVE_LABEL = "Remove tag"

_SINGLE_LABELS: dict[MissingRole, str] = {
    MissingRole.VALUE_PARAMETER: "Add '@param' tag",
    MissingRole.TYPE_PARAMETER: "Add '@param' tag",
    MissingRole.RETURN: "Add '@return' tag",
    MissingRole.THROWN_EXCEPTION: "Add '@throws' tag",
}

_STUB_LABELS: dict[DeclarationKind, str] = {
    DeclarationKind.METHOD: "Add Javadoc for '{}'",
    DeclarationKind.TYPE: "Add Javadoc for '{}'",
    DeclarationKind.FIELD: "Add Javadoc for field '{}'",
    DeclarationKind.ENUM_CONSTANT: "Add Javadoc for enum constant '{}'",
}


class ProposalEngine:
    """Turns a declaration into tag proposals.

    The declaration's doc block is updated in place; the returned plan
    carries the applied insertions and the resulting tag sequence.
    """

    def __init__(self, policy: TagPolicy | None = None) -> None:
        self.policy = policy or TagPolicy()

    def plan_missing_tags(self, declaration: Declaration, indent: str = "") -> TagPlan:
        if declaration.doc is None:
            return self.plan_comment_stub(declaration, indent)
        if not missing_elements(declaration, self.policy):
            return TagPlan(
                label=ADD_ALL_LABEL,
                tags=list(declaration.doc.tags),
                warnings=[f"No missing tags for '{declaration.name}'."],
            )
        insertions = insert_all_missing_tags(declaration, self.policy)
        logger.info(
            "added {} tag(s) to '{}'", len(insertions), declaration.name
        )
        return TagPlan(
            label=ADD_ALL_LABEL,
            insertions=insertions,
            tags=list(declaration.doc.tags),
        )

    def plan_missing_tag(
        self, declaration: Declaration, role: MissingRole, position: int = 0
    ) -> TagPlan:
        if declaration.kind is not DeclarationKind.METHOD and role is not MissingRole.TYPE_PARAMETER:
            return TagPlan(
                errors=[f"{role.value} tags apply to methods only, not {declaration.kind.value}."]
            )
        size = _element_count(declaration, role)
        if not 0 <= position < size:
            return TagPlan(
                errors=[f"No {role.value} at position {position} of '{declaration.name}'."]
            )
        element = element_at(declaration, role, position, self.policy)
        if not _is_missing(declaration, element, self.policy):
            return TagPlan(
                label=_SINGLE_LABELS[role],
                tags=list(declaration.doc.tags) if declaration.doc else [],
                warnings=[
                    f"No missing {role.value} tag at position {position} of '{declaration.name}'."
                ],
            )
        insertion = insert_missing_tag(declaration, element)
        return TagPlan(
            label=_SINGLE_LABELS[role],
            insertions=[insertion],
            tags=list(declaration.doc.tags),
        )

    def plan_comment_stub(self, declaration: Declaration, indent: str = "") -> TagPlan:
        stub = comment_stub(declaration, self.policy)
        if stub is None:
            return TagPlan(warnings=[f"No comment generated for '{declaration.name}'."])
        if indent:
            stub = indent_comment(stub, indent)
        return TagPlan(
            label=_STUB_LABELS[declaration.kind].format(declaration.name),
            stub=stub,
        )

    def plan_remove_tag(self, declaration: Declaration, index: int) -> TagPlan:
        block = declaration.doc
        if block is None:
            return TagPlan(errors=[f"'{declaration.name}' has no doc comment."])
        if not 0 <= index < len(block.tags):
            return TagPlan(
                errors=[f"Tag index {index} out of range (0..{len(block.tags) - 1})."]
            )
        removed = block.remove(index)
        logger.info("removed @{} from '{}'", removed.tag_name, declaration.name)
        return TagPlan(label=REMOVE_LABEL, tags=list(block.tags))


def _element_count(declaration: Declaration, role: MissingRole) -> int:
    if role is MissingRole.TYPE_PARAMETER:
        return len(declaration.type_parameters)
    if role is MissingRole.VALUE_PARAMETER:
        return len(declaration.parameters)
    if role is MissingRole.THROWN_EXCEPTION:
        return len(declaration.thrown_exceptions)
    return 1


def _is_missing(declaration: Declaration, element: MissingElement, policy: TagPolicy) -> bool:
    # Type parameters filtered out by policy are still offered one at a time.
    if element.role is MissingRole.TYPE_PARAMETER:
        policy = replace(policy, method_type_parameters=True)
    return any(
        candidate.role is element.role and candidate.position == element.position
        for candidate in missing_elements(declaration, policy)
    )
