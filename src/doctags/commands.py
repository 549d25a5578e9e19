from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from doctags.config import TagPolicy, TomlTable, tag_policy
from doctags.invariants import never
from doctags.json_types import JSONObject
from doctags.proposals import ProposalEngine
from doctags.schema import (
    MissingTagsRequest,
    MissingTagsResponse,
    RemoveTagRequest,
    declaration_from_dto,
    plan_to_response,
)


def require_payload(payload: object, *, command: str) -> dict[str, object]:
    if payload is None:
        never("missing command payload", command=command)
    if not isinstance(payload, dict):
        never(
            "invalid command payload type",
            command=command,
            payload_type=type(payload).__name__,
        )
    return payload


def policy_for(
    request: MissingTagsRequest,
    root: Path | None,
    config_path: Path | None,
) -> TagPolicy:
    overrides: TomlTable = {
        "method_type_parameters": request.method_type_parameters,
        "qualified_exception_names": request.qualified_exception_names,
    }
    return tag_policy(root=root, config_path=config_path, overrides=overrides)


def missing_tags_command(
    payload: object,
    *,
    root: Path | None = None,
    config_path: Path | None = None,
    command: str = "missing_tags",
) -> JSONObject:
    payload = require_payload(payload, command=command)
    try:
        request = MissingTagsRequest.model_validate(payload)
    except ValidationError as exc:
        return MissingTagsResponse(errors=[str(exc)]).model_dump(mode="json")
    engine = ProposalEngine(policy=policy_for(request, root, config_path))
    declaration = declaration_from_dto(request.declaration)
    if request.element is None:
        plan = engine.plan_missing_tags(declaration, request.indent)
    else:
        plan = engine.plan_missing_tag(
            declaration, request.element.role, request.element.position
        )
    return plan_to_response(plan).model_dump(mode="json")


def remove_tag_command(payload: object, *, command: str = "remove_tag") -> JSONObject:
    payload = require_payload(payload, command=command)
    try:
        request = RemoveTagRequest.model_validate(payload)
    except ValidationError as exc:
        return MissingTagsResponse(errors=[str(exc)]).model_dump(mode="json")
    declaration = declaration_from_dto(request.declaration)
    plan = ProposalEngine().plan_remove_tag(declaration, request.index)
    return plan_to_response(plan).model_dump(mode="json")
