from __future__ import annotations

from pathlib import Path
from typing import Callable

from pygls.lsp.server import LanguageServer

from doctags import __version__
from doctags.commands import missing_tags_command, remove_tag_command, require_payload
from doctags.json_types import JSONObject
from doctags.schema import MissingTagsResponse

server = LanguageServer("doctags", __version__)
ADD_MISSING_TAGS_COMMAND = "doctags.addMissingTags"
ADD_MISSING_TAG_COMMAND = "doctags.addMissingTag"
REMOVE_TAG_COMMAND = "doctags.removeTag"


def _workspace_root(ls: LanguageServer | None) -> Path | None:
    workspace = getattr(ls, "workspace", None)
    root_path = getattr(workspace, "root_path", None)
    if root_path:
        return Path(root_path)
    return None


@server.command(ADD_MISSING_TAGS_COMMAND)
def execute_add_missing_tags(ls: LanguageServer, payload: dict | None = None) -> JSONObject:
    payload = require_payload(payload, command=ADD_MISSING_TAGS_COMMAND)
    payload = {key: value for key, value in payload.items() if key != "element"}
    return missing_tags_command(
        payload, root=_workspace_root(ls), command=ADD_MISSING_TAGS_COMMAND
    )


@server.command(ADD_MISSING_TAG_COMMAND)
def execute_add_missing_tag(ls: LanguageServer, payload: dict | None = None) -> JSONObject:
    payload = require_payload(payload, command=ADD_MISSING_TAG_COMMAND)
    if payload.get("element") is None:
        return MissingTagsResponse(
            errors=["element is required for a single tag insertion"]
        ).model_dump(mode="json")
    return missing_tags_command(
        payload, root=_workspace_root(ls), command=ADD_MISSING_TAG_COMMAND
    )


@server.command(REMOVE_TAG_COMMAND)
def execute_remove_tag(ls: LanguageServer, payload: dict | None = None) -> JSONObject:
    return remove_tag_command(payload, command=REMOVE_TAG_COMMAND)


def start(start_fn: Callable[[], None] | None = None) -> None:
    """Start the language server over stdio."""
    (start_fn or server.start_io)()


if __name__ == "__main__":  # pragma: no cover
    start()  # pragma: no cover
