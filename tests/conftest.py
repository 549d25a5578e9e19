from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
for entry in (ROOT, ROOT / "src"):
    if str(entry) not in sys.path:
        sys.path.insert(0, str(entry))


import pytest

from doctags.javadoc.model import (
    Declaration,
    DeclarationKind,
    DocBlock,
    Parameter,
    ReturnSlot,
    ThrownException,
    TypeParameter,
)


@pytest.fixture
def make_method():
    def _make(
        *params: str,
        name: str = "foo",
        type_params: tuple[str, ...] = (),
        returns: str | None = "int",
        throws: tuple[str, ...] = (),
        constructor: bool = False,
        doc: DocBlock | None = None,
    ) -> Declaration:
        return Declaration(
            kind=DeclarationKind.METHOD,
            name=name,
            parameters=[Parameter(p, "int") for p in params],
            type_parameters=[TypeParameter(t) for t in type_params],
            return_slot=ReturnSlot(returns) if returns else None,
            is_constructor=constructor,
            thrown_exceptions=[
                ThrownException(t, t.rsplit(".", 1)[-1]) for t in throws
            ],
            doc=doc,
        )

    return _make


@pytest.fixture
def write_config(tmp_path: Path):
    def _write(body: str) -> Path:
        path = tmp_path / "doctags.toml"
        path.write_text(body, encoding="utf-8")
        return path

    return _write
