from __future__ import annotations

from dataclasses import dataclass, field

from doctags.javadoc.insertion import TagInsertion
from doctags.javadoc.model import Tag


@dataclass
class TagPlan:
    label: str = ""
    insertions: list[TagInsertion] = field(default_factory=list)
    tags: list[Tag] = field(default_factory=list)
    stub: str | None = None
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def actionable(self) -> bool:
        return not self.errors and (bool(self.insertions) or self.stub is not None)
