"""Exception protocol markers for doctags."""

from __future__ import annotations

from typing import Mapping


class NeverRaise(RuntimeError):
    """Sentinel exception for code paths that correct callers never reach.

    Raising this exception signals a broken caller contract, for example a
    missing element whose structural role is not one of the documented ones.
    It is never caught inside doctags.
    """

    def __init__(self, message: str, *, env: Mapping[str, object] | None = None):
        super().__init__(message)
        self.reason = message
        self.env = dict(env or {})

    @property
    def payload(self) -> dict[str, object]:
        return {
            "kind": "never",
            "reason": self.reason,
            "env": {key: str(value) for key, value in self.env.items()},
        }


class NeverThrown(NeverRaise):
    """Alias for NeverRaise used by the explicit never() marker."""
