# runtime.py
from __future__ import annotations

from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Runtime:
    settings: dict[str, Any] = field(default_factory=dict)
    debug: bool = False  # controls [debug] diagnostics / tracebacks

    def apply(self, settings: Any) -> None:
        self.settings = dict(settings.as_dict())


# --- Context management ---

_current_runtime: ContextVar[Runtime | None] = ContextVar("perfectroot_runtime", default=None)


def current() -> Runtime:
    rt = _current_runtime.get()
    if rt is None:
        rt = Runtime()
        _current_runtime.set(rt)
    return rt


def reset() -> Runtime:
    """Install a fresh Runtime (new CLI invocation, tests)."""
    rt = Runtime()
    _current_runtime.set(rt)
    return rt


def APPLY(settings: Any) -> None:
    current().apply(settings)
