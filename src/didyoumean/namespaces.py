"""Python host collaborators: scope identifiers and namespace enumeration."""

import sys
from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ModuleScope(BaseModel):
    """Bare-name lookup inside a module, optionally within a function frame."""

    model_config = ConfigDict(frozen=True)

    module: str = Field(..., description="Name of the module whose globals apply")
    local_names: tuple[str, ...] = Field(
        (), description="Local names of the failing frame, when it is a function"
    )
    global_names: tuple[str, ...] | None = Field(
        None,
        description="Globals captured from the failing frame; None reads the module",
    )


class ObjectScope(BaseModel):
    """Attribute lookup on an object (instance, class or module)."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    target: Any = Field(..., description="Object the attribute was looked up on")

    def __repr__(self) -> str:
        return f"ObjectScope(target={type(self.target).__name__})"


def list_defined_names(scope: Any) -> Iterator[str]:
    """Enumerate the names that resolve in a Python scope.

    ModuleScope yields frame locals first, then the globals in definition
    order (the captured ones, else those of the imported module).
    ObjectScope yields ``dir(target)``. Unknown scopes yield nothing.
    """
    if isinstance(scope, ModuleScope):
        yield from scope.local_names
        if scope.global_names is not None:
            yield from scope.global_names
            return
        module = sys.modules.get(scope.module)
        if module is not None:
            yield from list(vars(module))
    elif isinstance(scope, ObjectScope):
        yield from dir(scope.target)


def is_default_scope(scope: Any) -> bool:
    """Builtins resolve in bare-name lookups only."""
    return isinstance(scope, ModuleScope)
