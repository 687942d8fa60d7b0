"""Protocol definitions for the host collaborators injected into the collector."""

from collections.abc import Iterable
from typing import Any, Protocol


class NameLister(Protocol):
    """Lists the names that currently resolve in a scope."""

    def __call__(self, scope: Any) -> Iterable[str]:
        """Enumerate defined names.

        Args:
            scope: Opaque scope identifier, as produced by the interception adapter.

        Returns:
            Names that resolve in the scope, in discovery order.
        """
        ...


class ScopeClassifier(Protocol):
    """Tells whether a scope is the default scope where reserved names resolve."""

    def __call__(self, scope: Any) -> bool: ...
