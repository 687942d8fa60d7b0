"""Candidate collection for a failed lookup."""

import logging
from collections.abc import Iterable
from typing import Any

from .protocols import NameLister, ScopeClassifier

logger = logging.getLogger("didyoumean.collector")


def collect(
    scope: Any,
    list_defined_names: NameLister | None,
    reserved_names: Iterable[str] = (),
    is_default_scope: ScopeClassifier | None = None,
) -> list[str]:
    """Collect the names that would have resolved in ``scope``.

    Defined names come first, then the reserved names when the scope is the
    default one. Duplicates are dropped by exact spelling, keeping the first
    occurrence, so the returned order is the discovery order.

    Args:
        scope: Opaque scope identifier, only ever handed to the collaborators.
        list_defined_names: Host callback listing names defined in a scope.
        reserved_names: Builtin/reserved vocabulary of the default scope.
        is_default_scope: Host callback classifying the scope.

    Returns:
        Deduplicated candidate names in discovery order. Empty when the host
        offers nothing; a missing or failing collaborator contributes nothing.
    """
    candidates: dict[str, None] = {}

    for name in _defined_names(scope, list_defined_names):
        candidates.setdefault(name, None)

    if _is_default(scope, is_default_scope):
        for name in reserved_names:
            if isinstance(name, str):
                candidates.setdefault(name, None)

    logger.debug(f"Collected {len(candidates)} candidates for scope {scope!r}")
    return list(candidates)


def _defined_names(scope: Any, list_defined_names: NameLister | None) -> list[str]:
    if list_defined_names is None:
        return []
    try:
        names = list(list_defined_names(scope))
    except Exception as e:
        logger.warning(f"Could not list names defined in {scope!r}: {e}")
        return []
    return [name for name in names if isinstance(name, str)]


def _is_default(scope: Any, is_default_scope: ScopeClassifier | None) -> bool:
    if is_default_scope is None:
        return False
    try:
        return bool(is_default_scope(scope))
    except Exception as e:
        logger.warning(f"Could not classify scope {scope!r}: {e}")
        return False
