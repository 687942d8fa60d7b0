"""Interception adapter between the Python runtime and the suggestion engine.

Failures reach the engine through ``on_unresolved_reference``. The helpers
below feed it from a caught exception, from a ``with suggestions():`` block,
or from ``sys.excepthook`` once ``install()`` has been called.
"""

import logging
import re
import sys
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import Any

from .builtin_names import RESERVED_NAMES
from .collector import collect
from .config import Config, get_config
from .exceptions import SuggestionError, make_error
from .models import FailedLookup, LookupKind
from .namespaces import ModuleScope, ObjectScope, is_default_scope, list_defined_names
from .protocols import NameLister, ScopeClassifier
from .ranking import rank

logger = logging.getLogger("didyoumean.hooks")

_UNDEFINED_NAME = re.compile(r"name '(.+?)' is not defined")
_MISSING_MODULE_ATTRIBUTE = re.compile(r"^module '(.+?)' has no attribute '(.+?)'")
_MISSING_ATTRIBUTE = re.compile(r"has no attribute '(.+?)'")

# Global state
_last_suggestions: tuple[str, ...] = ()
_previous_hook = None
_hook_config: Config | None = None


def on_unresolved_reference(
    failed_name: str,
    scope: Any,
    *,
    message: str = "",
    kind: LookupKind = LookupKind.NAME,
    list_defined_names: NameLister | None = list_defined_names,
    is_default_scope: ScopeClassifier | None = is_default_scope,
    reserved_names: Iterable[str] | None = None,
    config: Config | None = None,
    original: BaseException | None = None,
) -> SuggestionError:
    """Build the enriched error for one unresolved reference.

    Never raises. If collecting or ranking fails, the returned error carries
    no suggestions and renders as the original message.

    Args:
        failed_name: The name that did not resolve.
        scope: Opaque scope identifier handed to the collaborators.
        message: Original runtime failure message.
        kind: Whether a bare name or an attribute failed.
        list_defined_names: Host callback listing names defined in a scope.
        is_default_scope: Host callback telling whether reserved names apply.
        reserved_names: Reserved vocabulary; defaults to the Python builtins.
        config: Settings; defaults to the cached environment config.
        original: The intercepted exception, kept on the result.

    Returns:
        UnresolvedNameError or UnresolvedAttributeError with suggestions.
    """
    global _last_suggestions

    failed = FailedLookup(name=failed_name, scope=scope, message=message, kind=kind)
    if reserved_names is None:
        reserved_names = RESERVED_NAMES

    try:
        config = config or get_config()
        if not config.include_reserved:
            reserved_names = ()
        candidates = collect(scope, list_defined_names, reserved_names, is_default_scope)
        suggestions = rank(
            failed_name,
            candidates,
            tie_break=config.tie_break,
            excluded_names=config.all_excluded_names,
        )
    except Exception:
        logger.exception(f"Failed to compute suggestions for '{failed_name}'")
        suggestions = []

    logger.info(f"Suggestions for '{failed_name}': {suggestions}")
    _last_suggestions = tuple(suggestions)
    return make_error(failed, suggestions, original=original)


def last_suggestions() -> tuple[str, ...]:
    """Suggestions computed by the most recent lookup failure.

    Best-effort compatibility accessor: the slot is process-wide and racy
    when several threads fail at once. Use ``SuggestionError.suggestions``.
    """
    return _last_suggestions


def lookup_from_exception(exc: BaseException) -> FailedLookup | None:
    """Extract the failed name and scope from a runtime exception.

    Args:
        exc: Any exception.

    Returns:
        FailedLookup for NameError and AttributeError, None for anything else
        (including UnboundLocalError and unassigned free variables, where the
        name does exist).
    """
    if isinstance(exc, SuggestionError):
        return exc.failed
    if isinstance(exc, UnboundLocalError):
        return None
    message = str(exc)

    if isinstance(exc, NameError):
        name = getattr(exc, "name", None)
        if name is None:
            match = _UNDEFINED_NAME.search(message)
            if not match:
                return None
            name = match.group(1)
        if _is_free_variable(exc, name):
            return None
        return FailedLookup(
            name=name,
            scope=_frame_scope(exc),
            message=message,
            kind=LookupKind.NAME,
        )

    if isinstance(exc, AttributeError):
        name = getattr(exc, "name", None)
        if name is not None:
            scope = ObjectScope(target=exc.obj)
        elif match := _MISSING_MODULE_ATTRIBUTE.match(message):
            module = sys.modules.get(match.group(1))
            scope = ObjectScope(target=module) if module is not None else None
            name = match.group(2)
        elif match := _MISSING_ATTRIBUTE.search(message):
            # the object is gone, only the name is known
            scope = None
            name = match.group(1)
        else:
            return None
        return FailedLookup(
            name=name, scope=scope, message=message, kind=LookupKind.ATTRIBUTE
        )

    return None


def _innermost_frame(exc: BaseException):
    tb = exc.__traceback__
    if tb is None:
        return None
    while tb.tb_next is not None:
        tb = tb.tb_next
    return tb.tb_frame


def _is_free_variable(exc: BaseException, name: str) -> bool:
    """A closure variable read before the enclosing scope assigned it."""
    frame = _innermost_frame(exc)
    if frame is None:
        return str(exc).startswith("cannot access free variable")
    return name in frame.f_code.co_freevars


def _frame_scope(exc: BaseException) -> ModuleScope:
    """Scope of the innermost frame the exception passed through."""
    frame = _innermost_frame(exc)
    if frame is None:
        return ModuleScope(module="__main__")
    module = frame.f_globals.get("__name__", "__main__")
    global_names = tuple(frame.f_globals)
    if frame.f_locals is frame.f_globals:
        return ModuleScope(module=module, global_names=global_names)
    return ModuleScope(
        module=module,
        local_names=tuple(frame.f_locals),
        global_names=global_names,
    )


def suggest_for_exception(exc: BaseException, **kwargs) -> SuggestionError | None:
    """Enrich a caught NameError or AttributeError.

    Keyword arguments are passed on to ``on_unresolved_reference``.

    Returns:
        The enriched error, ``exc`` itself if it is already enriched, or None
        when ``exc`` is not an unresolved-reference failure.
    """
    if isinstance(exc, SuggestionError):
        return exc
    failed = lookup_from_exception(exc)
    if failed is None:
        return None
    return on_unresolved_reference(
        failed.name,
        failed.scope,
        message=failed.message,
        kind=failed.kind,
        original=exc,
        **kwargs,
    )


@contextmanager
def suggestions(**kwargs) -> Iterator[None]:
    """Re-raise lookup failures inside the block with suggestions attached.

    Example::

        with suggestions():
            prnt("hello")   # UnresolvedNameError: ... Did you mean print?
    """
    try:
        yield
    except (NameError, AttributeError) as e:
        error = suggest_for_exception(e, **kwargs)
        if error is None or error is e:
            raise
        raise error from e


def _didyoumean_excepthook(exc_type, exc_value, exc_tb) -> None:
    previous = _previous_hook or sys.__excepthook__
    if not isinstance(exc_value, (NameError, AttributeError)):
        previous(exc_type, exc_value, exc_tb)
        return

    try:
        error = suggest_for_exception(exc_value, config=_hook_config)
    except Exception:
        logger.exception("Failed to enrich uncaught exception")
        error = None

    if error is None or error is exc_value:
        previous(exc_type, exc_value, exc_tb)
        return
    error.__suppress_context__ = True
    previous(type(error), error, exc_tb)


def install(config: Config | None = None) -> None:
    """Report uncaught lookup failures with suggestions. Idempotent."""
    global _previous_hook, _hook_config

    _hook_config = config
    if sys.excepthook is _didyoumean_excepthook:
        logger.debug("Excepthook already installed")
        return
    _previous_hook = sys.excepthook
    sys.excepthook = _didyoumean_excepthook
    logger.debug("Excepthook installed")


def uninstall() -> None:
    """Restore the excepthook that was active before ``install()``."""
    global _previous_hook, _hook_config

    if sys.excepthook is not _didyoumean_excepthook:
        return
    sys.excepthook = _previous_hook or sys.__excepthook__
    _previous_hook = None
    _hook_config = None
    logger.debug("Excepthook uninstalled")


def is_installed() -> bool:
    return sys.excepthook is _didyoumean_excepthook
