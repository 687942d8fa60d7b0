"""didyoumean custom exceptions.

Exception Design Principles:
1. The original lookup failure is never lost: enriched errors keep it as
   ``original`` and are raised ``from`` it
2. Enriched errors stay catchable as the builtin they replace
   (UnresolvedNameError is a NameError, UnresolvedAttributeError an AttributeError)
3. Suggestions are data on the error, not text to be parsed back out
"""

from collections.abc import Sequence
from typing import Any

from .consts import SUGGESTION_CLAUSE, SUGGESTION_SEPARATOR
from .models import FailedLookup, LookupKind


class DidYouMeanError(Exception):
    """Base exception for all didyoumean errors."""

    def __init__(self, message: str, *, suggestions: Sequence[str] = ()):
        """Initialize DidYouMeanError.

        Args:
            message: Primary error message for users
            suggestions: Nearest valid names, best first
        """
        super().__init__(message)
        self.message = message
        self.suggestions = tuple(suggestions)


class SuggestionError(DidYouMeanError):
    """An unresolved reference enriched with the nearest valid names.

    Immutable by convention: it owns a tuple copy of the suggestion list and
    the FailedLookup it was built from. ``str(error)`` is the rendered message.
    """

    def __init__(
        self,
        failed: FailedLookup,
        suggestions: Sequence[str] = (),
        *,
        original: BaseException | None = None,
    ):
        self.failed = failed
        self.original = original
        super().__init__(
            render_message(failed.message, suggestions), suggestions=suggestions
        )
        # ``name`` must stay None: the interpreter appends its own hint when set.

    def __reduce__(self):
        # args only hold the rendered message, rebuild from the lookup instead
        state = {"original": self.original}
        return (type(self), (self.failed, self.suggestions), state)

    @property
    def failed_name(self) -> str:
        return self.failed.name

    @property
    def scope(self) -> Any:
        return self.failed.scope

    @property
    def has_suggestions(self) -> bool:
        """Whether at least one nearest match was found."""
        return bool(self.suggestions)

    def rendered_message(self) -> str:
        """Original failure message plus the suggestion clause, if any."""
        return self.message

    def __str__(self) -> str:
        return self.message


class UnresolvedNameError(SuggestionError, NameError):
    """A bare name (function or variable) that did not resolve."""

    pass


class UnresolvedAttributeError(SuggestionError, AttributeError):
    """A method or attribute that did not resolve on an object or module."""

    pass


def render_message(message: str, suggestions: Sequence[str]) -> str:
    """Render ``"<message>. Did you mean a, b?"``.

    With no suggestions the original message is returned untouched.
    """
    if not suggestions:
        return message
    clause = SUGGESTION_CLAUSE.format(SUGGESTION_SEPARATOR.join(suggestions))
    base = message.rstrip()
    if not base:
        return clause
    if base.endswith("."):
        return f"{base} {clause}"
    return f"{base}. {clause}"


def make_error(
    failed: FailedLookup,
    suggestions: Sequence[str],
    original: BaseException | None = None,
) -> SuggestionError:
    """Build the kind-specific SuggestionError for a failed lookup.

    Args:
        failed: The unresolved-reference event.
        suggestions: Ordered nearest names, best first (may be empty).
        original: The intercepted runtime exception, if there was one.

    Returns:
        UnresolvedNameError or UnresolvedAttributeError.
    """
    if failed.kind == LookupKind.ATTRIBUTE:
        error_cls = UnresolvedAttributeError
    else:
        error_cls = UnresolvedNameError
    return error_cls(failed, tuple(suggestions), original=original)
