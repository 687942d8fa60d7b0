"""didyoumean

Suggests the nearest valid names when a function, method or variable lookup
fails, and attaches them to the raised error.
"""

from .builtin_names import RESERVED_NAMES
from .collector import collect
from .config import Config, get_config
from .consts import PACKAGE_VERSION
from .distance import levenshtein
from .exceptions import (
    DidYouMeanError,
    SuggestionError,
    UnresolvedAttributeError,
    UnresolvedNameError,
    make_error,
)
from .hooks import (
    install,
    is_installed,
    last_suggestions,
    lookup_from_exception,
    on_unresolved_reference,
    suggest_for_exception,
    suggestions,
    uninstall,
)
from .models import FailedLookup, LookupKind, ScoredCandidate, SuggestionReport, TieBreak
from .ranking import rank, score

__version__ = PACKAGE_VERSION

__all__ = [
    "__version__",
    "levenshtein",
    "collect",
    "rank",
    "score",
    "make_error",
    "on_unresolved_reference",
    "suggest_for_exception",
    "lookup_from_exception",
    "suggestions",
    "install",
    "uninstall",
    "is_installed",
    "last_suggestions",
    "get_config",
    "Config",
    "RESERVED_NAMES",
    "FailedLookup",
    "LookupKind",
    "ScoredCandidate",
    "SuggestionReport",
    "TieBreak",
    "DidYouMeanError",
    "SuggestionError",
    "UnresolvedNameError",
    "UnresolvedAttributeError",
]
