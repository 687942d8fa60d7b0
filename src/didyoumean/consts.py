"""High-value constants for the didyoumean package."""

# Package metadata
PACKAGE_VERSION = "0.4.0"
PACKAGE_NAME = "didyoumean"

# Settings
ENV_PREFIX = "DIDYOUMEAN_"

# Business logic consts
SUGGESTION_CLAUSE = "Did you mean {}?"
SUGGESTION_SEPARATOR = ", "

# Names of our own plumbing, never offered as a suggestion.
HOOK_NAME = "_didyoumean_excepthook"
INTERNAL_NAMES = frozenset({HOOK_NAME, "__builtins__"})
