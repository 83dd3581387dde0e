"""Public API surface for decomment.processing."""
from .classifier import DEFAULT_EXTENSIONS, ExtensionClassifier, classify
from .comment_rules import COMMENT_RULES, rules_for
from .stripper import strip, strip_with_rules

__all__ = [
    "COMMENT_RULES",
    "DEFAULT_EXTENSIONS",
    "ExtensionClassifier",
    "classify",
    "rules_for",
    "strip",
    "strip_with_rules",
]
