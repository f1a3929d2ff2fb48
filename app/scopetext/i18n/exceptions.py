"""Custom exceptions for the scoped translation engine.

Normalization errors abort loading of a dictionary fragment. Resolution
errors abort rendering of the offending leaf only. None of them are
retried: all stem from static misconfiguration or caller misuse.
"""

from typing import Any, Iterable, Optional, Sequence, Tuple


class TranslationError(Exception):
    """Base exception for all translation engine errors.

    Example:
        try:
            renderer.render(tree)
        except TranslationError as e:
            logger.error("translation_error", error=str(e))
    """

    pass


class NormalizationError(TranslationError):
    """Raised when a raw dictionary fragment cannot be normalized."""

    pass


class InconsistentLanguageSet(NormalizationError):
    """Raised when a key declares a different set of languages than the
    first key of the same fragment.

    Attributes:
        key: Offending translation key.
        expected: Canonical language codes, in first-seen order.
        actual: Language codes declared by the offending key.

    Example:
        >>> normalize({"a": {"en": "A", "es": "A"}, "b": {"en": "B", "ja": "B"}})
        Traceback (most recent call last):
        ...
        InconsistentLanguageSet: Key 'b' declares languages ['en', 'ja'], expected ['en', 'es']
    """

    def __init__(self, key: str, expected: Sequence[str], actual: Sequence[str]):
        self.key = key
        self.expected: Tuple[str, ...] = tuple(expected)
        self.actual: Tuple[str, ...] = tuple(actual)
        super().__init__(
            f"Key '{key}' declares languages {list(self.actual)}, "
            f"expected {list(self.expected)}"
        )


class InvalidFragmentError(NormalizationError):
    """Raised when a fragment does not have the key -> language -> value shape."""

    pass


class ReservedKeyError(TranslationError):
    """Raised when a reserved property name is used as a translation key.

    Attributes:
        key: The reserved name that was requested.
    """

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"'{key}' is a reserved name and cannot be a translation key")


class UnknownKeyError(TranslationError):
    """Raised when a key is not present in the merged dictionary.

    Treat as a programming error, not a recoverable condition.

    Attributes:
        key: The key that was requested.
        available: Keys present in the merged dictionary.
    """

    def __init__(self, key: str, available: Iterable[str] = ()):
        self.key = key
        self.available: Tuple[str, ...] = tuple(available)
        super().__init__(f"Translation key '{key}' not found in scope chain")


class InvalidParamTypeError(TranslationError):
    """Raised when a parameter value is not a string or a number.

    Attributes:
        name: Parameter name.
        value: Rejected value.
    """

    def __init__(self, name: Any, value: Any):
        self.name = name
        self.value = value
        super().__init__(
            f"Parameter '{name}' must be a string or a number, "
            f"got {type(value).__name__}"
        )


class ValueProducerError(TranslationError):
    """Raised when a computed producer fails for a key/language pair.

    The original exception is chained as ``__cause__``.

    Attributes:
        key: Translation key being resolved.
        language: Language whose producer failed.
    """

    def __init__(self, key: str, language: str, reason: Optional[str] = None):
        self.key = key
        self.language = language
        message = f"Producer for key '{key}' in language '{language}' failed"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class AmbiguousModeError(TranslationError):
    """Raised when a leaf declares zero or more than one output mode.

    Detected when the leaf request is built, before any resolution runs.
    """

    pass


class RenderError(TranslationError):
    """Raised after a strict render pass in which at least one leaf failed.

    Attributes:
        failures: Sequence of ``LeafFailure`` records, in document order.
        result: The partial ``RenderResult``; failed leaves render as None
            while their siblings keep their output.
    """

    def __init__(self, failures: Sequence[Any], result: Any = None):
        self.failures = tuple(failures)
        self.result = result
        count = len(self.failures)
        first = self.failures[0].error if self.failures else None
        super().__init__(f"{count} leaf render failure(s); first: {first}")
