"""Key resolution against a merged dictionary.

Given a merged dictionary, an active language, a key and a parameter
record, produce the final text.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Optional

from scopetext.i18n.exceptions import (
    InvalidParamTypeError,
    ReservedKeyError,
    UnknownKeyError,
    ValueProducerError,
)
from scopetext.i18n.models import RESERVED_NAMES, Computed, LanguageMap, Literal, Params
from scopetext.logging import get_module_logger

logger = get_module_logger()

_NO_PARAMS: Params = MappingProxyType({})


def validate_params(params: Optional[Mapping[str, Any]]) -> Params:
    """Check that every parameter value is a string or a number.

    Booleans are rejected even though ``bool`` subclasses ``int``.

    Args:
        params: Parameter record, or None.

    Returns:
        Read-only copy of the parameters.

    Raises:
        InvalidParamTypeError: If a name is not a string or a value is not
            a str, int or float.
    """
    if params is None:
        return _NO_PARAMS
    if not isinstance(params, Mapping):
        raise InvalidParamTypeError("<params>", params)

    for name, value in params.items():
        if not isinstance(name, str):
            raise InvalidParamTypeError(name, value)
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            raise InvalidParamTypeError(name, value)
    return MappingProxyType(dict(params))


class KeyResolver:
    """Resolves translation keys to text.

    Stateless; a single instance can be shared between threads.
    """

    def resolve(
        self,
        merged: Mapping[str, LanguageMap],
        active_language: str,
        key: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Resolve ``key`` to text in ``active_language``.

        Falls back to the key's first declared language when the active
        language is not present for that key. That fallback never fails.

        Args:
            merged: Merged dictionary of the scope chain.
            active_language: Language selected for this resolution.
            key: Translation key.
            params: Optional record of string/number parameters.

        Returns:
            Resolved text.

        Raises:
            ReservedKeyError: If ``key`` is a reserved property name.
            UnknownKeyError: If ``key`` is not in the merged dictionary.
            InvalidParamTypeError: If a parameter is not a string or number.
            ValueProducerError: If the producer raises or returns a non-string.
        """
        if key in RESERVED_NAMES:
            logger.error("reserved_translation_key", key=key)
            raise ReservedKeyError(key)

        languages = merged.get(key)
        if languages is None:
            logger.error(
                "translation_key_not_found",
                key=key,
                language=active_language,
                available_keys=list(merged),
            )
            raise UnknownKeyError(key, merged)

        checked = validate_params(params)

        language = active_language
        producer = languages.get(language)
        if producer is None:
            language = next(iter(languages))
            producer = languages[language]
            logger.debug(
                "used_fallback_language",
                key=key,
                requested_language=active_language,
                fallback_language=language,
            )

        match producer:
            case Literal(text=text):
                return text
            case Computed(func=func):
                return self._produce(key, language, func, checked)
            case _:
                raise ValueProducerError(
                    key, language, f"unsupported producer {type(producer).__name__}"
                )

    def _produce(self, key: str, language: str, func, params: Params) -> str:
        try:
            result = func(params)
        except Exception as e:
            logger.error(
                "value_producer_failed",
                key=key,
                language=language,
                error=str(e),
            )
            raise ValueProducerError(key, language, str(e)) from e

        if not isinstance(result, str):
            logger.error(
                "value_producer_returned_non_string",
                key=key,
                language=language,
                result_type=type(result).__name__,
            )
            raise ValueProducerError(
                key, language, f"returned {type(result).__name__}, expected str"
            )
        return result


_default_resolver = KeyResolver()


def resolve(
    merged: Mapping[str, LanguageMap],
    active_language: str,
    key: str,
    params: Optional[Mapping[str, Any]] = None,
) -> str:
    """Module-level shortcut for ``KeyResolver().resolve(...)``."""
    return _default_resolver.resolve(merged, active_language, key, params)
