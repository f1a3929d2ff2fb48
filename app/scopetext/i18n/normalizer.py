"""Dictionary fragment normalization.

Turns a raw ``{key: {language: str | callable}}`` mapping into a validated,
read-only ``NormalizedFragment`` whose values are all ``Literal`` or
``Computed`` producers. Can be called ahead of time, outside any scope tree.
"""

import re
from collections.abc import Mapping
from typing import Any, Callable, Dict, List, Optional

from scopetext.i18n.exceptions import InconsistentLanguageSet, InvalidFragmentError
from scopetext.i18n.models import (
    RESERVED_NAMES,
    Computed,
    Literal,
    NormalizedFragment,
    Params,
    ValueProducer,
)
from scopetext.logging import get_module_logger

logger = get_module_logger()

# Matches "{{name}}" or "{name}"
_PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}|\{(\w+)\}")


def normalize(fragment: Any) -> NormalizedFragment:
    """Validate and canonicalize a raw dictionary fragment.

    The first key establishes the fragment's canonical language set. Every
    other key must declare the same set of languages (order may differ).
    Each key keeps its own declaration order; its first language is the
    fallback used when the active language is missing.

    Normalizing an already normalized fragment returns it unchanged.

    Args:
        fragment: Mapping of key -> {language code -> str | callable | producer}.

    Returns:
        NormalizedFragment.

    Raises:
        InvalidFragmentError: If the fragment does not have the expected shape.
        InconsistentLanguageSet: If a key's languages differ from the first key's.
    """
    if isinstance(fragment, NormalizedFragment):
        return fragment

    if not isinstance(fragment, Mapping):
        raise InvalidFragmentError(
            f"Dictionary fragment must be a mapping, got {type(fragment).__name__}"
        )

    entries: Dict[str, Dict[str, ValueProducer]] = {}
    canonical: Optional[List[str]] = None

    for key, languages in fragment.items():
        _validate_key(key)

        if not isinstance(languages, Mapping) or not languages:
            raise InvalidFragmentError(
                f"Key '{key}' must map to a non-empty mapping of language -> value"
            )

        codes = list(languages)
        if canonical is None:
            canonical = codes
        elif set(codes) != set(canonical):
            logger.error(
                "inconsistent_language_set",
                key=key,
                expected=canonical,
                actual=codes,
            )
            raise InconsistentLanguageSet(key, canonical, codes)

        entries[key] = {
            language: _to_producer(key, language, value)
            for language, value in languages.items()
        }

    normalized = NormalizedFragment(entries, canonical or ())
    logger.debug(
        "normalized_fragment",
        key_count=len(normalized),
        languages=list(normalized.languages),
    )
    return normalized


def template_producer(text: str) -> ValueProducer:
    """Build a producer for a string that may contain placeholders.

    Supports both ``{{name}}`` and ``{name}`` placeholders. Strings without
    placeholders become ``Literal`` producers.

    Args:
        text: Message text.

    Returns:
        Literal or Computed producer.
    """
    names = _placeholder_names(text)
    if not names:
        return Literal(text)
    return Computed(_make_interpolator(text, names))


def _validate_key(key: Any) -> None:
    if not isinstance(key, str) or not key:
        raise InvalidFragmentError(
            f"Translation keys must be non-empty strings, got {key!r}"
        )
    if key in RESERVED_NAMES:
        raise InvalidFragmentError(
            f"'{key}' is a reserved name and cannot be used as a translation key"
        )


def _to_producer(key: str, language: Any, value: Any) -> ValueProducer:
    if not isinstance(language, str) or not language:
        raise InvalidFragmentError(
            f"Language codes for key '{key}' must be non-empty strings, "
            f"got {language!r}"
        )

    match value:
        case Literal() | Computed():
            return value
        case str():
            return Literal(value)
        case _ if callable(value):
            return Computed(value)
        case _:
            raise InvalidFragmentError(
                f"Value for key '{key}' in language '{language}' must be a string "
                f"or a callable, got {type(value).__name__}"
            )


def _placeholder_names(text: str) -> List[str]:
    names: List[str] = []
    for match in _PLACEHOLDER.finditer(text):
        name = match.group(1) or match.group(2)
        if name not in names:
            names.append(name)
    return names


def _make_interpolator(text: str, names: List[str]) -> Callable[[Params], str]:
    def interpolate(params: Params) -> str:
        missing = [name for name in names if name not in params]
        if missing:
            raise ValueError(f"Missing interpolation variable: {missing[0]}")
        # Single pass: substituted values are never rescanned
        return _PLACEHOLDER.sub(
            lambda match: str(params[match.group(1) or match.group(2)]), text
        )

    return interpolate
