"""Leaf requests and output strategies.

A leaf asks for text in exactly one of three ways:

- ``ByKey``: the resolved string is the leaf's output (inline).
- ``ByKeyWithCallback``: the resolved string is handed to a callback whose
  return value becomes the output; the raw string is never output itself.
- ``ByVariantMap``: one precomposed fragment per language; the fragment for
  the active language is selected, else the one for the ambient default,
  else nothing.

Requests validate themselves on construction, so an ambiguous leaf fails
before any resolution runs.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Optional, Union

from scopetext.i18n.chain import ChainState
from scopetext.i18n.exceptions import AmbiguousModeError, InvalidParamTypeError
from scopetext.i18n.models import RESERVED_NAMES
from scopetext.logging import get_module_logger

logger = get_module_logger()


def _frozen(params: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    if params is None:
        return MappingProxyType({})
    if not isinstance(params, Mapping):
        raise InvalidParamTypeError("<params>", params)
    return MappingProxyType(dict(params))


@dataclass(frozen=True)
class ByKey:
    """Inline request: render the text resolved for ``key``."""

    key: str
    params: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.key, str) or not self.key:
            raise AmbiguousModeError(
                f"Translation key must be a non-empty string: {self.key!r}"
            )
        object.__setattr__(self, "params", _frozen(self.params))


@dataclass(frozen=True)
class ByKeyWithCallback:
    """Callback request: render ``render(text)`` instead of the text."""

    key: str
    render: Callable[[str], Any]
    params: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.key, str) or not self.key:
            raise AmbiguousModeError(
                f"Translation key must be a non-empty string: {self.key!r}"
            )
        if not callable(self.render):
            raise TypeError(
                f"render must be callable, got {type(self.render).__name__}"
            )
        object.__setattr__(self, "params", _frozen(self.params))


@dataclass(frozen=True)
class ByVariantMap:
    """Variant request: language code -> precomposed fragment."""

    variants: Mapping[str, Any]

    def __post_init__(self):
        if not isinstance(self.variants, Mapping) or not self.variants:
            raise AmbiguousModeError(
                "Variant selection needs at least one language property"
            )
        reserved = sorted(set(self.variants) & RESERVED_NAMES)
        if reserved:
            raise AmbiguousModeError(
                f"Reserved names cannot be used as variant languages: {reserved}"
            )
        object.__setattr__(self, "variants", _frozen(self.variants))


LeafRequest = Union[ByKey, ByKeyWithCallback, ByVariantMap]


def T(
    key: Optional[str] = None,
    *,
    render: Optional[Callable[[str], Any]] = None,
    component: bool = False,
    **props: Any,
) -> LeafRequest:
    """Build a leaf request from property-style arguments.

    - ``T("greetings")`` or ``T(key="greetings")`` -> ByKey
    - ``T("farewell", name="Francisco")`` -> ByKey with params
    - ``T("greetings", render=lambda text: f"[{text}]")`` -> ByKeyWithCallback
    - ``T(component=True, en=..., es=...)`` -> ByVariantMap

    Raises:
        AmbiguousModeError: If the properties declare no mode, or declare a
            key or callback together with variant properties.
    """
    if component:
        if key is not None or render is not None:
            raise AmbiguousModeError(
                "A leaf cannot declare a translation key or render callback "
                "together with variant properties"
            )
        return ByVariantMap(props)

    if key is None:
        if render is not None:
            raise AmbiguousModeError("A render callback requires a translation key")
        raise AmbiguousModeError(
            "A leaf must declare a translation key or variant properties "
            f"(got properties {sorted(props)})"
        )

    if render is not None:
        return ByKeyWithCallback(key, render, props)
    return ByKey(key, props)


class OutputStrategy(ABC):
    """Turns a leaf request into rendered output under a chain state."""

    @abstractmethod
    def render(self, request: LeafRequest, state: ChainState) -> Any:
        pass


class InlineStrategy(OutputStrategy):
    """The resolved string is the output."""

    def render(self, request: ByKey, state: ChainState) -> str:
        return state.translate(request.key, request.params)


class CallbackStrategy(OutputStrategy):
    """The callback's return value is the output."""

    def render(self, request: ByKeyWithCallback, state: ChainState) -> Any:
        text = state.translate(request.key, request.params)
        return request.render(text)


class VariantStrategy(OutputStrategy):
    """Selects the fragment declared for the active language.

    Falls back to the ambient default language, then to ``None`` (renders
    nothing). Neither fallback is an error.
    """

    def render(self, request: ByVariantMap, state: ChainState) -> Any:
        variants = request.variants
        if state.active_language in variants:
            return variants[state.active_language]
        if state.ambient_language in variants:
            logger.debug(
                "used_ambient_variant",
                active_language=state.active_language,
                ambient_language=state.ambient_language,
            )
            return variants[state.ambient_language]

        logger.debug(
            "no_matching_variant",
            active_language=state.active_language,
            ambient_language=state.ambient_language,
            available=list(variants),
        )
        return None


_inline = InlineStrategy()
_callback = CallbackStrategy()
_variant = VariantStrategy()


def strategy_for(request: LeafRequest) -> OutputStrategy:
    """Return the output strategy matching the request's mode."""
    match request:
        case ByKey():
            return _inline
        case ByKeyWithCallback():
            return _callback
        case ByVariantMap():
            return _variant
        case _:
            raise TypeError(f"Unsupported leaf request: {type(request).__name__}")


def render_request(request: LeafRequest, state: ChainState) -> Any:
    """Render one leaf request under ``state``."""
    return strategy_for(request).render(request, state)
