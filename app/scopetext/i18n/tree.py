"""Scope trees and rendering.

``Scope`` is the scope-defining construct: an optional dictionary, an
optional language and nested children. ``Leaf`` wraps one leaf request.
``Renderer`` walks a tree root to leaves, handing each child an immutable
``ChainState`` derived from its parent's.

Usage:
    tree = Scope(
        T("greetings"),
        Scope(T("greetings"), language="es"),
        dictionary={"greetings": {"en": "Hello", "es": "¡Hola!"}},
        language="en",
    )
    result = Renderer(ambient_language="en").render(tree)
    result.output  # ["Hello", ["¡Hola!"]]
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple, Union

from scopetext.i18n.chain import ChainState
from scopetext.i18n.exceptions import (
    NormalizationError,
    RenderError,
    TranslationError,
)
from scopetext.i18n.models import ScopeNode
from scopetext.i18n.normalizer import normalize
from scopetext.i18n.strategies import (
    ByKey,
    ByKeyWithCallback,
    ByVariantMap,
    LeafRequest,
    render_request,
)
from scopetext.logging import bind_render_context, get_module_logger

logger = get_module_logger()

_REQUEST_TYPES = (ByKey, ByKeyWithCallback, ByVariantMap)


@dataclass(frozen=True)
class Leaf:
    """Tree leaf holding one leaf request."""

    request: LeafRequest

    def __post_init__(self):
        if not isinstance(self.request, _REQUEST_TYPES):
            raise TypeError(
                f"Leaf request must be ByKey, ByKeyWithCallback or ByVariantMap, "
                f"got {type(self.request).__name__}"
            )


@dataclass(frozen=True, init=False)
class Scope:
    """Scope-defining construct.

    The dictionary is normalized when the scope is created; an invalid
    fragment raises here and no scope is built.

    Attributes:
        node: The scope's contribution to the chain.
        children: Child scopes, leaves and static strings, in order.
    """

    node: ScopeNode
    children: Tuple["Node", ...] = field(default=())

    def __init__(
        self,
        *children: Any,
        dictionary: Any = None,
        language: Optional[str] = None,
    ):
        if language is not None and (not isinstance(language, str) or not language):
            raise ValueError(
                f"Scope language must be a non-empty string, got {language!r}"
            )

        fragment = None
        if dictionary is not None:
            try:
                fragment = normalize(dictionary)
            except NormalizationError as e:
                logger.error("scope_dictionary_rejected", error=str(e))
                raise

        node = ScopeNode(language=language, dictionary=fragment)
        object.__setattr__(self, "node", node)
        object.__setattr__(
            self, "children", tuple(_as_node(child) for child in children)
        )


Node = Union[Scope, Leaf, str]


def _as_node(child: Any) -> Node:
    if isinstance(child, (Scope, Leaf, str)):
        return child
    if isinstance(child, _REQUEST_TYPES):
        return Leaf(child)
    raise TypeError(f"Unsupported child in scope tree: {type(child).__name__}")


@dataclass(frozen=True)
class LeafFailure:
    """A leaf that could not be rendered.

    Attributes:
        path: Child indexes from the root to the leaf.
        request: The failing request.
        error: The resolution error raised for it.
    """

    path: Tuple[int, ...]
    request: LeafRequest
    error: TranslationError


@dataclass
class RenderResult:
    """Outcome of one render pass.

    ``output`` mirrors the tree: a scope renders as a list of its children's
    outputs, a leaf as its strategy's output, a failed leaf as ``None``.
    """

    output: Any
    failures: List[LeafFailure] = field(default_factory=list)
    render_id: Optional[str] = None

    @property
    def ok(self) -> bool:
        return not self.failures

    def flatten(self) -> List[Any]:
        """Leaf outputs in document order, nested scopes flattened."""
        flat: List[Any] = []
        _flatten_into(self.output, flat)
        return flat


def _flatten_into(value: Any, flat: List[Any]) -> None:
    if isinstance(value, list):
        for item in value:
            _flatten_into(item, flat)
    else:
        flat.append(value)


class Renderer:
    """Renders scope trees.

    A failing leaf does not affect its siblings or ancestors: its output is
    ``None`` and the failure is recorded. In strict mode the render pass
    raises ``RenderError`` with every recorded failure once the whole tree
    has been walked.

    Attributes:
        ambient_language: Host-supplied default language.
        strict: Raise RenderError when any leaf failed.
    """

    def __init__(self, ambient_language: str, strict: bool = True):
        if not isinstance(ambient_language, str) or not ambient_language:
            raise ValueError("ambient_language must be a non-empty string")
        self.ambient_language = ambient_language
        self.strict = strict
        logger.info(
            "initialized_renderer",
            ambient_language=ambient_language,
            strict=strict,
        )

    def root_state(self) -> ChainState:
        return ChainState.root(self.ambient_language)

    def render(self, node: Any, state: Optional[ChainState] = None) -> RenderResult:
        """Render a tree (or any node) and collect leaf failures.

        Args:
            node: Scope, Leaf, leaf request or static string.
            state: Chain state to render under; defaults to the root state.

        Returns:
            RenderResult.

        Raises:
            RenderError: In strict mode, if any leaf failed.
        """
        state = state or self.root_state()
        failures: List[LeafFailure] = []

        with bind_render_context(ambient_language=self.ambient_language) as render_id:
            output = self._render_node(_as_node(node), state, (), failures)
            if failures:
                logger.warning(
                    "render_completed_with_failures", failure_count=len(failures)
                )

        result = RenderResult(output=output, failures=failures, render_id=render_id)
        if failures and self.strict:
            raise RenderError(failures, result=result)
        return result

    def _render_node(
        self,
        node: Node,
        state: ChainState,
        path: Tuple[int, ...],
        failures: List[LeafFailure],
    ) -> Any:
        match node:
            case Scope():
                child_state = state.push(node.node)
                return [
                    self._render_node(child, child_state, path + (index,), failures)
                    for index, child in enumerate(node.children)
                ]
            case Leaf():
                return self._render_leaf(node, state, path, failures)
            case str():
                return node

    def _render_leaf(
        self,
        leaf: Leaf,
        state: ChainState,
        path: Tuple[int, ...],
        failures: List[LeafFailure],
    ) -> Any:
        try:
            output = render_request(leaf.request, state)
        except TranslationError as e:
            logger.error(
                "leaf_render_failed",
                path=list(path),
                error_type=type(e).__name__,
                error=str(e),
            )
            failures.append(LeafFailure(path=path, request=leaf.request, error=e))
            return None

        # Variants and callback results may themselves be subtrees or requests
        if isinstance(output, (Scope, Leaf) + _REQUEST_TYPES):
            return self._render_node(_as_node(output), state, path, failures)
        return output
