"""Scope chain resolution.

A chain is the root-to-node path of scopes relevant to one resolution.
Dictionaries merge root to leaf with per-key whole replacement; the active
language is the override declared closest to the leaf, or the ambient
default when no scope declares one.

Chain state is passed explicitly through composition. Nothing here reads
or writes global state, so identical chains always resolve identically.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple

from scopetext.i18n.models import LanguageMap, ScopeNode
from scopetext.i18n.resolver import resolve

MergedDictionary = Mapping[str, LanguageMap]

EMPTY_MERGED: MergedDictionary = MappingProxyType({})


def _overlay(base: MergedDictionary, node: ScopeNode) -> MergedDictionary:
    if not node.dictionary:
        return base
    merged = dict(base)
    # A descendant key replaces the ancestor's whole language map
    merged.update(node.dictionary)
    return MappingProxyType(merged)


class ScopeChain:
    """Stateless helpers computing (merged dictionary, active language)
    from a root-to-leaf sequence of scope nodes."""

    @staticmethod
    def merge(nodes: Iterable[ScopeNode]) -> MergedDictionary:
        """Merge dictionary contributions from root to leaf."""
        merged = EMPTY_MERGED
        for node in nodes:
            merged = _overlay(merged, node)
        return merged

    @staticmethod
    def active_language(nodes: Iterable[ScopeNode], ambient_language: str) -> str:
        """Return the override closest to the leaf, else the ambient default."""
        for node in reversed(tuple(nodes)):
            if node.language is not None:
                return node.language
        return ambient_language

    @classmethod
    def resolve(
        cls,
        nodes: Iterable[ScopeNode],
        ambient_language: str,
    ) -> Tuple[MergedDictionary, str]:
        """Resolve a chain to its merged dictionary and active language.

        Args:
            nodes: Scope nodes ordered from the tree root to the requesting node.
            ambient_language: Host-supplied default language.

        Returns:
            Tuple of (merged dictionary, active language).
        """
        nodes = tuple(nodes)
        return cls.merge(nodes), cls.active_language(nodes, ambient_language)


@dataclass(frozen=True)
class ChainState:
    """Immutable chain-state value handed down during tree composition.

    ``push()`` returns a new state for a child scope; the parent state is
    never modified. The merged dictionary and declared language are folded
    in incrementally so sibling subtrees share their common prefix.

    Equality compares the ambient language and the node path only.

    Attributes:
        ambient_language: Host-supplied default language.
        nodes: Scope nodes from the root to the current position.
    """

    ambient_language: str
    nodes: Tuple[ScopeNode, ...] = ()
    merged_dictionary: MergedDictionary = field(
        default_factory=lambda: EMPTY_MERGED, compare=False, repr=False
    )
    declared_language: Optional[str] = field(default=None, compare=False, repr=False)

    @classmethod
    def root(cls, ambient_language: str) -> "ChainState":
        """Create the empty state at the top of a tree."""
        return cls(ambient_language=ambient_language)

    @classmethod
    def from_nodes(
        cls, nodes: Iterable[ScopeNode], ambient_language: str
    ) -> "ChainState":
        """Build a state by pushing each node in root-to-leaf order."""
        state = cls.root(ambient_language)
        for node in nodes:
            state = state.push(node)
        return state

    def push(self, node: ScopeNode) -> "ChainState":
        """Return the state for a child scope contributing ``node``."""
        return ChainState(
            ambient_language=self.ambient_language,
            nodes=self.nodes + (node,),
            merged_dictionary=_overlay(self.merged_dictionary, node),
            declared_language=(
                node.language if node.language is not None else self.declared_language
            ),
        )

    @property
    def active_language(self) -> str:
        """Language of the nearest declaring scope, else the ambient default."""
        if self.declared_language is not None:
            return self.declared_language
        return self.ambient_language

    @property
    def depth(self) -> int:
        return len(self.nodes)

    def resolve(self) -> Tuple[MergedDictionary, str]:
        return self.merged_dictionary, self.active_language

    def translate(self, key: str, params: Optional[Mapping] = None) -> str:
        """Resolve ``key`` against this chain.

        Raises:
            ReservedKeyError, UnknownKeyError, InvalidParamTypeError,
            ValueProducerError: See ``KeyResolver.resolve``.
        """
        return resolve(self.merged_dictionary, self.active_language, key, params)
