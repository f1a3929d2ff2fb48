"""Data structures for the scoped translation engine.

Defines value producers, normalized dictionary fragments and scope nodes.
Everything here is immutable once constructed so fragments can be shared
between concurrent renders without coordination.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterator, Optional, Sequence, Tuple, Union

# Property names with a special meaning on leaf requests. They can never be
# used as translation keys.
CHILDREN = "children"
RENDER = "render"
COMPONENT = "component"
RESERVED_NAMES = frozenset({CHILDREN, RENDER, COMPONENT})

ParamValue = Union[str, int, float]
Params = Mapping[str, ParamValue]


@dataclass(frozen=True)
class Literal:
    """Producer backed by a fixed string. Ignores parameters."""

    text: str


@dataclass(frozen=True)
class Computed:
    """Producer backed by a pure function of the parameter record.

    Attributes:
        func: Callable receiving a read-only params mapping, returning a string.
    """

    func: Callable[[Params], str]


ValueProducer = Union[Literal, Computed]

# language code -> producer, in declaration order
LanguageMap = Mapping[str, ValueProducer]


class NormalizedFragment(Mapping):
    """Validated dictionary fragment: key -> language -> producer.

    Read-only. Each key's language map keeps its declaration order, so the
    first language of a key is its fallback. ``languages`` records the
    canonical language order established by the first key.

    Only ``normalize()`` should build these; the constructor trusts its input.
    """

    __slots__ = ("_entries", "_languages")

    def __init__(
        self,
        entries: Mapping[str, Mapping[str, ValueProducer]],
        languages: Sequence[str] = (),
    ):
        self._entries: Mapping[str, LanguageMap] = MappingProxyType(
            {key: MappingProxyType(dict(langs)) for key, langs in entries.items()}
        )
        self._languages: Tuple[str, ...] = tuple(languages)

    @property
    def languages(self) -> Tuple[str, ...]:
        """Canonical language codes, in the order the first key declared them."""
        return self._languages

    def __getitem__(self, key: str) -> LanguageMap:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return (
            f"NormalizedFragment(keys={list(self._entries)}, "
            f"languages={list(self._languages)})"
        )

    def to_dict(self) -> Dict[str, Dict[str, ValueProducer]]:
        """Return a mutable deep copy, mostly for debugging and serialization."""
        return {key: dict(langs) for key, langs in self._entries.items()}


EMPTY_FRAGMENT = NormalizedFragment({})


@dataclass(frozen=True)
class ScopeNode:
    """One scope's contribution to a chain.

    A node may carry a language override, a dictionary fragment, both or
    neither. Nodes are never mutated; cascading happens by building new
    chain states.

    Attributes:
        language: Explicit language code declared by the scope, if any.
        dictionary: Normalized fragment contributed by the scope, if any.
    """

    language: Optional[str] = None
    dictionary: Optional[NormalizedFragment] = None

    @property
    def is_empty(self) -> bool:
        return self.language is None and not self.dictionary

    def describe(self) -> Dict[str, Any]:
        """Summarize the node for structured logs."""
        return {
            "language": self.language,
            "keys": list(self.dictionary) if self.dictionary else [],
        }
