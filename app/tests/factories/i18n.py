"""Test data factories for the scoped translation engine.

Provides deterministic builders for:
- raw and normalized dictionary fragments
- scope nodes and chain states
- the nested language tree used across tests
"""

from typing import Any, Dict, Optional

from scopetext.i18n import (
    ChainState,
    NormalizedFragment,
    Scope,
    ScopeNode,
    T,
    normalize,
)


def make_raw_fragment(entries: Optional[Dict[str, Dict[str, Any]]] = None) -> dict:
    """Create a raw fragment.

    Args:
        entries: key -> {language -> value}. Defaults to greetings/farewell
            in en, es and ja.

    Returns:
        Raw fragment dict.
    """
    if entries is None:
        entries = {
            "greetings": {"en": "Hello", "es": "¡Hola!", "ja": "こんにちは"},
            "farewell": {"en": "Bye", "es": "Adiós", "ja": "さようなら"},
        }
    return entries


def make_fragment(entries: Optional[Dict[str, Dict[str, Any]]] = None) -> NormalizedFragment:
    """Create a normalized fragment from ``make_raw_fragment`` data."""
    return normalize(make_raw_fragment(entries))


def make_scope_node(
    language: Optional[str] = None,
    entries: Optional[Dict[str, Dict[str, Any]]] = None,
) -> ScopeNode:
    """Create a ScopeNode. ``entries`` of None means no dictionary."""
    dictionary = normalize(entries) if entries is not None else None
    return ScopeNode(language=language, dictionary=dictionary)


def make_chain_state(*nodes: ScopeNode, ambient_language: str = "en") -> ChainState:
    """Create a ChainState by pushing ``nodes`` in order."""
    return ChainState.from_nodes(nodes, ambient_language)


def make_language_tree() -> Scope:
    """Create a three-level tree: en at the root, ja at depth 2, es at depth 3.

    Each level renders ``greetings`` once before nesting the next level.
    """
    return Scope(
        T("greetings"),
        Scope(
            T("greetings"),
            Scope(
                T("greetings"),
                language="es",
            ),
            language="ja",
        ),
        dictionary=make_raw_fragment(),
        language="en",
    )
