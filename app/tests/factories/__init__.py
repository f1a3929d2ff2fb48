"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_chain_state,
    make_fragment,
    make_language_tree,
    make_raw_fragment,
    make_scope_node,
)

__all__ = [
    "make_chain_state",
    "make_fragment",
    "make_language_tree",
    "make_raw_fragment",
    "make_scope_node",
]
