"""Scoped translation engine.

Resolves localized text inside a tree of scopes, where each scope may
contribute a dictionary fragment, a language override, or both, and
descendants inherit and override their ancestors' contributions.

Main components:
- normalizer: normalize() and template producers
- chain: ChainState and ScopeChain (dictionary merge, active language)
- resolver: KeyResolver (key -> text with per-key language fallback)
- strategies: leaf requests (ByKey, ByKeyWithCallback, ByVariantMap) and
  their output strategies
- tree: Scope, Leaf and Renderer
- loader: YAMLDictionaryLoader
"""

from scopetext.i18n.chain import ChainState, ScopeChain
from scopetext.i18n.exceptions import (
    AmbiguousModeError,
    InconsistentLanguageSet,
    InvalidFragmentError,
    InvalidParamTypeError,
    NormalizationError,
    RenderError,
    ReservedKeyError,
    TranslationError,
    UnknownKeyError,
    ValueProducerError,
)
from scopetext.i18n.factory import create_loader, create_renderer
from scopetext.i18n.loader import DictionaryLoader, YAMLDictionaryLoader
from scopetext.i18n.models import (
    RESERVED_NAMES,
    Computed,
    Literal,
    NormalizedFragment,
    ScopeNode,
)
from scopetext.i18n.normalizer import normalize, template_producer
from scopetext.i18n.resolver import KeyResolver, resolve
from scopetext.i18n.service import TranslationService
from scopetext.i18n.strategies import (
    ByKey,
    ByKeyWithCallback,
    ByVariantMap,
    CallbackStrategy,
    InlineStrategy,
    VariantStrategy,
    T,
    render_request,
)
from scopetext.i18n.tree import Leaf, LeafFailure, Renderer, RenderResult, Scope

__all__ = [
    "RESERVED_NAMES",
    "Literal",
    "Computed",
    "NormalizedFragment",
    "ScopeNode",
    "normalize",
    "template_producer",
    "ChainState",
    "ScopeChain",
    "KeyResolver",
    "resolve",
    "ByKey",
    "ByKeyWithCallback",
    "ByVariantMap",
    "InlineStrategy",
    "CallbackStrategy",
    "VariantStrategy",
    "T",
    "render_request",
    "Scope",
    "Leaf",
    "LeafFailure",
    "Renderer",
    "RenderResult",
    "DictionaryLoader",
    "YAMLDictionaryLoader",
    "create_renderer",
    "create_loader",
    "TranslationService",
    "TranslationError",
    "NormalizationError",
    "InconsistentLanguageSet",
    "InvalidFragmentError",
    "ReservedKeyError",
    "UnknownKeyError",
    "InvalidParamTypeError",
    "ValueProducerError",
    "AmbiguousModeError",
    "RenderError",
]
