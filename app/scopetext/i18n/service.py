"""Translation service for dependency injection.

Provides a class-based interface to the engine for easier DI and testing.
"""

from typing import Any, Mapping, Optional

from scopetext.i18n.chain import ChainState
from scopetext.i18n.factory import create_loader, create_renderer
from scopetext.i18n.loader import DictionaryLoader
from scopetext.i18n.models import NormalizedFragment
from scopetext.i18n.normalizer import normalize
from scopetext.i18n.tree import Renderer, RenderResult, Scope


class TranslationService:
    """Class-based translation service.

    Thin facade over a Renderer and an optional DictionaryLoader.

    Usage:
        service = TranslationService()
        text = service.translate(
            "greetings",
            Scope(dictionary={"greetings": {"en": "Hello", "es": "Hola"}}),
            Scope(language="es"),
        )
    """

    def __init__(
        self,
        renderer: Optional[Renderer] = None,
        loader: Optional[DictionaryLoader] = None,
    ):
        """Initialize translation service.

        Args:
            renderer: Optional pre-configured Renderer. Created from settings
                when not provided.
            loader: Optional DictionaryLoader. Created from settings when not
                provided; may remain None if no directory is configured.
        """
        self._renderer = renderer or create_renderer()
        self._loader = loader if loader is not None else create_loader()

    @staticmethod
    def normalize(fragment: Any) -> NormalizedFragment:
        """Pre-normalize a raw dictionary fragment."""
        return normalize(fragment)

    def render(self, node: Any) -> RenderResult:
        """Render a scope tree with the configured renderer."""
        return self._renderer.render(node)

    def chain(self, *scopes: Scope) -> ChainState:
        """Build the chain state for a root-to-leaf sequence of scopes."""
        return ChainState.from_nodes(
            (scope.node for scope in scopes), self._renderer.ambient_language
        )

    def translate(
        self,
        key: str,
        *scopes: Scope,
        params: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Resolve ``key`` under the chain formed by ``scopes`` (root first).

        Raises:
            ReservedKeyError, UnknownKeyError, InvalidParamTypeError,
            ValueProducerError: See ``KeyResolver.resolve``.
        """
        return self.chain(*scopes).translate(key, params)

    def load_dictionary(self, name: str) -> NormalizedFragment:
        """Load a named dictionary through the configured loader.

        Raises:
            RuntimeError: If no loader is configured.
            FileNotFoundError: If the dictionary does not exist.
        """
        if self._loader is None:
            raise RuntimeError(
                "No dictionary loader configured (I18N_DICTIONARIES_DIR)"
            )
        return self._loader.load(name)

    @property
    def renderer(self) -> Renderer:
        return self._renderer

    @property
    def loader(self) -> Optional[DictionaryLoader]:
        return self._loader
