"""Factory functions for creating i18n components from settings."""

from pathlib import Path
from typing import Optional

from scopetext.configuration import Settings, get_settings
from scopetext.i18n.loader import YAMLDictionaryLoader
from scopetext.i18n.tree import Renderer
from scopetext.logging import get_module_logger

logger = get_module_logger()


def create_renderer(
    ambient_language: Optional[str] = None,
    strict: Optional[bool] = None,
    settings: Optional[Settings] = None,
) -> Renderer:
    """Create a Renderer, filling unspecified options from settings.

    Args:
        ambient_language: Host default language (default: I18N_AMBIENT_LANGUAGE).
        strict: Raise on leaf failures (default: I18N_STRICT_RENDERING).
        settings: Settings to read from (default: process singleton).

    Returns:
        Renderer: Configured renderer.

    Usage:
        # Ambient language from the environment
        renderer = create_renderer()

        # Explicit ambient language, lenient rendering
        renderer = create_renderer(ambient_language="fr", strict=False)
    """
    settings = settings or get_settings()
    renderer = Renderer(
        ambient_language=ambient_language or settings.i18n.ambient_language,
        strict=settings.i18n.strict_rendering if strict is None else strict,
    )
    logger.info(
        "renderer_created",
        ambient_language=renderer.ambient_language,
        strict=renderer.strict,
    )
    return renderer


def create_loader(
    dictionaries_dir: Optional[Path] = None,
    use_cache: Optional[bool] = None,
    settings: Optional[Settings] = None,
) -> Optional[YAMLDictionaryLoader]:
    """Create a YAML dictionary loader, or None when no directory is configured.

    Args:
        dictionaries_dir: Directory of YAML files (default: I18N_DICTIONARIES_DIR).
        use_cache: Cache loaded dictionaries (default: I18N_CACHE_DICTIONARIES).
        settings: Settings to read from (default: process singleton).

    Raises:
        ValueError: If the directory does not exist.
    """
    settings = settings or get_settings()
    directory = dictionaries_dir or settings.i18n.dictionaries_dir
    if directory is None:
        logger.info("dictionary_loader_not_configured")
        return None

    return YAMLDictionaryLoader(
        dictionaries_dir=directory,
        use_cache=settings.i18n.cache_dictionaries if use_cache is None else use_cache,
    )
