"""Translation engine settings."""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator

from scopetext.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Translation engine configuration.

    Environment Variables:
        I18N_AMBIENT_LANGUAGE: Language used when no scope declares one (default: "en")
        I18N_DICTIONARIES_DIR: Directory holding YAML dictionaries (optional)
        I18N_STRICT_RENDERING: Raise RenderError after a render pass with
            failed leaves (default: True)
        I18N_CACHE_DICTIONARIES: Cache loaded YAML dictionaries (default: True)

    Example:
        ```python
        from scopetext.configuration import get_settings

        settings = get_settings()
        renderer = Renderer(ambient_language=settings.i18n.ambient_language)
        ```
    """

    ambient_language: str = Field(
        default="en",
        alias="I18N_AMBIENT_LANGUAGE",
        description="Host-supplied default language",
    )
    dictionaries_dir: Optional[Path] = Field(
        default=None,
        alias="I18N_DICTIONARIES_DIR",
        description="Directory containing <name>.yml dictionary files",
    )
    strict_rendering: bool = Field(
        default=True,
        alias="I18N_STRICT_RENDERING",
        description="Raise after a render pass that recorded leaf failures",
    )
    cache_dictionaries: bool = Field(
        default=True,
        alias="I18N_CACHE_DICTIONARIES",
        description="Keep loaded dictionaries in memory",
    )

    @field_validator("ambient_language")
    @classmethod
    def ambient_language_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("I18N_AMBIENT_LANGUAGE must not be empty")
        return value.strip()
