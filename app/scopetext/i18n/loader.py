"""Dictionary loading interface and implementations.

Defines the contract for loading dictionary fragments ahead of time and
provides a YAML-based loader. Loaded fragments are already normalized, so
scopes built from them skip straight to merging.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict

import yaml

from scopetext.i18n.exceptions import InvalidFragmentError
from scopetext.i18n.models import NormalizedFragment
from scopetext.i18n.normalizer import normalize, template_producer
from scopetext.logging import get_module_logger

logger = get_module_logger()

YAML_SUFFIXES = (".yml", ".yaml")

_YAML_BOOL_TAG = "tag:yaml.org,2002:bool"


class DictionaryYAMLLoader(yaml.SafeLoader):
    """SafeLoader that keeps YAML 1.1 booleans as plain strings.

    Language codes such as ``no`` (Norwegian) and words such as ``on`` or
    ``yes`` would otherwise resolve to ``True``/``False``.
    """


DictionaryYAMLLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _YAML_BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class DictionaryLoader(ABC):
    """Abstract base for dictionary loaders."""

    @abstractmethod
    def load(self, name: str) -> NormalizedFragment:
        """Load and normalize the dictionary called ``name``.

        Raises:
            FileNotFoundError: If the dictionary does not exist.
            NormalizationError: If its content is not a valid fragment.
        """
        pass

    @abstractmethod
    def load_all(self) -> Dict[str, NormalizedFragment]:
        """Load every available dictionary, keyed by name."""
        pass


class YAMLDictionaryLoader(DictionaryLoader):
    """Loader for YAML dictionary files.

    Expects ``<name>.yml`` (or ``.yaml``) files shaped as::

        greetings:
          en: Hello {{name}}
          es: ¡Hola {{name}}!
        farewell:
          en: Bye
          es: Adiós

    Strings containing ``{{var}}`` or ``{var}`` placeholders become computed
    producers that interpolate parameters.

    Attributes:
        dictionaries_dir: Directory containing the YAML files.
        cache: Loaded fragments by name (when caching is enabled).
    """

    def __init__(self, dictionaries_dir: Path, use_cache: bool = True):
        """Initialize YAML dictionary loader.

        Args:
            dictionaries_dir: Directory with YAML dictionary files.
            use_cache: Whether to keep loaded fragments in memory.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.dictionaries_dir = Path(dictionaries_dir)
        self.use_cache = use_cache
        self.cache: Dict[str, NormalizedFragment] = {}

        if not self.dictionaries_dir.is_dir():
            raise ValueError(
                f"Dictionaries directory not found: {self.dictionaries_dir}"
            )

        logger.info(
            "initialized_yaml_loader",
            dictionaries_dir=str(self.dictionaries_dir),
            use_cache=use_cache,
        )

    def available(self) -> list:
        """Names of the dictionaries found in the directory, sorted."""
        return sorted(
            {
                path.stem
                for path in self.dictionaries_dir.iterdir()
                if path.is_file() and path.suffix in YAML_SUFFIXES
            }
        )

    def load(self, name: str) -> NormalizedFragment:
        if self.use_cache and name in self.cache:
            logger.debug("loaded_from_cache", dictionary=name)
            return self.cache[name]

        path = self._find(name)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.load(f, Loader=DictionaryYAMLLoader)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(path), error=str(e))
            raise InvalidFragmentError(f"Failed to parse {path}: {e}") from e

        fragment = normalize(self._to_raw_fragment(data or {}, path))
        logger.info(
            "loaded_dictionary",
            dictionary=name,
            key_count=len(fragment),
            languages=list(fragment.languages),
        )

        if self.use_cache:
            self.cache[name] = fragment
        return fragment

    def load_all(self) -> Dict[str, NormalizedFragment]:
        """Load every dictionary in the directory.

        Raises:
            ValueError: If the directory holds no YAML files.
        """
        names = self.available()
        if not names:
            raise ValueError(f"No dictionary files found in {self.dictionaries_dir}")
        return {name: self.load(name) for name in names}

    def clear_cache(self) -> None:
        """Clear all cached dictionaries."""
        self.cache.clear()
        logger.info("cleared_dictionary_cache")

    def _find(self, name: str) -> Path:
        for suffix in YAML_SUFFIXES:
            path = self.dictionaries_dir / f"{name}{suffix}"
            if path.is_file():
                return path
        raise FileNotFoundError(
            f"No dictionary named '{name}' in {self.dictionaries_dir}"
        )

    def _to_raw_fragment(self, data: Any, source_file: Path) -> Any:
        """Replace template strings with producers; shape checks stay in normalize()."""
        if not isinstance(data, Mapping):
            logger.warning(
                "invalid_yaml_format", file=str(source_file), expected="dict"
            )
            return data

        raw: Dict[Any, Any] = {}
        for key, languages in data.items():
            if isinstance(languages, Mapping):
                raw[key] = {
                    language: (
                        template_producer(value) if isinstance(value, str) else value
                    )
                    for language, value in languages.items()
                }
            else:
                raw[key] = languages
        return raw
