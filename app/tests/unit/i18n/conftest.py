"""Feature-level fixtures for the scoped translation engine tests."""

import pytest
import yaml

from scopetext.i18n import Renderer, YAMLDictionaryLoader


@pytest.fixture
def farewell_producer():
    """Parameterized producer defaulting the name to 'World'."""
    return lambda params: f"Hello {params.get('name', 'World')}!"


@pytest.fixture
def renderer():
    """Strict renderer with English as the ambient language."""
    return Renderer(ambient_language="en")


@pytest.fixture
def lenient_renderer():
    """Renderer that records leaf failures without raising."""
    return Renderer(ambient_language="en", strict=False)


@pytest.fixture
def temp_dictionaries_dir(tmp_path):
    """Create a temporary directory with sample YAML dictionaries.

    - common.yml: greetings/farewell in en and es, farewell templated
    - admin.yaml: dashboard in en and fr
    """
    common = {
        "greetings": {"en": "Hello", "es": "¡Hola!"},
        "farewell": {"en": "Bye {{name}}", "es": "Adiós {name}"},
    }
    with open(tmp_path / "common.yml", "w", encoding="utf-8") as f:
        yaml.safe_dump(common, f, allow_unicode=True)

    admin = {"dashboard": {"en": "Dashboard", "fr": "Tableau de bord"}}
    with open(tmp_path / "admin.yaml", "w", encoding="utf-8") as f:
        yaml.safe_dump(admin, f, allow_unicode=True)

    return tmp_path


@pytest.fixture
def yaml_loader(temp_dictionaries_dir):
    """YAMLDictionaryLoader without caching."""
    return YAMLDictionaryLoader(temp_dictionaries_dir, use_cache=False)


@pytest.fixture
def yaml_loader_with_cache(temp_dictionaries_dir):
    """YAMLDictionaryLoader with caching enabled."""
    return YAMLDictionaryLoader(temp_dictionaries_dir, use_cache=True)
