"""Tests for scopetext.i18n.normalizer module."""

import pytest

from scopetext.i18n import (
    Computed,
    InconsistentLanguageSet,
    InvalidFragmentError,
    Literal,
    NormalizationError,
    NormalizedFragment,
    normalize,
    template_producer,
)
from tests.factories.i18n import make_raw_fragment


class TestNormalize:
    """Tests for normalize()."""

    def test_wraps_strings_as_literals(self):
        """normalize() turns plain strings into Literal producers."""
        fragment = normalize({"greetings": {"en": "Hello"}})
        assert fragment["greetings"]["en"] == Literal("Hello")

    def test_wraps_callables_as_computed(self, farewell_producer):
        """normalize() turns callables into Computed producers."""
        fragment = normalize({"farewell": {"en": farewell_producer}})
        assert fragment["farewell"]["en"] == Computed(farewell_producer)

    def test_returns_normalized_fragment(self):
        """normalize() returns a NormalizedFragment mapping."""
        fragment = normalize(make_raw_fragment())
        assert isinstance(fragment, NormalizedFragment)
        assert set(fragment) == {"greetings", "farewell"}
        assert len(fragment) == 2

    def test_first_key_establishes_canonical_languages(self):
        """languages follows the first key's declaration order."""
        fragment = normalize(
            {
                "greetings": {"es": "Hola", "en": "Hello"},
                "farewell": {"en": "Bye", "es": "Adiós"},
            }
        )
        assert fragment.languages == ("es", "en")

    def test_each_key_keeps_its_own_order(self):
        """A key's language map keeps its declaration order."""
        fragment = normalize(
            {
                "greetings": {"es": "Hola", "en": "Hello"},
                "farewell": {"en": "Bye", "es": "Adiós"},
            }
        )
        assert list(fragment["farewell"]) == ["en", "es"]

    def test_inconsistent_language_set_raises(self):
        """Keys with {en, es} and {en, ja} fail normalization."""
        with pytest.raises(InconsistentLanguageSet) as exc_info:
            normalize(
                {
                    "greetings": {"en": "Hello", "es": "Hola"},
                    "farewell": {"en": "Bye", "ja": "さようなら"},
                }
            )
        assert exc_info.value.key == "farewell"
        assert exc_info.value.expected == ("en", "es")
        assert exc_info.value.actual == ("en", "ja")

    def test_missing_language_raises(self):
        """A key with fewer languages than the first key is inconsistent."""
        with pytest.raises(InconsistentLanguageSet):
            normalize(
                {
                    "greetings": {"en": "Hello", "es": "Hola"},
                    "farewell": {"en": "Bye"},
                }
            )

    def test_inconsistent_set_is_a_normalization_error(self):
        """InconsistentLanguageSet derives from NormalizationError."""
        assert issubclass(InconsistentLanguageSet, NormalizationError)

    def test_idempotent(self):
        """normalize(normalize(F)) == normalize(F)."""
        once = normalize(make_raw_fragment())
        twice = normalize(once)
        assert twice == once
        assert twice is once

    def test_accepts_existing_producers(self, farewell_producer):
        """Producers in a raw fragment are kept as they are."""
        producer = Computed(farewell_producer)
        fragment = normalize({"farewell": {"en": producer, "es": Literal("Adiós")}})
        assert fragment["farewell"]["en"] is producer
        assert fragment["farewell"]["es"] == Literal("Adiós")

    def test_renormalizing_a_copy_is_equal(self):
        """A plain copy of a normalized fragment normalizes to an equal one."""
        fragment = normalize(make_raw_fragment())
        assert normalize(fragment.to_dict()) == fragment

    def test_empty_fragment(self):
        """An empty mapping normalizes to an empty fragment."""
        fragment = normalize({})
        assert len(fragment) == 0
        assert fragment.languages == ()

    def test_does_not_mutate_input(self):
        """The raw fragment is left untouched."""
        raw = make_raw_fragment()
        snapshot = {key: dict(langs) for key, langs in raw.items()}
        normalize(raw)
        assert raw == snapshot

    def test_result_is_read_only(self):
        """Normalized fragments cannot be modified in place."""
        fragment = normalize(make_raw_fragment())
        with pytest.raises(TypeError):
            fragment["greetings"]["en"] = Literal("Hi")  # type: ignore[index]
        with pytest.raises(TypeError):
            fragment["new"] = {}  # type: ignore[index]

    @pytest.mark.parametrize("key", ["children", "render", "component"])
    def test_reserved_keys_rejected(self, key):
        """Reserved property names cannot be dictionary keys."""
        with pytest.raises(InvalidFragmentError):
            normalize({key: {"en": "x"}})

    @pytest.mark.parametrize(
        "fragment",
        [
            ["not", "a", "mapping"],
            {"": {"en": "x"}},
            {1: {"en": "x"}},
            {"greetings": "Hello"},
            {"greetings": {}},
            {"greetings": {"en": 42}},
            {"greetings": {"": "Hello"}},
        ],
    )
    def test_invalid_shapes_rejected(self, fragment):
        """Malformed fragments raise InvalidFragmentError."""
        with pytest.raises(InvalidFragmentError):
            normalize(fragment)


class TestTemplateProducer:
    """Tests for template_producer()."""

    def test_plain_text_is_literal(self):
        """Strings without placeholders become Literal producers."""
        assert template_producer("Hello") == Literal("Hello")

    def test_double_brace_placeholder(self):
        """{{name}} placeholders are interpolated."""
        producer = template_producer("Hello {{name}}!")
        assert isinstance(producer, Computed)
        assert producer.func({"name": "Francisco"}) == "Hello Francisco!"

    def test_single_brace_placeholder(self):
        """{name} placeholders are interpolated."""
        producer = template_producer("Adiós {name}")
        assert producer.func({"name": "Ana"}) == "Adiós Ana"

    def test_numbers_are_converted(self):
        """Numeric values are converted to strings."""
        producer = template_producer("Count: {{count}}")
        assert producer.func({"count": 42}) == "Count: 42"

    def test_missing_variable_raises(self):
        """A missing variable raises ValueError."""
        producer = template_producer("Hello {{name}}")
        with pytest.raises(ValueError):
            producer.func({})

    def test_substituted_values_are_not_rescanned(self):
        """Braces inside a value are kept literally."""
        producer = template_producer("{{a}} and {b}")
        assert producer.func({"a": "{b}", "b": "B"}) == "{b} and B"
