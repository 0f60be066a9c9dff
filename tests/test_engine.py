"""
Unit tests for the sanitizer engine.
"""
import pytest

from input_sanitizer.services.engine import Sanitizer, sanitize
from input_sanitizer.services.exceptions import UnknownTransformError
from input_sanitizer.services.pipeline import InlineStep, NamedStep
from input_sanitizer.services.registry import TransformRegistry, register_transform


class TestRun:
    """Sanitizer.run behaviour."""

    def test_no_specs_is_identity(self, sanitizer):
        inputs = {"a": " x ", "b": 3, "c": None, "d": [1, 2]}
        assert sanitizer.run(inputs, {}) == inputs

    def test_returns_fresh_mapping(self, sanitizer):
        inputs = {"name": " john "}
        result = sanitizer.run(inputs, {})
        assert result is not inputs

    def test_inputs_not_mutated(self, sanitizer):
        inputs = {"name": " john ", "tags": [" a ", " b "]}
        sanitizer.run(inputs, {"name": "trim", "tags": "trim"})
        assert inputs == {"name": " john ", "tags": [" a ", " b "]}

    def test_spec_without_input_is_skipped(self, sanitizer):
        result = sanitizer.run({"a": "x"}, {"missing": "trim"})
        assert result == {"a": "x"}
        assert "missing" not in result

    def test_unconfigured_keys_pass_through(self, sanitizer):
        result = sanitizer.run({"a": " x ", "b": " y "}, {"a": "trim"})
        assert result == {"a": "x", "b": " y "}

    def test_mixed_pipeline(self, sanitizer):
        assert sanitizer.run({"name": " john "}, {"name": "trim|ucfirst"}) == {"name": "John"}

    def test_email_scenario(self, sanitizer):
        result = sanitizer.run({"email": "  A@B.COM "}, {"email": "trim|lower"})
        assert result == {"email": "a@b.com"}

    def test_inline_step(self, sanitizer):
        assert sanitizer.run({"age": 5}, {"age": [lambda v: v + 100]}) == {"age": 105}

    def test_inline_mixed_with_named(self, sanitizer):
        result = sanitizer.run(
            {"age": " 5 "},
            {"age": ["trim", "int", lambda v: v * 2]}
        )
        assert result == {"age": 10}

    def test_steps_apply_left_to_right(self, sanitizer):
        result = sanitizer.run(
            {"v": "a"},
            {"v": [lambda v: v + "b", lambda v: v + "c"]}
        )
        assert result == {"v": "abc"}

    def test_empty_spec_passes_value_through(self, sanitizer):
        assert sanitizer.run({"a": " x "}, {"a": ""}) == {"a": " x "}
        assert sanitizer.run({"a": " x "}, {"a": []}) == {"a": " x "}

    def test_arguments_reach_transform(self, sanitizer):
        result = sanitizer.run({"price": "1234.5678"}, {"price": "number_format:2"})
        assert result == {"price": "1,234.57"}

    def test_date_reformatting(self, sanitizer):
        result = sanitizer.run({"dob": "2024-01-05"}, {"dob": "date:m/d/Y"})
        assert result == {"dob": "01/05/2024"}

    def test_none_value_is_processed(self, sanitizer):
        assert sanitizer.run({"a": None}, {"a": "trim|default:n/a"}) == {"a": "n/a"}


class TestUnknownTransforms:
    """Fail-fast on unknown names."""

    def test_unknown_name_raises(self, sanitizer):
        with pytest.raises(UnknownTransformError) as exc_info:
            sanitizer.run({"x": "v"}, {"x": "not_a_real_transform"})
        assert exc_info.value.name == "not_a_real_transform"

    def test_unknown_name_in_later_step(self, sanitizer):
        with pytest.raises(UnknownTransformError):
            sanitizer.run({"x": "v"}, {"x": "trim|nope"})

    def test_unknown_name_for_absent_key_is_not_resolved(self, sanitizer):
        assert sanitizer.run({"x": "v"}, {"y": "nope"}) == {"x": "v"}

    def test_missing_transforms(self, sanitizer):
        specs = {"a": "trim|nope", "b": ["foo", "nope", lambda v: v], "c": "lower"}
        assert sanitizer.missing_transforms(specs) == ["nope", "foo"]

    def test_validate_passes(self, sanitizer):
        sanitizer.validate({"a": "trim|lower", "b": ["date:m/d/Y"]})

    def test_validate_raises_first_unknown(self, sanitizer):
        with pytest.raises(UnknownTransformError) as exc_info:
            sanitizer.validate({"a": "trim|bogus", "b": "other"})
        assert exc_info.value.name == "bogus"


class TestRegistryInteraction:
    """Custom and overridden transforms."""

    def test_override_is_used(self, registry, sanitizer):
        registry.register("trim", lambda value, args: "custom")
        assert sanitizer.run({"a": " x "}, {"a": "trim"}) == {"a": "custom"}

    def test_custom_transform_receives_args(self, registry, sanitizer):
        seen = []

        def spy(value, args):
            seen.append(args)
            return value

        registry.register("spy", spy)
        sanitizer.run({"a": 1}, {"a": "spy:x, y"})
        assert seen == [["x", "y"]]

    def test_custom_transform_without_args(self, registry, sanitizer):
        registry.register("spy", lambda value, args: (value, args))
        assert sanitizer.run({"a": 1}, {"a": "spy"}) == {"a": (1, [])}

    def test_empty_registry(self):
        engine = Sanitizer(TransformRegistry(seed=False))
        with pytest.raises(UnknownTransformError):
            engine.run({"a": "x"}, {"a": "trim"})

    def test_default_registry_is_process_wide(self):
        register_transform("shout", lambda value, args: value.upper())
        assert Sanitizer().run({"a": "x"}, {"a": "shout"}) == {"a": "X"}


class TestApplyAndHelpers:
    """Single-value apply and module-level sanitize."""

    def test_apply(self, sanitizer):
        assert sanitizer.apply("  Hello  World ", "squish|lower") == "hello world"

    def test_apply_prebuilt_steps(self, sanitizer):
        steps = [NamedStep("limit", ["3"]), InlineStep(str.upper)]
        assert sanitizer.apply("abcdef", steps) == "ABC"

    def test_sanitize_function(self, registry):
        assert sanitize({"a": " x "}, {"a": "trim"}, registry) == {"a": "x"}

    def test_sanitize_function_default_registry(self):
        assert sanitize({"a": "X"}, {"a": "lower"}) == {"a": "x"}


class TestIdempotence:
    """Only transforms documented as idempotent."""

    @pytest.mark.parametrize("name", ["trim", "ucfirst", "lower", "upper", "squish", "digits"])
    def test_idempotent(self, sanitizer, name):
        once = sanitizer.apply("  hello  World 42 ", name)
        assert sanitizer.apply(once, name) == once
