"""
Sanitizer engine: threads each configured value through its pipeline.

Stateless apart from reads against the registry. Inputs are never mutated;
every run returns a fresh dict. Unknown transform names abort the run.
"""
from typing import Any, Dict, List, Mapping, Optional

from input_sanitizer.services.exceptions import UnknownTransformError
from input_sanitizer.services.pipeline import InlineStep, NamedStep, Step, parse
from input_sanitizer.services.registry import TransformRegistry, get_registry


class Sanitizer:
    """
    Applies pipeline specifications to an input mapping.

    Usage:
        sanitizer = Sanitizer()
        clean = sanitizer.run(
            {"email": "  A@B.COM "},
            {"email": "trim|lower"},
        )
    """

    def __init__(self, registry: Optional[TransformRegistry] = None):
        self.registry = registry if registry is not None else get_registry()

    def _apply_steps(self, value: Any, steps: List[Step]) -> Any:
        for step in steps:
            if isinstance(step, InlineStep):
                value = step.fn(value)
            else:
                transform = self.registry.resolve(step.name)
                value = transform(value, list(step.args))
        return value

    def apply(self, value: Any, spec: Any) -> Any:
        """Run a single value through one pipeline specification."""
        return self._apply_steps(value, parse(spec))

    def run(
        self,
        inputs: Mapping[str, Any],
        specs: Mapping[str, Any]
    ) -> Dict[str, Any]:
        """
        Sanitize ``inputs`` according to ``specs``.

        Keys without a pipeline pass through verbatim; pipelines for keys
        missing from ``inputs`` are skipped.

        Raises:
            UnknownTransformError: a pipeline names an unregistered transform
        """
        output = dict(inputs)
        for key, spec in specs.items():
            if key not in inputs:
                continue
            output[key] = self._apply_steps(inputs[key], parse(spec))
        return output

    def missing_transforms(self, specs: Mapping[str, Any]) -> List[str]:
        """Names referenced by ``specs`` that the registry cannot resolve, in first-seen order."""
        missing: List[str] = []
        for spec in specs.values():
            for step in parse(spec):
                if (
                    isinstance(step, NamedStep)
                    and step.name not in missing
                    and not self.registry.is_registered(step.name)
                ):
                    missing.append(step.name)
        return missing

    def validate(self, specs: Mapping[str, Any]) -> None:
        """
        Check every referenced name up front, e.g. at application boot.

        Raises:
            UnknownTransformError: for the first unresolvable name
        """
        missing = self.missing_transforms(specs)
        if missing:
            raise UnknownTransformError(missing[0])


def sanitize(
    inputs: Mapping[str, Any],
    specs: Mapping[str, Any],
    registry: Optional[TransformRegistry] = None
) -> Dict[str, Any]:
    """Run ``inputs`` through ``specs`` using ``registry`` (process-wide by default)."""
    return Sanitizer(registry).run(inputs, specs)
