"""
Transform registry: name -> transform callable.

Thread-safe. Register custom transforms at startup, before serving traffic;
last registration for a name wins.
"""
import threading
from functools import lru_cache
from typing import Callable, Dict, List, Optional

from input_sanitizer.core.logging import get_safe_logger
from input_sanitizer.services.exceptions import UnknownTransformError
from input_sanitizer.services.transforms import BUILTIN_TRANSFORMS, Transform

logger = get_safe_logger(__name__)


class TransformRegistry:
    """
    Mapping from case-sensitive transform name to ``(value, args) -> value``.

    Usage:
        registry = TransformRegistry()
        registry.register("phone", lambda value, args: ...)

        @registry.register("zip")
        def zip_code(value, args):
            ...
    """

    def __init__(self, seed: bool = True):
        self._transforms: Dict[str, Transform] = dict(BUILTIN_TRANSFORMS) if seed else {}
        self._lock = threading.RLock()

    def register(
        self,
        name: str,
        fn: Optional[Transform] = None
    ) -> Callable:
        """
        Insert or overwrite a transform.

        Called with ``fn`` it registers immediately and returns ``fn``; called
        without it returns a decorator.
        """
        if not isinstance(name, str) or not name:
            raise ValueError("Transform name must be a non-empty string")

        def decorator(func: Transform) -> Transform:
            if not callable(func):
                raise TypeError("Transform must be callable")
            with self._lock:
                overridden = name in self._transforms
                self._transforms[name] = func
            if overridden:
                logger.debug("Transform overridden", transform=name)
            return func

        if fn is not None:
            return decorator(fn)
        return decorator

    def unregister(self, name: str) -> None:
        """Remove a transform if present."""
        with self._lock:
            self._transforms.pop(name, None)

    def resolve(self, name: str) -> Transform:
        """
        Look up a transform.

        Raises:
            UnknownTransformError: if ``name`` is not registered
        """
        with self._lock:
            try:
                return self._transforms[name]
            except KeyError:
                raise UnknownTransformError(name) from None

    def is_registered(self, name: str) -> bool:
        with self._lock:
            return name in self._transforms

    def names(self) -> List[str]:
        """Registered names, sorted."""
        with self._lock:
            return sorted(self._transforms)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_registered(name)

    def __len__(self) -> int:
        with self._lock:
            return len(self._transforms)


@lru_cache()
def get_registry() -> TransformRegistry:
    """Get the process-wide registry, seeded with the built-ins."""
    return TransformRegistry()


def register_transform(name: str, fn: Optional[Transform] = None) -> Callable:
    """Register on the process-wide registry. Direct call or decorator."""
    return get_registry().register(name, fn)
