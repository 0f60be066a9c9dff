"""
Pipeline specification parser.

A specification is either a string such as ``"trim|date:m/d/Y"`` or a
sequence mixing single tokens (``"limit:10"``) with plain callables. Both
shapes normalize to a list of steps. Parsing never fails: anything it cannot
interpret is skipped and missing arguments are left for the transform.

Grammar of the string form:

    spec    := token ("|" token)*
    token   := name (":" argList)?
    argList := arg ("," arg)*
"""
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Tuple, Union

PIPE = "|"
ARG_SEPARATOR = ":"
ARG_DELIMITER = ","


@dataclass(frozen=True)
class NamedStep:
    """
    A registry lookup applied with the parsed argument strings.
    ``args`` is stored as a tuple so steps stay hashable; lists are accepted.
    """
    name: str
    args: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))


@dataclass(frozen=True)
class InlineStep:
    """A one-off callable taking only the value. Never registered."""
    fn: Callable[[Any], Any]


Step = Union[NamedStep, InlineStep]


def parse_token(token: str) -> Optional[NamedStep]:
    """
    Parse one ``name[:arg,arg]`` token.

    Only the first colon separates the name, so ``date:H:i`` keeps ``H:i`` as
    its argument. Returns None for blank tokens.
    """
    token = token.strip()
    if not token:
        return None
    name, sep, remainder = token.partition(ARG_SEPARATOR)
    name = name.strip()
    if not name:
        return None
    if not sep or not remainder.strip():
        return NamedStep(name=name)
    args = [part.strip() for part in remainder.split(ARG_DELIMITER)]
    return NamedStep(name=name, args=args)


def parse(spec: Any) -> List[Step]:
    """
    Normalize a pipeline specification into ordered steps.

    Accepts a string, a list/tuple of tokens, callables and prebuilt steps,
    a single callable, or None. Step order is preserved exactly.
    """
    if spec is None:
        return []
    if isinstance(spec, (NamedStep, InlineStep)):
        return [spec]
    if isinstance(spec, str):
        items: List[Any] = spec.strip().split(PIPE) if spec.strip() else []
    elif callable(spec):
        return [InlineStep(fn=spec)]
    elif isinstance(spec, (list, tuple)):
        items = list(spec)
    else:
        return []

    steps: List[Step] = []
    for item in items:
        if isinstance(item, (NamedStep, InlineStep)):
            steps.append(item)
        elif isinstance(item, str):
            step = parse_token(item)
            if step is not None:
                steps.append(step)
        elif callable(item):
            steps.append(InlineStep(fn=item))
    return steps
