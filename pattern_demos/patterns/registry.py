"""Example registration and lookup."""

from typing import Any, Callable, Dict, List, ValuesView

from pattern_demos.exceptions import (
    DuplicateNameError,
    NotFoundError,
    RegistryFrozenError,
)
from pattern_demos.logging_config import get_logger
from .base import Example

logger = get_logger("patterns")


class Registry:
    """Ordered mapping of example name to Example.

    Names are unique: a duplicate registration raises and keeps the first.
    """

    def __init__(self) -> None:
        self._examples: Dict[str, Example] = {}
        self._frozen = False

    def register(self, example: Example) -> Example:
        if self._frozen:
            raise RegistryFrozenError(
                f"registry is frozen, cannot register: {example.name}"
            )
        if example.name in self._examples:
            raise DuplicateNameError(example.name)
        self._examples[example.name] = example
        logger.debug(f"Registered example {example.name}", extra={"example": example.name})
        return example

    def get(self, name: str) -> Example:
        try:
            return self._examples[name]
        except KeyError:
            raise NotFoundError(name) from None

    def all(self) -> ValuesView[Example]:
        """Live, restartable view of the examples in registration order."""
        return self._examples.values()

    def names(self) -> List[str]:
        return list(self._examples)

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __contains__(self, name: object) -> bool:
        return name in self._examples

    def __len__(self) -> int:
        return len(self._examples)


# Process-wide registry, populated by importing pattern_demos.patterns
_REGISTRY = Registry()


def get_registry() -> Registry:
    return _REGISTRY


def register(*, name: str = None, description: str = ""):
    """Decorator to register a zero-argument function as an example."""

    def _decorator(fn: Callable[[], Any]):
        ex_name = name or fn.__name__.replace("_", "-")
        doc = description or (fn.__doc__ or "").strip().split("\n", 1)[0]
        _REGISTRY.register(Example(name=ex_name, description=doc, action=fn))
        return fn

    return _decorator


def list_registered() -> List[Dict[str, str]]:
    """List all registered examples."""
    return [
        {"name": ex.name, "description": ex.description} for ex in _REGISTRY.all()
    ]
