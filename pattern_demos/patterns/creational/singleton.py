"""Singleton: one lazily created, process-wide instance."""

from collections.abc import Sequence
from typing import Iterator, Optional

from pattern_demos.patterns.registry import register


class EmptyCatalog(Sequence):
    """An always-empty sequence. Only ``len`` and ``in`` are implemented."""

    def __init__(self):
        print("I was accessed for the 1st time")

    def __len__(self) -> int:
        return 0

    def __contains__(self, element) -> bool:
        return False

    def __getitem__(self, index):
        raise NotImplementedError

    def __iter__(self) -> Iterator:
        raise NotImplementedError

    def index(self, value, start=0, stop=None):
        raise NotImplementedError


_instance: Optional[EmptyCatalog] = None


def get_catalog() -> EmptyCatalog:
    global _instance
    if _instance is None:
        _instance = EmptyCatalog()
    return _instance


@register(name="singleton", description="Lazily initialised process-wide instance")
def demo():
    first = get_catalog()
    second = get_catalog()
    print(f"same instance: {first is second}")
    print(f"size: {len(first)}")
    print(f"contains 'anything': {'anything' in first}")
