"""Decorator: add behaviour to an object by wrapping it.

Subclassing gives one class per combination of features. Wrappers that
implement the same interface can be stacked in any order instead.
"""

from abc import ABC, abstractmethod
from typing import Dict

from pattern_demos.patterns.registry import register

MAX_NAME_LENGTH = 15


class StarTrekRepository(ABC):
    @abstractmethod
    def get_captain(self, starship_name: str) -> str:
        ...

    @abstractmethod
    def add_captain(self, starship_name: str, captain_name: str) -> None:
        ...


class DefaultStarTrekRepository(StarTrekRepository):
    def __init__(self):
        self._captains: Dict[str, str] = {"USS Enterprise": "Jean-Luc Picard"}

    def get_captain(self, starship_name):
        return self._captains.get(starship_name, "Unknown")

    def add_captain(self, starship_name, captain_name):
        self._captains[starship_name] = captain_name


class RepositoryWrapper(StarTrekRepository):
    """Forwards every call to the wrapped repository."""

    def __init__(self, repository: StarTrekRepository):
        self._repository = repository

    def get_captain(self, starship_name):
        return self._repository.get_captain(starship_name)

    def add_captain(self, starship_name, captain_name):
        self._repository.add_captain(starship_name, captain_name)


class LoggingGetCaptain(RepositoryWrapper):
    def get_captain(self, starship_name):
        print(f"Getting captain for {starship_name}")
        return super().get_captain(starship_name)


class ValidatingAdd(RepositoryWrapper):
    def add_captain(self, starship_name, captain_name):
        if len(captain_name) > MAX_NAME_LENGTH:
            raise ValueError(
                f"{captain_name} is longer than {MAX_NAME_LENGTH} characters"
            )
        super().add_captain(starship_name, captain_name)


@register(name="decorator", description="Stack logging and validation wrappers on a repository")
def demo():
    repository = LoggingGetCaptain(ValidatingAdd(DefaultStarTrekRepository()))
    print(repository.get_captain("USS Enterprise"))
    repository.add_captain("USS Voyager", "Kathryn Janeway")
    print(repository.get_captain("USS Voyager"))
    try:
        repository.add_captain("IKS Rotarran", "Martok son of Urthog")
    except ValueError as e:
        print(f"rejected: {e}")
    print(repository.get_captain("IKS Rotarran"))
