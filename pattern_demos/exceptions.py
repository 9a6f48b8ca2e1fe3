"""Custom exception hierarchy for the pattern demonstration harness."""


class PatternDemoError(Exception):
    """Base exception for all pattern-demos errors."""

    pass


class RegistrationError(PatternDemoError):
    """Raised when an example cannot be registered."""

    pass


class DuplicateNameError(RegistrationError):
    """Raised when an example name is already registered."""

    def __init__(self, name: str):
        super().__init__(f"example already registered: {name}")
        self.name = name


class RegistryFrozenError(RegistrationError):
    """Raised when registering into a registry that has been frozen."""

    pass


class NotFoundError(PatternDemoError):
    """Raised when looking up an example name that is not registered."""

    def __init__(self, name: str):
        super().__init__(f"unknown example: {name}")
        self.name = name


class ExecutionError(PatternDemoError):
    """Raised when an example action fails during a run."""

    pass


class ExampleTimeoutError(PatternDemoError):
    """Raised when an example action exceeds its wall-clock timeout."""

    pass


class ConfigurationError(PatternDemoError):
    """Raised when configuration is invalid or missing."""

    pass
