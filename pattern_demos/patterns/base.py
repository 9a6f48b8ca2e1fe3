"""Core records for demonstrations: Example, Output, ErrorInfo and RunResult."""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, Callable, List, Optional

from pattern_demos.exceptions import ExecutionError


class ErrorKind(Enum):
    """Kinds of failure captured from an example run."""

    EXECUTION = ExecutionError.__name__
    TIMEOUT = TimeoutError.__name__


@dataclass(frozen=True)
class Example:
    """A named, self-contained demonstration.

    ``action`` takes no arguments. Anything it prints is captured as output.
    A returned string or iterable of strings is appended to the output too.
    """

    name: str
    description: str
    action: Callable[[], Any] = field(compare=False, repr=False)

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("example name must be a non-empty string")
        if not callable(self.action):
            raise TypeError(f"action for example '{self.name}' is not callable")


@dataclass
class ErrorInfo:
    kind: ErrorKind
    message: str
    exception_type: str = ""

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


@dataclass
class Output:
    lines: List[str] = field(default_factory=list)
    error: Optional[ErrorInfo] = None


@dataclass
class RunResult:
    example_name: str
    output: Output
    succeeded: bool
    duration_ms: float
    description: str = ""
    executed_at: Optional[str] = None  # ISO timestamp when the example ran

    @property
    def status(self) -> str:
        return "passed" if self.succeeded else "failed"

    def to_dict(self):
        d = asdict(self)
        error = self.output.error
        d["output"]["error"] = (
            {
                "kind": error.kind.value,
                "message": error.message,
                "exception_type": error.exception_type,
            }
            if error
            else None
        )
        d["status"] = self.status
        return d
