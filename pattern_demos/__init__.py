"""Design pattern demonstrations with a harness to register, run and report them."""

__version__ = "0.1.0"

# Core components
from pattern_demos.context import RunContext
from pattern_demos.patterns.base import Example, Output, ErrorInfo, ErrorKind, RunResult
from pattern_demos.patterns.registry import Registry, register, get_registry
from pattern_demos.runner.execute import run_example, run_all
from pattern_demos.report.render import render, render_summary, render_all
from pattern_demos.exceptions import (
    PatternDemoError,
    DuplicateNameError,
    NotFoundError,
    ExecutionError,
    ExampleTimeoutError,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "RunContext",
    "Example",
    "Output",
    "ErrorInfo",
    "ErrorKind",
    "RunResult",
    "Registry",
    "register",
    "get_registry",
    # Execution
    "run_example",
    "run_all",
    # Reporting
    "render",
    "render_summary",
    "render_all",
    # Errors
    "PatternDemoError",
    "DuplicateNameError",
    "NotFoundError",
    "ExecutionError",
    "ExampleTimeoutError",
]
