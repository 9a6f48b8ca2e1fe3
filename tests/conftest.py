import logging
import pytest
from pathlib import Path
from unittest.mock import Mock
from pattern_demos.context import RunContext
from pattern_demos.patterns.base import Example
from pattern_demos.patterns.registry import Registry


def _fail_with_boom():
    raise RuntimeError("boom")


@pytest.fixture
def registry():
    """Fresh, empty registry for testing."""
    return Registry()


@pytest.fixture
def passing_example():
    """Example that prints a single line."""
    return Example(name="a", description="prints x", action=lambda: print("x"))


@pytest.fixture
def failing_example():
    """Example whose action always raises."""
    return Example(name="b", description="always fails", action=_fail_with_boom)


@pytest.fixture
def mock_context(tmp_path):
    """Mock run context writing into a temporary directory."""
    ctx = Mock(spec=RunContext)
    ctx.run_id = "test_run"
    ctx.out_dir = Path(tmp_path)
    ctx.extra = {}
    return ctx


@pytest.fixture(autouse=True)
def restore_root_logging():
    """setup_logging() replaces root handlers; put the originals back."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
