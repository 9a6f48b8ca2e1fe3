import dataclasses
import pytest
from pattern_demos.patterns.base import (
    ErrorInfo,
    ErrorKind,
    Example,
    Output,
    RunResult,
)


class TestExample:
    def test_example_creation(self):
        action = lambda: None  # noqa: E731
        ex = Example(name="demo", description="a demo", action=action)

        assert ex.name == "demo"
        assert ex.description == "a demo"
        assert ex.action is action

    def test_example_is_immutable(self):
        ex = Example(name="demo", description="", action=lambda: None)
        with pytest.raises(dataclasses.FrozenInstanceError):
            ex.name = "other"

    def test_example_requires_name(self):
        with pytest.raises(ValueError):
            Example(name="  ", description="", action=lambda: None)

    def test_example_requires_callable_action(self):
        with pytest.raises(TypeError):
            Example(name="demo", description="", action="not callable")


class TestRunResult:
    def test_status(self):
        ok = RunResult("a", Output(["x"]), True, 1.0)
        bad = RunResult("b", Output([], ErrorInfo(ErrorKind.EXECUTION, "boom")), False, 1.0)

        assert ok.status == "passed"
        assert bad.status == "failed"

    def test_to_dict_success(self):
        result = RunResult("a", Output(["x"]), True, 1.5, description="desc")
        d = result.to_dict()

        assert d["example_name"] == "a"
        assert d["output"] == {"lines": ["x"], "error": None}
        assert d["succeeded"] is True
        assert d["duration_ms"] == 1.5
        assert d["status"] == "passed"

    def test_to_dict_enum_conversion(self):
        error = ErrorInfo(ErrorKind.TIMEOUT, "too slow", "ExampleTimeoutError")
        d = RunResult("slow", Output([], error), False, 10.0).to_dict()

        assert d["output"]["error"] == {
            "kind": "TimeoutError",
            "message": "too slow",
            "exception_type": "ExampleTimeoutError",
        }

    def test_error_info_str(self):
        assert str(ErrorInfo(ErrorKind.EXECUTION, "boom")) == "ExecutionError: boom"

