import io
import threading
import time
from collections import abc
from datetime import datetime
from typing import Any, Iterable, List, Optional

from pattern_demos.exceptions import ExampleTimeoutError
from pattern_demos.logging_config import get_logger
from pattern_demos.patterns.base import ErrorInfo, ErrorKind, Example, Output, RunResult
from pattern_demos.runner import capture

logger = get_logger("runner")


def _invoke_with_timeout(
    example: Example, timeout: float, router: capture.ThreadRoutedStdout, buffer: io.StringIO
) -> Any:
    """Run the action on a daemon thread and wait at most ``timeout`` seconds.

    A worker still running after the deadline is muted and left behind; as a
    daemon it never blocks interpreter exit.
    """
    outcome = {}

    def target():
        router.bind(threading.get_ident(), buffer)
        try:
            outcome["value"] = example.action()
        except BaseException as e:
            outcome["error"] = e
        finally:
            router.unbind(threading.get_ident())

    worker = threading.Thread(target=target, name=f"example-{example.name}", daemon=True)
    worker.start()
    worker.join(timeout)
    if worker.is_alive():
        router.abandon(worker)
        raise ExampleTimeoutError(
            f"Example {example.name} did not finish within {timeout:.2f}s"
        )
    if "error" in outcome:
        raise outcome["error"]
    return outcome.get("value")


def _returned_lines(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return value.splitlines()
    if isinstance(value, abc.Iterable):
        return [str(item) for item in value]
    return [str(value)]


def _error_message(exc: BaseException) -> str:
    message = str(exc)
    if not message and isinstance(exc, NotImplementedError):
        return "not yet implemented"
    return message or exc.__class__.__name__


def run_example(example: Example, timeout: Optional[float] = None) -> RunResult:
    """Execute a single example and return its result.

    Printed lines are captured in order. A failure raised by the action is
    recorded on the result and never propagates.
    """
    buffer = io.StringIO()
    returned: List[str] = []
    error: Optional[ErrorInfo] = None
    failure: Optional[BaseException] = None
    executed_at = datetime.now().isoformat()
    start_time = time.time()

    router = capture.acquire()
    ident = threading.get_ident()
    router.bind(ident, buffer)
    try:
        if timeout is None:
            value = example.action()
        else:
            value = _invoke_with_timeout(example, timeout, router, buffer)
        returned = _returned_lines(value)
    except ExampleTimeoutError as e:
        error = ErrorInfo(ErrorKind.TIMEOUT, str(e), e.__class__.__name__)
    except (Exception, SystemExit) as e:
        failure = e
        error = ErrorInfo(ErrorKind.EXECUTION, _error_message(e), e.__class__.__name__)
    finally:
        router.unbind(ident)
        capture.release(router)
    duration_ms = (time.time() - start_time) * 1000.0
    lines = buffer.getvalue().splitlines() + returned

    if error is None:
        logger.info(
            f"Example {example.name} completed in {duration_ms:.2f}ms",
            extra={"example": example.name, "duration_ms": duration_ms, "status": "success"},
        )
    elif error.kind is ErrorKind.TIMEOUT:
        logger.error(
            f"Example {example.name} timed out after {duration_ms:.2f}ms",
            extra={"example": example.name, "duration_ms": duration_ms, "error": error.message},
        )
    else:
        logger.error(
            f"Example {example.name} raised {error.exception_type}: {error.message}",
            extra={"example": example.name, "duration_ms": duration_ms, "error": error.message},
            exc_info=failure,
        )

    return RunResult(
        example_name=example.name,
        output=Output(lines=lines, error=error),
        succeeded=error is None,
        duration_ms=duration_ms,
        description=example.description,
        executed_at=executed_at,
    )


def run_all(examples: Iterable[Example], timeout: Optional[float] = None) -> List[RunResult]:
    """Run examples one at a time in iteration order.

    Returns one result per example; a failing example does not stop the batch.
    """
    overall_start = time.time()
    results = [run_example(example, timeout=timeout) for example in examples]

    total_time = time.time() - overall_start
    failed = sum(1 for r in results if not r.succeeded)
    logger.info(
        f"Completed {len(results)} examples in {total_time:.2f}s ({failed} failed)",
        extra={"total_time": total_time, "completed": len(results), "failed": failed},
    )
    return results
