"""Plain-text rendering of run results."""

from typing import Iterable, List

from pattern_demos.config import INDENT
from pattern_demos.patterns.base import RunResult

PASS_MARKER = "[PASS]"
FAIL_MARKER = "[FAIL]"


def render(result: RunResult) -> str:
    marker = PASS_MARKER if result.succeeded else FAIL_MARKER
    header = f"{marker} {result.example_name}"
    if result.description:
        header += f" - {result.description}"
    header += f" ({result.duration_ms:.2f} ms)"

    lines = [header]
    lines.extend(f"{INDENT}{line}" for line in result.output.lines)
    if result.output.error is not None:
        lines.append(f"{INDENT}error: {result.output.error}")
    return "\n".join(lines)


def render_summary(results: Iterable[RunResult]) -> str:
    results = list(results)
    passed = sum(1 for r in results if r.succeeded)
    return f"{passed}/{len(results)} examples succeeded"


def render_all(results: Iterable[RunResult]) -> str:
    results: List[RunResult] = list(results)
    blocks = [render(r) for r in results]
    blocks.append(render_summary(results))
    return "\n".join(blocks)
