#!/usr/bin/env python3
"""Basic usage example for the pattern demonstration harness.

This example demonstrates how to:
1. Register an extra example next to the built-in catalog
2. Run every registered example
3. Render the report and export the results
"""

from pathlib import Path
from pattern_demos.context import RunContext
from pattern_demos.patterns.registry import register, get_registry
from pattern_demos.runner.execute import run_all
from pattern_demos.report.render import render_all
from pattern_demos.report.export import results_frame, write_outputs
import pattern_demos.patterns  # noqa: F401


@register(name="null-object", description="A do-nothing stand-in instead of None checks")
def null_object():
    class NullLogger:
        def log(self, message):
            pass

    NullLogger().log("ignored")
    return ["NullLogger swallowed the message"]


def main():
    """Run all examples and write the results."""
    registry = get_registry()
    registry.freeze()
    print(f"Running {len(registry)} examples")

    results = run_all(registry.all(), timeout=10.0)
    print(render_all(results))

    df = results_frame(results)
    print(df[["example", "status", "duration_ms"]].to_string(index=False))

    ctx = RunContext(out_dir=Path("demo_runs"))
    out_dir = write_outputs(ctx, results)
    print(f"Results written to {out_dir}")


if __name__ == "__main__":
    main()
