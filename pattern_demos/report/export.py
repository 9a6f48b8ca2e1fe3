"""Write run results to a run directory as JSON and CSV."""

import os
import json
from typing import Iterable, List

import pandas as pd

from pattern_demos.logging_config import get_logger
from pattern_demos.patterns.base import RunResult

logger = get_logger("report")

COLUMNS = [
    "example",
    "status",
    "duration_ms",
    "line_count",
    "error_kind",
    "error_message",
    "executed_at",
]


def results_frame(results: Iterable[RunResult]) -> pd.DataFrame:
    """One row per result, in run order."""
    rows = []
    for r in results:
        error = r.output.error
        rows.append(
            {
                "example": r.example_name,
                "status": r.status,
                "duration_ms": r.duration_ms,
                "line_count": len(r.output.lines),
                "error_kind": error.kind.value if error else None,
                "error_message": error.message if error else None,
                "executed_at": r.executed_at,
            }
        )
    return pd.DataFrame(rows, columns=COLUMNS)


def write_outputs(ctx, results: List[RunResult]) -> str:
    out_dir = os.path.join(str(ctx.out_dir), ctx.run_id)
    os.makedirs(out_dir, exist_ok=True)
    with open(os.path.join(out_dir, "results.json"), "w", encoding="utf-8") as f:
        json.dump(
            {"run_id": ctx.run_id, "results": [r.to_dict() for r in results]},
            f,
            ensure_ascii=False,
            indent=2,
        )
    results_frame(results).to_csv(os.path.join(out_dir, "results.csv"), index=False)
    logger.info(
        f"Wrote {len(results)} results to {out_dir}",
        extra={"run_id": ctx.run_id, "out_dir": out_dir},
    )
    return out_dir
