"""Execution context for demonstration runs."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Any
from pathlib import Path


def new_run_id() -> str:
    return datetime.now().strftime("run-%Y%m%d_%H%M%S")


@dataclass
class RunContext:
    """Run context with run_id, output directory, and extra data."""
    run_id: str = field(default_factory=new_run_id)
    out_dir: Path = Path("demo_runs")
    extra: Dict[str, Any] = field(default_factory=dict)
