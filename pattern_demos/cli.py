import argparse, sys
from pathlib import Path
from typing import List, Optional

from pattern_demos.config import DEFAULT_OUT_DIR, get_env, get_timeout
from pattern_demos.context import RunContext
from pattern_demos.exceptions import ConfigurationError, NotFoundError
from pattern_demos.logging_config import get_logger, setup_logging
from pattern_demos.patterns.registry import get_registry, list_registered
from pattern_demos.report.export import write_outputs
from pattern_demos.report.render import render_all
from pattern_demos.runner.execute import run_all
import pattern_demos.patterns  # noqa: F401

logger = get_logger("cli")

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pattern-demos", description="Run design pattern demonstrations"
    )
    p.add_argument("name", nargs="?", help="Example to run (default: run all)")
    p.add_argument("--list", action="store_true", help="List registered examples and exit")
    p.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Per-example timeout in seconds, 0 disables (or set PATTERN_DEMOS_TIMEOUT)",
    )
    p.add_argument(
        "--export",
        action="store_true",
        help=f"Write results.json and results.csv (to {DEFAULT_OUT_DIR} unless --out is given)",
    )
    p.add_argument("--out", type=str, default=None, help="Output directory for results; implies --export")
    p.add_argument("--log-level", type=str, default=None, help="DEBUG, INFO, WARNING, ERROR")
    p.add_argument("--json-logs", action="store_true", help="Emit structured JSON log records")
    p.add_argument(
        "--log-dir",
        type=str,
        default=None,
        help="Also write rotating log files here (or set PATTERN_DEMOS_LOG_DIR)",
    )
    return p


def _resolve_timeout(args) -> Optional[float]:
    if args.timeout is None:
        return get_timeout()
    return args.timeout if args.timeout > 0 else None


def _list_examples() -> int:
    for item in list_registered():
        print(f"{item['name']}: {item['description']}")
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logging(
        level=args.log_level,
        log_dir=args.log_dir or get_env("PATTERN_DEMOS_LOG_DIR"),
        json_format=True if args.json_logs else None,
    )

    registry = get_registry()
    registry.freeze()

    if args.list:
        return _list_examples()

    try:
        timeout = _resolve_timeout(args)
    except ConfigurationError as e:
        print(str(e), file=sys.stderr)
        return EXIT_USAGE

    if args.name is None:
        examples = registry.all()
    else:
        try:
            examples = [registry.get(args.name)]
        except NotFoundError as e:
            print(str(e), file=sys.stderr)
            return EXIT_USAGE

    results = run_all(examples, timeout=timeout)
    print(render_all(results))

    if args.export or args.out:
        ctx = RunContext(out_dir=Path(args.out or DEFAULT_OUT_DIR))
        out_dir = write_outputs(ctx, results)
        print(f"Results written to {out_dir}", file=sys.stderr)

    return EXIT_OK if all(r.succeeded for r in results) else EXIT_FAILED


if __name__ == "__main__":
    sys.exit(main())
