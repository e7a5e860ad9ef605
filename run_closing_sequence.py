#!/usr/bin/env python3
"""Entry point for computing a metro station closing sequence.

Chains the stages into a single command:
scheme file -> graph XML -> graph service -> result file.

Usage:
    python run_closing_sequence.py --in input.txt --out output.txt
    python run_closing_sequence.py --in input.txt --out output.txt --config config.json
    python run_closing_sequence.py --in input.txt --out output.txt --dry-run --verbose
"""

import argparse
import logging
import sys
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from dacite import DaciteError

from metrograph.config import DEFAULT_CONFIG, MetroConfig, config_from_json, config_hash
from metrograph.metro import MetroError, MetroTask, TaskCode, load_metro_xml

log = logging.getLogger(__name__)


@contextmanager
def stage_timer(name: str) -> Generator[None, None, None]:
    """Context manager that prints stage banners with elapsed time."""
    print(f"\n=== {name} ===")
    log.info("Starting: %s", name)
    t0 = time.monotonic()
    yield
    elapsed = time.monotonic() - t0
    print(f"... done in {elapsed:.3f}s")
    log.info("Completed: %s in %.3fs", name, elapsed)


def load_config(config_path: Path | None) -> MetroConfig:
    if config_path is None:
        return DEFAULT_CONFIG
    return config_from_json(config_path.read_text())


def run_task(task: MetroTask) -> list[int]:
    """Execute a metro task with stage banners.

    Args:
        task: Task bound to its input and output files.

    Returns:
        The 0-based vertex sequence written to the output file.
    """
    log.info("Task: %s", task.task_code.value)
    log.info("Config hash: %s", config_hash(task.config))

    with stage_timer(task.task_code.value):
        sequence = task.perform()

    print(f"\nThe result was written to '{task.output_path}' "
          f"({len(sequence)} stations).")
    return sequence


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Load a metro scheme and compute a station closing sequence that "
            "keeps the open stations connected until the last one is closed."
        ),
        epilog=(
            "If the output file exists it is overwritten. "
            f"Valid task names are: {', '.join(c.value for c in TaskCode)}."
        ),
    )
    parser.add_argument(
        "--task",
        type=str,
        default=TaskCode.CLOSING_SEQUENCE.value,
        help="Task name (default: %(default)s)",
    )
    parser.add_argument(
        "--in",
        dest="input",
        type=Path,
        required=True,
        help="Path to the metro scheme text file",
    )
    parser.add_argument(
        "--out",
        dest="output",
        type=Path,
        required=True,
        help="Path to the result file",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a JSON run config (defaults are used when omitted)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Check the input file and show the plan without solving",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print("Metro closing sequence")

    try:
        task_code = TaskCode.parse(args.task)
    except ValueError as e:
        parser.error(str(e))

    if args.config is not None and not args.config.exists():
        print(f"Error: config file not found: {args.config}", file=sys.stderr)
        return 1
    try:
        config = load_config(args.config)
    except (ValueError, DaciteError) as e:
        print(f"Error: invalid config file {args.config}: {e}", file=sys.stderr)
        return 1

    task = MetroTask(
        task_code=task_code,
        input_path=args.input,
        output_path=args.output,
        config=config,
    )

    if args.dry_run:
        try:
            load_metro_xml(task.input_path, config.input)
        except MetroError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print(f"\nPlan for task {task_code.value}:")
        print(f"  1. Load scheme:  {task.input_path}")
        print(f"  2. Solve:        spanning tree rooted at station "
              f"{config.solver.start_vertex + 1}"
              f"{', verified' if config.solver.verify_sequence else ''}")
        print(f"  3. Write result: {task.output_path} "
              f"(station base {config.output.station_base})")
        print("\n[dry-run] Input file parsed successfully. Exiting.")
        return 0

    try:
        run_task(task)
    except MetroError as e:
        message = f"{e} ({type(e).__name__})"
        if e.__cause__ is not None:
            message += f". Caused by: {e.__cause__} ({type(e.__cause__).__name__})"
        log.error("Task failed: %s", message)
        print(f"Error: {message}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
