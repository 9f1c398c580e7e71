from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from po_split.config.loader import ConfigError, load_config, resolve_config_path
from po_split.errors import PipelineError, RequiredValueMissing
from po_split.logging.init import log_summary, setup_logging
from po_split.models.run_request import RunMode, RunRequest
from po_split.services.orchestrator import run_report, run_split
from po_split.services.summary import (
    render_report,
    render_split_summary_line,
    render_summary_line,
)

"""CLI entrypoint.

Flow:
- Load .env (may set PO_SPLIT_CONFIG) and the optional YAML config
- Build a RunRequest from the arguments and reject missing paths
- Run split or report mode and print the result + SUMMARY line
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1
EXIT_MISSING_VALUE = 2


def _load_env_file(path: Path, override: bool = False) -> None:
    """Load .env using python-dotenv. A broken file only produces a warning."""
    try:
        if path.exists():
            load_dotenv(dotenv_path=path, override=override)
    except (OSError, UnicodeDecodeError) as e:  # pragma: no cover
        print(f"WARNING: failed to load .env via python-dotenv: {e}")


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="po-split",
        description="Split a purchase-order export into per-store files, or report label totals",
    )
    p.add_argument("-i", "--input", type=str, help="Purchase-order CSV export")
    p.add_argument("-o", "--output", type=str, help="Destination directory for per-store files (split mode)")
    p.add_argument("-l", "--list", type=str, help="Text file with comma-separated store numbers")
    p.add_argument(
        "-p",
        "--print-all",
        action="store_true",
        help="Keep quantities of already-tagged items instead of zeroing them",
    )
    p.add_argument("--report", action="store_true", help="Print label totals per store instead of writing files")
    p.add_argument("--config", type=Path, help="YAML config file (default: config/po_split.yml if present)")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def _request_from_args(args: argparse.Namespace) -> RunRequest:
    return RunRequest(
        input_path=args.input,
        list_path=args.list,
        output_path=args.output,
        override_all=args.print_all,
        mode=RunMode.REPORT if args.report else RunMode.SPLIT,
    )


def main(argv: list[str] | None = None) -> int:
    # None only: an explicit [] from tests must not fall back to sys.argv
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    logger = setup_logging(debug=args.debug)

    if args.debug:
        logger.debug("debug mode enabled")

    _load_env_file(Path(".env"))
    try:
        cfg = load_config(resolve_config_path(args.config))
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL
    logger.debug(f"config: {cfg}")

    request = _request_from_args(args)
    try:
        request.validate()
    except RequiredValueMissing as e:
        logger.error(str(e))
        return EXIT_MISSING_VALUE

    if request.mode is RunMode.REPORT:
        try:
            report = run_report(request.input_file, request.list_file, cfg)
        except PipelineError as e:
            logger.error(f"report: {e}")
            return EXIT_FATAL
        for line in render_report(report):
            print(line)
        log_summary(render_summary_line(report))
    else:
        try:
            result = run_split(
                request.input_file, request.output_dir, request.list_file, request.override_all, cfg
            )
        except PipelineError as e:
            logger.error(f"split: {e}")
            return EXIT_FATAL
        log_summary(render_split_summary_line(result))

    logger.info("Success!")
    return EXIT_SUCCESS


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
