from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from linkrecon.adapters.records import JsonFileProvisioningSink, load_records, write_json
from linkrecon.adapters.report import render_report
from linkrecon.app import compare_records, provision_selected
from linkrecon.config import ConfigurationError, configure_logging
from linkrecon.domain.reconciliation import UNKNOWN_SERVER, ReconcileOptions, filter_entries

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from linkrecon.app import CompareResult

log = logging.getLogger(__name__)

EXIT_USAGE = 2
EXIT_FETCH_FAILED = 3


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--records",
        type=Path,
        required=True,
        help="JSON file with network-configuration records (a list of objects)",
    )
    parser.add_argument(
        "--blueprint",
        type=str,
        help="Blueprint id or label (defaults to the first blueprint named in the records)",
    )
    parser.add_argument(
        "--no-fetch",
        action="store_true",
        help="Skip the controller and show the input-only reconciliation",
    )
    parser.add_argument(
        "--no-lag-assign",
        action="store_true",
        help="Do not generate LAG names for LACP links without one",
    )
    parser.add_argument(
        "--lag-start",
        type=int,
        default=900,
        help="First number used for generated LAG names (default: 900)",
    )


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Reconcile network-configuration records against an Apstra blueprint"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    compare = subparsers.add_parser("compare", help="Compare records with the blueprint")
    _add_common_arguments(compare)
    compare.add_argument(
        "--filter",
        type=str,
        help="Only list connections whose switch, interface or server contains this text",
    )
    compare.add_argument(
        "--output",
        type=Path,
        help="Write a JSON report to this file",
    )

    select = subparsers.add_parser(
        "select",
        help="Write selected connections as flat records for provisioning",
    )
    _add_common_arguments(select)
    select.add_argument(
        "--index",
        type=int,
        nargs="+",
        required=True,
        help="Positions in the compare listing to select",
    )
    select.add_argument(
        "--output",
        type=Path,
        required=True,
        help="File receiving the selected records",
    )

    args = parser.parse_args(list(argv))
    if args.lag_start < 0:
        raise ValueError("--lag-start must be non-negative")
    return args


def _options(args: argparse.Namespace) -> ReconcileOptions:
    return ReconcileOptions(auto_assign_lag=not args.no_lag_assign, lag_name_start=args.lag_start)


def _log_listing(result: CompareResult, text: str | None) -> None:
    state = result.state
    entries = filter_entries(state.entries, text) if text else list(state.entries)
    positions = {entry.key: index for index, entry in enumerate(state.entries)}
    for entry in entries:
        comparison = state.comparison(entry)
        log.info(
            "[%s] %s %s:%s -> %s (%s, score=%s%s)",
            positions[entry.key],
            entry.server_display_name or UNKNOWN_SERVER,
            entry.switch_name or "?",
            entry.switch_interface or "?",
            entry.server_interface.preferred or "?",
            comparison.status.value,
            comparison.match_score,
            ", incomplete" if comparison.incomplete else "",
        )
    summary = state.summary
    log.info(
        "Summary: total=%s, complete=%s, partial=%s, no-match=%s, input-only=%s, "
        "fetched-only=%s, incomplete=%s",
        summary.total,
        summary.complete_matches,
        summary.partial_matches,
        summary.no_matches,
        summary.input_only,
        summary.fetched_only,
        summary.incomplete,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
    except ValueError:
        configure_logging()
        log.exception("CLI validation error")
        sys.exit(EXIT_USAGE)

    configure_logging(verbose=parsed_args.verbose)

    try:
        records = load_records(parsed_args.records)
        if parsed_args.command == "compare":
            result = compare_records(
                records,
                blueprint=parsed_args.blueprint,
                fetch=not parsed_args.no_fetch,
                options=_options(parsed_args),
            )
            _log_listing(result, parsed_args.filter)
            if parsed_args.output is not None:
                write_json(parsed_args.output, render_report(result.state))
                log.info("Report written to %s", parsed_args.output)
        elif parsed_args.command == "select":
            result, outcomes = provision_selected(
                records,
                indices=parsed_args.index,
                sink=JsonFileProvisioningSink(parsed_args.output),
                blueprint=parsed_args.blueprint,
                fetch=not parsed_args.no_fetch,
                options=_options(parsed_args),
            )
            log.info("Selected %s record(s)", len(outcomes))
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except ConfigurationError as exc:
        log.error("%s", exc)  # noqa: TRY400
        if exc.variables:
            log.error("Set %s in the environment or a .env file", ", ".join(exc.variables))
        sys.exit(EXIT_USAGE)
    except Exception:
        log.exception("Fatal error during reconciliation")
        sys.exit(1)

    if result.fetch is not None and result.fetch_failed:
        log.error("Fetch from controller failed: %s", result.fetch.error)
        sys.exit(EXIT_FETCH_FAILED)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
