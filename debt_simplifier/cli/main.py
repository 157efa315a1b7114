from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from typing import Optional

from debt_simplifier.cli.loader import RecordFileError, load_records
from debt_simplifier.cli.render import render_graph
from debt_simplifier.config import settings
from debt_simplifier.logging import configure_logging
from debt_simplifier.services.balances import graph_represents_balances
from debt_simplifier.services.builder import build_graph
from debt_simplifier.services.examples import SAMPLE_SETS
from debt_simplifier.services.graph import Graph
from debt_simplifier.services.paths import CycleDetection
from debt_simplifier.services.records import ExpenseRecord, InvalidRecordError
from debt_simplifier.services.reducer import ReductionLimitError, reduce_graph

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_WRONG_ANSWER = 1
EXIT_BAD_INPUT = 2


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="debt-simplifier",
        description="Reduce shared expenses to direct debts between participants.",
    )
    parser.add_argument("files", nargs="*", help="JSON files, each an array of {payer, amount, participants} records")
    parser.add_argument("--sample", type=int, default=None, help="only run this built-in sample set (0-based)")
    parser.add_argument(
        "--cycle-detection",
        choices=[c.value for c in CycleDetection],
        default=settings.cycle_detection,
    )
    parser.add_argument("--max-sweeps", type=_positive_int, default=settings.reduce_max_sweeps)
    parser.add_argument("--json", action="store_true", help="print each reduced graph as JSON")
    parser.add_argument("--log-level", default=settings.log_level)
    return parser


def _record_sets(args: argparse.Namespace) -> list[tuple[int, list[ExpenseRecord]]]:
    if args.files:
        return list(enumerate(load_records(path) for path in args.files))
    if args.sample is None:
        return list(enumerate(SAMPLE_SETS))
    if not 0 <= args.sample < len(SAMPLE_SETS):
        raise RecordFileError(f"No sample set {args.sample}; choose 0..{len(SAMPLE_SETS) - 1}")
    return [(args.sample, SAMPLE_SETS[args.sample])]


def _print_graph(index: int, graph: Graph, as_json: bool) -> None:
    if as_json:
        debts = {debtor: creditors for debtor, creditors in graph.as_dict().items() if creditors}
        print(json.dumps({"set": index, "debts": debts}, sort_keys=True))
        return
    print(f"=== For Set {index} ===")
    text = render_graph(graph)
    if text:
        print(text)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        detection = CycleDetection(args.cycle_detection)
    except ValueError:
        logger.error("Unknown cycle detection mode %r; choose one of: %s", args.cycle_detection, ", ".join(c.value for c in CycleDetection))
        return EXIT_BAD_INPUT

    try:
        record_sets = _record_sets(args)
    except RecordFileError as e:
        logger.error("%s", e)
        return EXIT_BAD_INPUT

    status = EXIT_OK
    for index, records in record_sets:
        try:
            graph = build_graph(records)
            reduce_graph(graph, detection=detection, max_sweeps=args.max_sweeps)
        except InvalidRecordError as e:
            logger.error("Set %s: %s", index, e)
            return EXIT_BAD_INPUT
        except ReductionLimitError as e:
            logger.error("Set %s: %s", index, e)
            return EXIT_WRONG_ANSWER

        _print_graph(index, graph, args.json)
        if not graph_represents_balances(graph, records):
            logger.error("Wrong answer for set %s: reduced graph does not match the records", index)
            status = EXIT_WRONG_ANSWER
    return status


if __name__ == "__main__":
    sys.exit(main())
