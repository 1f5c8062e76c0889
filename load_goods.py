# load_goods.py
# Asks for goods on the terminal, loads them onto the carrier, prints the summary.
# Optionally compares the first-fit load with the best possible one.

import argparse
import logging
import sys

from cargo_loader.carrier import Carrier
from cargo_loader.config import (
    DEFAULT_CARRIER_CAPACITY,
    DEFAULT_CARRIER_TYPE,
    DEFAULT_CURRENCY,
    DEFAULT_WORKER_NAME,
    DEFAULT_WORKER_RATE,
    RunConfig,
)
from cargo_loader.console import ConsolePrompter, collect_goods
from cargo_loader.errors import CargoLoaderError, InputAborted
from cargo_loader.models import Worker
from cargo_loader.optimizer import compare_with_first_fit
from cargo_loader.reporting import comparison_block, full_report
from cargo_loader.transaction import LoadingTransaction

logger = logging.getLogger("load_goods")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Load goods onto a carrier and print an economic summary."
    )

    # Who does the loading
    parser.add_argument(
        "--worker-name",
        default=DEFAULT_WORKER_NAME,
        help="Name of the loader."
    )

    parser.add_argument(
        "--worker-rate",
        type=float,
        default=DEFAULT_WORKER_RATE,
        help="Loading cost per kg."
    )

    # The vehicle
    parser.add_argument(
        "--carrier-type",
        default=DEFAULT_CARRIER_TYPE,
        help="Kind of vehicle being loaded."
    )

    parser.add_argument(
        "--capacity",
        type=float,
        default=DEFAULT_CARRIER_CAPACITY,
        help="Maximum weight the carrier can hold (kg)."
    )

    parser.add_argument(
        "--currency",
        default=DEFAULT_CURRENCY,
        help="Currency label used in the report."
    )

    parser.add_argument(
        "--compare-optimal",
        action="store_true",
        help="Also show the most valuable load that would have fit."
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print debug logging to stderr."
    )

    return parser.parse_args(argv)


def run(cfg, staged, compare_optimal=False, print_fn=print):
    """
    Load staged goods and print the report. Returns the LoadingSummary.
    """
    worker = Worker(cfg.worker_name, cfg.worker_rate)
    carrier = Carrier(cfg.carrier_type, cfg.carrier_capacity)

    transaction = LoadingTransaction(worker, carrier)
    attempts = transaction.run(staged)
    summary = transaction.summarize()

    print_fn(full_report(attempts, summary, cfg.currency))

    if compare_optimal:
        comparison = compare_with_first_fit(summary, staged, cfg.carrier_capacity)
        print_fn("")
        print_fn(comparison_block(comparison, cfg.currency))

    return summary


def main(argv=None, input_fn=input, print_fn=print):
    # 1. Read command-line arguments
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 2. Fixed run settings
    try:
        cfg = RunConfig.from_args(args)
    except CargoLoaderError as e:
        print_fn(f"ERROR: {e}")
        return 2

    # 3. Ask for the goods
    prompter = ConsolePrompter(input_fn=input_fn, print_fn=print_fn)
    try:
        staged = collect_goods(prompter)
    except InputAborted as e:
        logger.info("Input aborted: %s", e)
        print_fn("")
        print_fn(f"ERROR: {e}")
        return 1

    # 4. Load and report
    run(cfg, staged, compare_optimal=args.compare_optimal, print_fn=print_fn)
    return 0


if __name__ == "__main__":
    sys.exit(main())
