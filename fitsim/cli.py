"""
Command-line interface for FitSim.

Reads a chunks file (initial free blocks) and a sizes file (allocation
requests), runs every placement strategy and prints one report per
strategy.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .codecs.sizes import load_sizes
from .core.harness import BenchmarkHarness
from .core.registry import parse_strategy
from .exceptions import FitSimError
from .report import format_json, format_results
from .types.descriptors import DEFAULT_STRATEGY_ORDER, SimulationConfig
from .types.enums import AllocationStrategy, OutputFormat, ZeroSizePolicy

logger = logging.getLogger(__name__)


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description='Benchmark free-list placement strategies'
    )
    parser.add_argument('-c', '--chunks', type=str,
                        help='File with one initial free block size per line')
    parser.add_argument('-s', '--sizes', type=str,
                        help='File with one allocation request size per line')
    parser.add_argument('--strategy', action='append', default=None,
                        choices=[s.cli_name for s in AllocationStrategy],
                        help='Strategy to run (repeatable, default: all five)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for random fit (default: fresh entropy per process)')
    parser.add_argument('--zero-size', choices=['scan', 'trivial'], default='scan',
                        help='How zero-size requests are serviced')
    parser.add_argument('--format', choices=['text', 'json'], default='text',
                        help='Report format')
    parser.add_argument('--output', type=str, help='Write the report to this file')
    parser.add_argument('--dump-free-list', action='store_true',
                        help='Print the final free list after each strategy')
    parser.add_argument('--track-memory', action='store_true',
                        help='Record process memory change during each run')
    parser.add_argument('--no-color', action='store_true',
                        help='Disable bold strategy names')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    return parser


def build_config(args: argparse.Namespace) -> SimulationConfig:
    if args.strategy:
        strategies = tuple(parse_strategy(name) for name in args.strategy)
    else:
        strategies = DEFAULT_STRATEGY_ORDER

    return SimulationConfig(
        strategies=strategies,
        seed=args.seed,
        zero_size_policy=ZeroSizePolicy[args.zero_size.upper()],
        track_memory=args.track_memory
    )


def main(argv: Optional[List[str]] = None) -> int:
    prog = sys.argv[0] if sys.argv and sys.argv[0] else 'fitsim'
    parser = build_parser(prog)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s'
    )

    if not args.chunks or not args.sizes:
        print(f"Usage: {parser.prog} -c <chunks file> -s <sizes file>")
        return 1

    try:
        block_sizes = load_sizes(args.chunks)
        request_sizes = load_sizes(args.sizes)
        config = build_config(args)
        harness = BenchmarkHarness(block_sizes, request_sizes, config)
    except FitSimError as e:
        logger.debug("Setup failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    output_format = OutputFormat[args.format.upper()]

    if args.output:
        results = harness.run_all()
        if output_format is OutputFormat.JSON:
            report = format_json(results, config, dump_free_list=args.dump_free_list)
        else:
            report = format_results(results, color=False, dump_free_list=args.dump_free_list)
        try:
            with open(args.output, 'w') as f:
                f.write(report)
        except OSError as e:
            print(f"Error: cannot write report to {args.output}: {e}", file=sys.stderr)
            return 1
        return 0

    if output_format is OutputFormat.JSON:
        print(format_json(harness.run_all(), config, dump_free_list=args.dump_free_list))
        return 0

    color = not args.no_color
    for result in harness.iter_results():
        sys.stdout.write(format_results([result], color=color, dump_free_list=args.dump_free_list))
        sys.stdout.flush()

    return 0


if __name__ == '__main__':
    sys.exit(main())
