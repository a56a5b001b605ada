#!/usr/bin/env python3
"""
Algorithm Demonstrations
Main entry point for the quicksort, merge sort and 0/1 knapsack demos.

Each demo is a thin console driver around one kernel in algorithms/.
"""

import argparse
import sys
from typing import List, Optional, TextIO

from algorithms.errors import AlgorithmInputError
from algorithms.knapsack import solve
from algorithms.merge_sort import merge_sort
from algorithms.quicksort import quick_sort
from analysis.events import EventLog, EventType
from models.knapsack_problem import DEMO_KNAPSACK, KnapsackProblem
from utils.input_reader import InputFormatError, load_knapsack_problem, read_int_sequence
from utils.logger import DemoLogger


ALGORITHMS = ['quicksort', 'merge_sort', 'knapsack']


def run_merge_sort(
    input_stream: TextIO,
    logger: DemoLogger,
    event_log: Optional[EventLog] = None
) -> List[int]:
    """
    Console merge sort demo.

    Prompts for a length and that many numbers, then prints them sorted
    under a 'sorted elements' header.

    Args:
        input_stream: Where the numbers are read from
        logger: Logger instance
        event_log: Optional trace log

    Returns:
        The sorted numbers
    """
    numbers = _prompt_numbers(input_stream, logger)
    merge_sort(numbers, 0, len(numbers) - 1, event_log=event_log)
    _print_sorted(numbers, logger)
    return numbers


def run_quicksort(
    input_stream: TextIO,
    logger: DemoLogger,
    event_log: Optional[EventLog] = None
) -> List[int]:
    """Console quicksort demo, same input/output contract as run_merge_sort."""
    numbers = _prompt_numbers(input_stream, logger)
    quick_sort(numbers, event_log=event_log)
    _print_sorted(numbers, logger)
    return numbers


def run_knapsack(
    problem: Optional[KnapsackProblem] = None,
    logger: Optional[DemoLogger] = None,
    event_log: Optional[EventLog] = None
) -> int:
    """
    Knapsack demo.

    Args:
        problem: Instance to solve (defaults to the fixed demo instance)
        logger: Logger instance
        event_log: Optional trace log

    Returns:
        Maximum value achievable
    """
    if problem is None:
        problem = DEMO_KNAPSACK
    if logger is None:
        logger = DemoLogger()

    table = solve(problem, event_log)
    logger.log(f"Maximum value in Knapsack = {table.best_value}")

    if logger.verbose:
        logger.log_table(table.display())
        chosen = table.selected_items()
        chosen_str = ", ".join(
            f"#{i} (weight={problem.weights[i]}, value={problem.values[i]})" for i in chosen
        )
        logger.log(f"Items chosen: {chosen_str if chosen else 'none'}", "debug")

    return table.best_value


def _prompt_numbers(input_stream: TextIO, logger: DemoLogger) -> List[int]:
    logger.log("enter string length")
    numbers = read_int_sequence(input_stream)
    logger.log(f"enter {len(numbers)} numbers")
    return numbers


def _print_sorted(numbers: List[int], logger: DemoLogger) -> None:
    logger.log("\nsorted elements")
    logger.log(" ".join(str(x) for x in numbers))


def _display_trace(event_log: EventLog, logger: DemoLogger) -> None:
    """Display recorded trace events and totals."""
    for event in event_log.events:
        logger.log_event(event)

    logger.log("\nTrace Statistics:")
    logger.log(f"  Total events: {len(event_log.events)}")
    for event_type in EventType:
        count = event_log.count(event_type)
        if count:
            logger.log(f"  {event_type.value}: {count}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the demos."""
    parser = argparse.ArgumentParser(
        description='Quicksort, merge sort and 0/1 knapsack demonstrations'
    )
    parser.add_argument(
        '--algorithm',
        choices=ALGORITHMS,
        required=True,
        help='Demo to run'
    )
    parser.add_argument(
        '--input',
        type=str,
        default=None,
        help='Path to knapsack JSON file (knapsack only; default: built-in demo instance)'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging'
    )
    parser.add_argument(
        '--trace',
        action='store_true',
        help='Record kernel steps and print trace statistics'
    )
    parser.add_argument(
        '--log-file',
        type=str,
        default=None,
        help='Mirror output to this file'
    )

    args = parser.parse_args(argv)

    # Validate arguments
    if args.input and args.algorithm != 'knapsack':
        parser.error('--input is only supported with --algorithm knapsack')

    logger = DemoLogger(verbose=args.verbose, log_file=args.log_file)
    event_log = EventLog() if args.trace else None

    try:
        if args.algorithm == 'quicksort':
            run_quicksort(sys.stdin, logger, event_log)
        elif args.algorithm == 'merge_sort':
            run_merge_sort(sys.stdin, logger, event_log)
        else:
            problem = load_knapsack_problem(args.input) if args.input else None
            run_knapsack(problem, logger, event_log)
    except (InputFormatError, AlgorithmInputError) as e:
        logger.log(str(e), "error")
        logger.close()
        return 1

    if event_log is not None:
        _display_trace(event_log, logger)

    logger.close()
    return 0


if __name__ == '__main__':
    sys.exit(main())
