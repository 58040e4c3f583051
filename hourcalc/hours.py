#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os
import sys
from typing import List, Optional

from hourcalc import AM, RANGE_SEPARATOR
from hourcalc.clock import current_time_components
from hourcalc.config import load_config
from hourcalc.errors import TimeError, TimeFormatError
from hourcalc.logger import setup_logger
from hourcalc.range_calc import compute_range_difference_hours
from hourcalc.time_parser import parse_time_components
from hourcalc.utils import format_time, format_hours

USAGE = """Calculates the difference in hours between two times in a day.
Usage:
  1. Time range: {prog} "H(H):MM[am/pm]-H(H):MM[am/pm]"
     Example: {prog} "09:00AM-05:30PM"
     Example (implicit AM/PM for range): {prog} "9:00-5:30" (interprets as 9:00AM-5:30PM)
  2. Single time (start time assumed AM, end time is current system time): {prog} "H(H):MM"
     Example: {prog} "09:15" (interprets as 09:15AM - CurrentSystemTime)"""


def print_usage(prog: str):
    print(USAGE.format(prog=prog), file=sys.stderr)


def single_time_range(input_str: str) -> str:
    """Build "start-now" from a bare start time.

    The start is taken as AM and the end is the current local time, so
    the input itself must not carry AM/PM.
    """
    start = parse_time_components(input_str)
    if start.meridiem:
        raise TimeFormatError(input_str, 'meridiem_in_single_time')
    now = current_time_components()
    return (f"{format_time(start.hour12, start.minute, AM)}"
            f"{RANGE_SEPARATOR}"
            f"{format_time(now.hour12, now.minute, now.meridiem)}")


def run(input_str: str, decimal_places: int = 2) -> int:
    """Compute and print the duration for one input, returning the exit code"""
    logger = setup_logger('hours')

    if RANGE_SEPARATOR in input_str:
        range_str = input_str
    else:
        try:
            range_str = single_time_range(input_str)
        except TimeError as e:
            logger.error(f"Single time input rejected: {e}")
            print(f"Error parsing input time '{input_str}': {e}", file=sys.stderr)
            return 1
        print(f"Interpreting single time input '{input_str}' as range: {range_str}", file=sys.stderr)

    try:
        hours = compute_range_difference_hours(range_str)
    except TimeError as e:
        logger.error(f"Range '{range_str}' rejected: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.debug(f"Range '{range_str}' spans {hours} hours")
    print(format_hours(hours, decimal_places))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else 'hourcalc'

    if not argv:
        print_usage(prog)
        return 1
    if argv[0] in ('-h', '--help'):
        print_usage(prog)
        return 0

    config = load_config()
    logger = setup_logger('hours', testing=config['testing_mode'])

    input_str = " ".join(argv).strip()
    logger.info(f"Input: {input_str}")
    return run(input_str, config['decimal_places'])


def cli():
    sys.exit(main())


if __name__ == "__main__":
    cli()
