#!/usr/bin/env python3
"""
Console front end for the campus navigator.

Usage:
    campus-nav list [--all]
    campus-nav route START END [--via NAME ...] [--mode walking|cycling] [--directions] [--json FILE]
    campus-nav matrix [--all]
    campus-nav check
"""

import argparse
import logging
import sys
from typing import List, Optional

from .campus_data import build_campus_navigator, find_location
from .config import NavigatorConfig
from .connectivity import check_graph_connectivity
from .directions import DirectionsGenerator
from .distance_matrix import compute_distance_matrix
from .exceptions import CampusNavError
from .logging_config import get_logger, log_exception, setup_logging
from .navigation_mode import available_modes

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="campus-nav",
        description="Shortest walking and cycling routes across campus",
    )
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable verbose logging')
    parser.add_argument('--log-file',
                        help='Also write logs to this file (rotated)')

    sub = parser.add_subparsers(dest='command', required=True)

    list_cmd = sub.add_parser('list', help='List campus locations')
    list_cmd.add_argument('--all', action='store_true',
                          help='Include hidden turn points')

    route_cmd = sub.add_parser('route', help='Find the shortest route between two locations')
    route_cmd.add_argument('start', help='Start location name')
    route_cmd.add_argument('end', help='Destination location name')
    route_cmd.add_argument('--via', action='append', default=[], metavar='NAME',
                           help='Ordered waypoint (repeatable)')
    route_cmd.add_argument('--mode', choices=available_modes(), default='walking',
                           help='Navigation mode (default: walking)')
    route_cmd.add_argument('--directions', action='store_true',
                           help='Print turn-by-turn directions')
    route_cmd.add_argument('--json', metavar='FILE',
                           help='Export directions as JSON')

    matrix_cmd = sub.add_parser('matrix', help='Print all-pairs walking distances')
    matrix_cmd.add_argument('--all', action='store_true',
                            help='Include hidden turn points')

    sub.add_parser('check', help='Report walkway graph connectivity')

    return parser


def _cmd_list(navigator, args) -> int:
    for loc in navigator.get_all_locations():
        if loc.is_hidden and not args.all:
            continue
        print(f"{loc.id:>3}  {loc.name:<22} {loc.description}")
    return 0


def _cmd_route(navigator, args) -> int:
    navigator.set_navigation_mode(args.mode)
    locations = navigator.get_all_locations()
    start, end = find_location(locations, args.start), find_location(locations, args.end)
    vias = [find_location(locations, name) for name in args.via]
    path = navigator.find_path(start, end, vias)
    mode = navigator.get_navigation_mode()

    print(path)
    print(f"Distance: {path.total_distance:.1f} m")
    print(f"Estimated time ({mode.description()}): {navigator.get_estimated_time():.1f} min")

    generator = DirectionsGenerator(path, navigator.get_graph())
    if args.directions:
        print()
        print(generator.format_text())
    if args.json:
        generator.export_to_json(args.json)
        logger.info(f"Directions written to {args.json}")
    return 0


def _cmd_matrix(navigator, args) -> int:
    matrix = compute_distance_matrix(navigator)
    rows = [
        (i, loc) for i, loc in enumerate(matrix.locations)
        if args.all or not loc.is_hidden
    ]

    header = " " * 22 + "".join(f"{loc.id:>8}" for _, loc in rows)
    print(header)
    for i, loc in rows:
        cells = []
        for j, _ in rows:
            value = matrix.distances[i, j]
            cells.append(f"{value:>8.0f}" if value != float("inf") else f"{'-':>8}")
        print(f"{loc.id:>3} {loc.name:<18}" + "".join(cells))

    stats = matrix.get_stats()
    print(f"\n{stats.num_paths} reachable pairs, {stats.num_unreachable} unreachable, "
          f"longest {stats.max_distance:.0f} m")
    return 0


def _cmd_check(navigator, args) -> int:
    report = check_graph_connectivity(navigator.get_graph())
    print(report.summary())
    for index, component in enumerate(report.components):
        names = sorted(navigator.get_location_by_id(node).name for node in component)
        print(f"  [{index}] {', '.join(names)}")
    return 0 if report.is_connected else 2


COMMANDS = {
    'list': _cmd_list,
    'route': _cmd_route,
    'matrix': _cmd_matrix,
    'check': _cmd_check,
}


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = NavigatorConfig.from_args(args)
    except CampusNavError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    # Hidden turn points are isolated, so the build-time report is noise unless asked for
    config.check_connectivity = args.verbose

    # Only warnings reach the console unless --verbose; a log file keeps everything at log_level
    setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        detailed=config.detailed_logging,
        console_level=config.log_level if args.verbose else logging.WARNING,
    )

    try:
        navigator = build_campus_navigator(config)
        return COMMANDS[args.command](navigator, args)
    except CampusNavError as e:
        # stderr carries the message; only -v consoles and log files repeat it
        log_exception(logger, f"'{args.command}' failed", e, level=logging.INFO)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
