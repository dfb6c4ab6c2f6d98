"""
Main entry point for the gridpath solvers.

Usage:
    python -m gridpath.main maze --input maze.txt
    python -m gridpath.main maze -i maze.txt --config config.yaml --render --verbose
    python -m gridpath.main race -i track.txt --cheat-duration 2 --min-saving 20
    python -m gridpath.main maze -i maze.txt --verbose --log-file search.log
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import ValidationError

from .maze import MazeError, load_maze, render_maze, filter_cascading_errors
from .search import (
    NO_PATH,
    RaceConfig,
    SolverConfig,
    WeightedPathfinder,
    RaceTrack,
)
from .utils.logger import setup_logger


def load_config(config_path: str) -> SolverConfig:
    """Load solver configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return SolverConfig(**(data or {}))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridpath",
        description="Solve text mazes: weighted turn-penalty search and race track shortcuts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  log_level: INFO
  maze:
    step_cost: 1
    turn_penalty: 1000
    start_facing: E
  race:
    cheat_duration: 20
    min_saving: 100
        """
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--input", "-i",
        required=True,
        help="Path to the maze text file"
    )
    common.add_argument(
        "--config", "-c",
        help="Path to YAML configuration file"
    )
    common.add_argument(
        "--output", "-o",
        help="Path to save the result as JSON"
    )
    common.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print extra statistics and debug logging"
    )
    common.add_argument(
        "--log-file",
        help="Also write log records to this file"
    )

    maze = subparsers.add_parser(
        "maze",
        parents=[common],
        help="Lowest score with turn penalties and tiles on best paths"
    )
    maze.add_argument(
        "--render",
        action="store_true",
        help="Print the maze with best-path tiles marked 'O'"
    )

    race = subparsers.add_parser(
        "race",
        parents=[common],
        help="Shortest race track path and shortcut count"
    )
    race.add_argument(
        "--cheat-duration",
        type=int,
        help="Maximum shortcut length (overrides config)"
    )
    race.add_argument(
        "--min-saving",
        type=int,
        help="Minimum steps a shortcut must save to be counted (overrides config)"
    )

    return parser


def _format_score(score: int) -> str:
    return "no path found" if score == NO_PATH else str(score)


def _save(result, output: Optional[str]) -> None:
    if not output:
        return
    output_path = Path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(result.model_dump_json(indent=2))


def run_maze(args: argparse.Namespace, config: SolverConfig) -> int:
    maze = load_maze(args.input, max_errors=config.max_errors)
    pathfinder = WeightedPathfinder.create(maze, config.maze)
    result = pathfinder.solve(source=args.input)

    print(f"Lowest score: {_format_score(result.lowest_score)}")
    print(f"Tiles on best paths: {result.optimal_tiles}")
    if args.verbose:
        print(f"Best paths: {result.optimal_paths}")
        print(f"States expanded: {result.states_expanded}")

    if args.render:
        print()
        print(render_maze(maze, pathfinder.reconstruct_optimal_cells()))

    _save(result, args.output)
    return 0


def run_race(args: argparse.Namespace, config: SolverConfig) -> int:
    race_config = config.race
    overrides = {}
    if args.cheat_duration is not None:
        overrides["cheat_duration"] = args.cheat_duration
    if args.min_saving is not None:
        overrides["min_saving"] = args.min_saving
    if overrides:
        race_config = RaceConfig(**{**race_config.model_dump(), **overrides})

    maze = load_maze(args.input, max_errors=config.max_errors)
    result = RaceTrack(maze=maze).solve(race_config, source=args.input)

    print(f"Shortest path: {_format_score(result.shortest_path)}")
    print(f"Shortcuts saving at least {result.min_saving}: {result.shortcuts}")
    if args.verbose:
        for saving, n in result.savings.items():
            print(f"  {n} shortcut{'s' if n > 1 else ''} saving {saving}")

    _save(result, args.output)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config) if args.config else SolverConfig()
    except (FileNotFoundError, ValidationError, yaml.YAMLError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    setup_logger(
        "gridpath",
        log_file=Path(args.log_file) if args.log_file else None,
        level="DEBUG" if args.verbose else config.log_level,
    )

    try:
        if args.command == "maze":
            return run_maze(args, config)
        return run_race(args, config)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except MazeError as e:
        print(f"Error parsing {args.input}:", file=sys.stderr)
        for err in filter_cascading_errors(e.errors, max_errors=config.max_errors):
            print(f"  [{err.code}] {err.message}", file=sys.stderr)
        return 1
    except ValidationError as e:
        print(f"Invalid option: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
