"""
Standalone CLI for rendering a maze with its best-path tiles marked.

Usage:
    python -m gridpath.visualize maze.txt
    python -m gridpath.visualize maze.txt --output maze_paths.txt
    python -m gridpath.visualize maze.txt --config config.yaml
"""

import argparse
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from .main import load_config
from .maze import MazeError, load_maze, render_maze
from .search import MazeConfig, SolverConfig, WeightedPathfinder


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Render a maze with every tile on a lowest-score path marked 'O'",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m gridpath.visualize inputs/maze.txt
  python -m gridpath.visualize inputs/maze.txt --turn-penalty 1 --output paths.txt
  python -m gridpath.visualize inputs/maze.txt --config config.yaml
        """
    )
    parser.add_argument(
        "maze",
        help="Path to the maze text file"
    )
    parser.add_argument(
        "--output", "-o",
        help="Write the rendering to this file instead of stdout"
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to YAML configuration file (same format as gridpath.main)"
    )
    parser.add_argument(
        "--turn-penalty",
        type=int,
        help="Cost of one 90 degree turn (overrides config)"
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else SolverConfig()
        maze_config = config.maze
        if args.turn_penalty is not None:
            maze_config = MazeConfig(**{**maze_config.model_dump(), "turn_penalty": args.turn_penalty})
    except (FileNotFoundError, ValidationError, yaml.YAMLError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    try:
        maze = load_maze(args.maze, max_errors=config.max_errors)
    except (FileNotFoundError, MazeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    pathfinder = WeightedPathfinder.create(maze, maze_config)
    rendered = render_maze(maze, pathfinder.reconstruct_optimal_cells())

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(rendered + "\n")
        print(f"Rendering written to: {output_path}")
    else:
        print(rendered)

    return 0


if __name__ == "__main__":
    sys.exit(main())
