import argparse
import sys
import os
import time
import logging

# Ensure project root is in path so we can import 'maze_core' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_core.core.complexity import MazeAnalyzer
from maze_core.core.errors import MazeError
from maze_core.maze import new_maze, level_size

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def build_parser():
    parser = argparse.ArgumentParser(description="Maze Core: perfect maze generator and solver")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate and solve a new maze")
    gen_parser.add_argument("--width", type=int, default=10, help="Maze Width")
    gen_parser.add_argument("--height", type=int, default=10, help="Maze Height")
    gen_parser.add_argument("--level", type=int, default=None, help="Difficulty level (overrides width/height)")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--show-path", action="store_true", help="Print the solution coordinates")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time generation and solving")
    bench_parser.add_argument("--size", type=int, default=500, help="Benchmark size")
    bench_parser.add_argument("--seed", type=int, default=123, help="Random Seed")

    return parser

def cmd_generate(args, logger):
    width, height = args.width, args.height
    if args.level is not None:
        width = height = level_size(args.level)
        logger.info(f"Level {args.level}: {width}x{height}")

    logger.info(f"Generating {width}x{height} maze (seed={args.seed})...")
    maze = new_maze(width, height, seed=args.seed)

    stats = MazeAnalyzer.calculate_stats(maze.grid)
    logger.info(f"Stats: {stats}")
    logger.info(f"Solution length: {len(maze.path)}")

    if args.show_path:
        print(" ".join(f"{x},{y}" for x, y in maze.path.sequence()))

def cmd_benchmark(args, logger):
    logger.info(f"Running benchmark (Size: {args.size}x{args.size})...")
    t0 = time.time()
    maze = new_maze(args.size, args.size, seed=args.seed)
    duration = time.time() - t0

    cells = args.size * args.size
    print(f"\n{'CELLS':<12} | {'TIME (s)':<10} | {'CELLS/SEC':<12} | {'PATH LEN':<10}")
    print("-" * 52)
    print(f"{cells:<12,} | {duration:<10.4f} | {cells / max(duration, 1e-9):<12,.0f} | {len(maze.path):<10}")

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("maze_core")

    if args.command is None:
        parser.print_help()
        return 0

    logger.info(f"Running command: {args.command}")

    try:
        if args.command == "generate":
            cmd_generate(args, logger)
        elif args.command == "benchmark":
            cmd_benchmark(args, logger)
    except MazeError as e:
        logger.error(str(e))
        return 2
    return 0

if __name__ == "__main__":
    sys.exit(main())
