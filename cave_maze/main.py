import argparse
import sys
import os
import logging

# Ensure project root is in path so we can import 'cave_maze' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

BIAS_CHOICES = ["none", "horizontal", "vertical", "very-horizontal", "very-vertical"]


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Cave Maze: maze generator and path solver")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate and solve a new maze")
    gen_parser.add_argument("--width", type=int, default=7, help="Maze Width")
    gen_parser.add_argument("--height", type=int, default=5, help="Maze Height")
    gen_parser.add_argument("--rooms", type=int, default=2, help="Number of open rooms")
    gen_parser.add_argument("--bias", type=str, default="none", choices=BIAS_CHOICES, help="Directional bias of passages")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Run performance suite")
    bench_parser.add_argument("--size", type=int, default=100, help="Benchmark size")
    bench_parser.add_argument("--seed", type=int, default=123, help="Random Seed")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("cave_maze")

    if args.command is None:
        parser.print_help()
        return

    logger.info(f"Running command: {args.command}")

    import random
    from cave_maze.core.params import DirectionalBias, MazeParams
    from cave_maze.core.complexity import MazeStats
    from cave_maze.maze import build_maze

    if args.command == "generate":
        params = MazeParams.clamped(args.width, args.height, args.rooms, DirectionalBias(args.bias))
        if (params.width, params.height) != (args.width, args.height):
            logger.warning(f"Maze size clamped to {params.width}x{params.height}")

        logger.info(f"Generating {params.width}x{params.height} maze "
                    f"({params.room_count} rooms, bias={params.bias.value})...")

        maze = build_maze(random.Random(args.seed), params)

        stats = MazeStats.calculate_stats(maze.tiles, params)
        logger.info(f"Stats: {stats}")

        trail = maze.trail()
        print(f"Exit: ({maze.exit.x}, {maze.exit.y})")
        print(f"Reachable tiles: {len(maze.paths)}")
        print(f"Trail length from centre: {len(trail)}")

    elif args.command == "benchmark":
        import time

        params = MazeParams.clamped(args.size, args.size, args.size // 10)
        logger.info(f"Running benchmark (Size: {params.width}x{params.height})...")

        print(f"\n{'BIAS':<16} | {'TIME (s)':<10} | {'H/V RATIO':<10} | {'DEAD ENDS':<10}")
        print("-" * 56)

        for bias in DirectionalBias:
            biased = MazeParams(params.width, params.height, params.room_count, bias)

            t_start = time.time()
            maze = build_maze(random.Random(args.seed), biased)
            duration = time.time() - t_start

            stats = MazeStats.calculate_stats(maze.tiles, biased)
            print(f"{bias.value:<16} | {duration:<10.4f} | {stats['bias_ratio']:<10.2f} | {stats['dead_ends']:<10}")


if __name__ == "__main__":
    main()
