import sys
import os
import time
import random

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from cave_maze.core.params import MazeParams
from cave_maze.core.decorate import prepare_canvas
from cave_maze.core.complexity import MazeStats
from cave_maze.algo.dfs import gen_maze
from cave_maze.algo.rooms import gen_rooms
from cave_maze.algo.solvers import solve_maze

def benchmark_size(width: int, height: int):
    print(f"\n--- Benchmarking {width}x{height} ({width*height:,} tiles) ---")
    params = MazeParams(width, height, room_count=max(1, width // 10))
    rng = random.Random(42)

    grid = prepare_canvas(rng, params)

    # 1. Generation
    gen_start = time.time()
    exit_pos = gen_maze(grid, rng, params)
    gen_rooms(grid, rng, params)
    gen_time = time.time() - gen_start
    print(f"Generation Time: {gen_time:.4f}s")
    print(f"Speed: {(width*height)/gen_time:,.0f} tiles/sec")

    stats = MazeStats.calculate_stats(grid, params)
    print(f"Edges: {stats['edges']} | Dead ends: {stats['dead_ends']}")

    # 2. Solving
    solve_start = time.time()
    paths = solve_maze(grid, exit_pos, params)
    solve_time = time.time() - solve_start
    print(f"Solve Time: {solve_time:.4f}s ({len(paths)} nodes)")

def run_suite():
    sizes = [
        (3, 3),
        (25, 25),
        (50, 50),
        (100, 100)
    ]

    for w, h in sizes:
        benchmark_size(w, h)

if __name__ == "__main__":
    run_suite()
