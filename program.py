import argparse
import sys
import time

from closest_pair import ClosestPairSolver
from closest_pair_naive import NaiveClosestPair
from convex_hull import GiftWrappingHull
from convex_hull_naive import MonotoneChainHull
from point_set import DISTRIBUTIONS, PointSet, generate_random_points, load_points, save_points


def timed(func, *args):
    start_time = time.perf_counter()
    result = func(*args)
    return result, time.perf_counter() - start_time


def describe_points(points: PointSet) -> str:
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    report = f"Number of points: {len(points)}\n"
    if len(points) > 0:
        report += f"X range: [{min(xs):.2f}, {max(xs):.2f}]\n"
        report += f"Y range: [{min(ys):.2f}, {max(ys):.2f}]\n"
    return report


def report_closest_pair(points: PointSet) -> str:
    pair, execution_time = timed(ClosestPairSolver().solve, points.snapshot())
    return (
        f"Closest pair: {pair}\n"
        f"Distance: {pair.distance:.2f}\n"
        f"Execution time: {execution_time:.6f} sec\n"
    )


def report_convex_hull(points: PointSet) -> str:
    hull, execution_time = timed(GiftWrappingHull().solve, points.snapshot())
    report = f"Hull vertices: {len(hull)}\n"
    for i, p in enumerate(hull.closed()):
        report += f"{i:4d}: {p.x:.2f} {p.y:.2f}\n"
    report += f"Execution time: {execution_time:.6f} sec\n"
    return report


def compare_algorithms(points: PointSet) -> str:
    snapshot = points.snapshot()
    report = f"{'Algorithm':<28}{'Time (sec)':>14}{'Points/sec':>14}\n"

    def row(name, execution_time):
        speed = len(snapshot) / execution_time if execution_time > 0 else 0
        return f"{name:<28}{execution_time:>14.6f}{speed:>14.0f}\n"

    fast_pair, fast_time = timed(ClosestPairSolver().solve, snapshot)
    naive_pair, naive_time = timed(NaiveClosestPair().solve, snapshot)
    report += row("Closest pair (divide)", fast_time)
    report += row("Closest pair (naive)", naive_time)

    hull, hull_time = timed(GiftWrappingHull().solve, snapshot)
    chain, chain_time = timed(MonotoneChainHull().solve, snapshot)
    report += row("Convex hull (gift wrap)", hull_time)
    report += row("Convex hull (monotone)", chain_time)

    pairs_agree = fast_pair.distance == naive_pair.distance
    hulls_agree = set(hull) == set(chain)
    report += f"\nClosest pair distances agree: {'yes' if pairs_agree else 'no'}\n"
    report += f"Hull vertex sets agree: {'yes' if hulls_agree else 'no'}\n"
    return report


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Closest pair and convex hull of a plane point set")
    commands = parser.add_subparsers(dest="command", required=True)

    solve = commands.add_parser("solve", help="solve a point file")
    solve.add_argument("filename")
    solve.add_argument("--algorithm", choices=["closest", "hull", "both"], default="both")

    compare = commands.add_parser("compare", help="time fast and naive algorithms on a point file")
    compare.add_argument("filename")

    generate = commands.add_parser("generate", help="generate random points")
    generate.add_argument("n", type=int)
    generate.add_argument("--distribution", choices=DISTRIBUTIONS, default="uniform")
    generate.add_argument("--seed", type=int, default=42)
    generate.add_argument("--output", help="point file to write, stdout by default")

    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        if args.command == "generate":
            points = generate_random_points(args.n, args.distribution, seed=args.seed)
            if args.output:
                save_points(args.output, points)
                print(f"Generated {len(points)} points ({args.distribution}) into {args.output}")
            else:
                print(len(points))
                for p in points:
                    print(f"{float(p.x)!r} {float(p.y)!r}")
            return 0

        points = load_points(args.filename)
        print(f"File: {args.filename}")
        print(describe_points(points))
        if args.command == "compare":
            print(compare_algorithms(points))
            return 0

        if args.algorithm in ("closest", "both"):
            print(report_closest_pair(points))
        if args.algorithm in ("hull", "both"):
            print(report_convex_hull(points))
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
