"""
Benchmark the in-place sorts on random integers.

Run with something like:
    sort-benchmark --algorithm merge --algorithm quick-hoare --sizes 10000 100000 --verify
    sort-benchmark --seed 7 --svg docs/img/performance_comparison.svg
"""

from __future__ import annotations

import argparse
import math
import random
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from count_sort import CountSortOutcome
from sorts import ALGORITHMS, COUNTING, get_algorithm

DEFAULT_ALGORITHMS = ("merge", "quick-lomuto", "quick-hoare", "heap", "count")
DEFAULT_SIZES = (1_000, 10_000, 100_000)
DEFAULT_MAX_VALUE = 10**6

COLORS = ("#d62728", "#1f77b4", "#2ca02c", "#ff7f0e", "#9467bd", "#8c564b", "#e377c2", "#7f7f7f", "#bcbd22", "#17becf")

Timings = Dict[str, List[Tuple[int, float]]]


def random_input(n: int, max_value: int, rng: random.Random) -> List[int]:
    return [rng.randint(0, max_value) for _ in range(n)]


def time_sort(sort_fn: Callable[[List[int]], object], data: Sequence[int]) -> Tuple[float, List[int], object]:
    """Sort a copy of ``data``; return elapsed seconds, the copy and the sort's return value."""
    A = list(data)
    start = time.perf_counter()
    result = sort_fn(A)
    end = time.perf_counter()
    return end - start, A, result


def run_benchmark(
    names: Sequence[str],
    sizes: Sequence[int],
    *,
    seed: Optional[int] = None,
    max_value: int = DEFAULT_MAX_VALUE,
    verify: bool = False,
) -> Timings:
    """Time every named sort on the same random input for each size.

    Counting sorts that find the input inapplicable are left out of the
    results for that size.
    """
    rng = random.Random(seed)
    results: Timings = {name: [] for name in names}
    for n in sizes:
        data = random_input(n, max_value, rng)
        expected = sorted(data) if verify else None
        for name in names:
            elapsed, out, outcome = time_sort(get_algorithm(name), data)
            if name in COUNTING and outcome is CountSortOutcome.INAPPLICABLE:
                continue
            if expected is not None and out != expected:
                raise AssertionError("Result is not sorted correctly")
            results[name].append((n, elapsed))
    return results


def log10(x: float) -> float:
    if x <= 0:
        raise ValueError("Values must be positive for log10 axis")
    return math.log10(x)


def render_performance_svg(data: Timings, title: str = "Sort Performance (log-log)") -> str:
    """Return a log-log SVG line chart of the timings, one series per algorithm."""
    series_data = {name: series for name, series in data.items() if series}
    if not series_data:
        raise ValueError("No timings to plot")

    all_n = [n for series in series_data.values() for n, _ in series]
    all_t = [t for series in series_data.values() for _, t in series]

    # Axis ranges on log-log scale
    x_min = math.floor(log10(min(all_n)))
    x_max = max(math.ceil(log10(max(all_n))), x_min + 1)
    y_min = min(log10(t) for t in all_t)
    y_max = max(log10(t) for t in all_t)
    y_pad = 0.2
    y_min -= y_pad
    y_max += y_pad

    width, height = 900, 560
    margin_left, margin_bottom, margin_top, margin_right = 120, 80, 60, 40

    def scale_x(n: float) -> float:
        return margin_left + (log10(n) - x_min) / (x_max - x_min) * (width - margin_left - margin_right)

    def scale_y(t: float) -> float:
        return height - margin_bottom - (log10(t) - y_min) / (y_max - y_min) * (height - margin_bottom - margin_top)

    parts = []
    parts.append(f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" viewBox="0 0 {width} {height}">')
    parts.append('<style>text { font-family: sans-serif; font-size: 13px; }</style>')

    # Axes
    x0, y0 = margin_left, height - margin_bottom
    x1 = width - margin_right
    parts.append(f'<line x1="{x0}" y1="{y0}" x2="{x1}" y2="{y0}" stroke="black" stroke-width="1.5" />')
    parts.append(f'<line x1="{x0}" y1="{margin_top}" x2="{x0}" y2="{y0}" stroke="black" stroke-width="1.5" />')

    # X ticks (powers of ten covering the sizes)
    for e in range(x_min, x_max + 1):
        n = 10**e
        x = scale_x(n)
        parts.append(f'<line x1="{x}" y1="{y0}" x2="{x}" y2="{y0 + 6}" stroke="black" />')
        parts.append(f'<text x="{x}" y="{y0 + 24}" text-anchor="middle">{n:,}</text>')

    # Y ticks (times, logarithmic)
    for e in range(math.floor(y_min), math.ceil(y_max) + 1):
        t = 10.0**e
        if log10(t) < y_min or log10(t) > y_max:
            continue
        y = scale_y(t)
        parts.append(f'<line x1="{x0 - 6}" y1="{y}" x2="{x0}" y2="{y}" stroke="black" />')
        parts.append(f'<text x="{x0 - 10}" y="{y + 4}" text-anchor="end">{t:g}s</text>')

    # Title and axis labels
    parts.append(f'<text x="{width/2}" y="{margin_top - 20}" text-anchor="middle" font-size="18">{title}</text>')
    parts.append(f'<text x="{(x0 + x1)/2}" y="{height - 20}" text-anchor="middle">Input size (n)</text>')
    parts.append(f'<text x="25" y="{(margin_top + y0)/2}" text-anchor="middle" transform="rotate(-90 25 {(margin_top + y0)/2})">Time (seconds, log scale)</text>')

    colors = {name: COLORS[i % len(COLORS)] for i, name in enumerate(series_data)}

    # Series plots
    for name, series in series_data.items():
        color = colors[name]
        coords = [f"{scale_x(n):.2f},{scale_y(t):.2f}" for n, t in series]
        parts.append(f'<polyline fill="none" stroke="{color}" stroke-width="2" points="{" ".join(coords)}" />')
        for n, t in series:
            parts.append(
                f'<circle cx="{scale_x(n):.2f}" cy="{scale_y(t):.2f}" r="4" fill="{color}" stroke="white" stroke-width="1.5">'
                f'<title>{name}: n={n:,}, t={t:.3f}s</title></circle>'
            )

    # Legend
    legend_x, legend_y = width - margin_right - 200, margin_top + 10
    line_height = 22
    parts.append(f'<rect x="{legend_x - 10}" y="{legend_y - 14}" width="180" height="{len(series_data)*line_height + 10}" fill="#f8f8f8" stroke="#ccc" />')
    for i, (name, color) in enumerate(colors.items()):
        y = legend_y + i * line_height
        parts.append(f'<line x1="{legend_x}" y1="{y}" x2="{legend_x + 24}" y2="{y}" stroke="{color}" stroke-width="3" />')
        parts.append(f'<circle cx="{legend_x + 12}" cy="{y}" r="4" fill="{color}" stroke="white" stroke-width="1.5" />')
        parts.append(f'<text x="{legend_x + 36}" y="{y + 5}" >{name}</text>')

    parts.append("</svg>")
    return "\n".join(parts)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="In-place sort benchmark")
    parser.add_argument("--algorithm", action="append", choices=list(ALGORITHMS), help="Sort to time; repeat for several (default: the O(n log n) and counting sorts).")
    parser.add_argument("--sizes", type=int, nargs="+", default=list(DEFAULT_SIZES), help="Input sizes to time.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility.")
    parser.add_argument("--max-value", type=int, default=DEFAULT_MAX_VALUE, help="Largest random value generated.")
    parser.add_argument("--verify", action="store_true", help="Check every result against sorted().")
    parser.add_argument("--svg", type=Path, default=None, help="Write a log-log chart of the timings to this path.")
    args = parser.parse_args(argv)

    if any(n <= 0 for n in args.sizes):
        parser.error("--sizes must be positive")
    if args.max_value < 0:
        parser.error("--max-value must be >= 0")
    if args.algorithm is None:
        args.algorithm = list(DEFAULT_ALGORITHMS)
    return args


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)

    results = run_benchmark(args.algorithm, args.sizes, seed=args.seed, max_value=args.max_value, verify=args.verify)

    for name, series in results.items():
        print(f"\n=== {name} ===")
        if not series:
            print("skipped (input not applicable)")
        for n, elapsed in series:
            print(f"n = {n:>10,}  →  time = {elapsed:.3f} s")

    if args.svg is not None:
        args.svg.parent.mkdir(parents=True, exist_ok=True)
        args.svg.write_text(render_performance_svg(results))
        print(f"\nWrote {args.svg}")


if __name__ == "__main__":
    main()
